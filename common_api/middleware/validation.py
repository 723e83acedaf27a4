# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request validation decorators for JSON bodies and path parameters.
Invalid requests are answered with a 400 structured error reply.
"""

from functools import wraps
from flask import request
from typing import Callable, List, Mapping, Sequence
from opentelemetry import trace
import logging
import re

from .error_handler import reply_with_error
from ..utils.context import get_endpoint_context

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

NO_BODY_MESSAGE = "No JSON body supplied."
NO_ID_MESSAGE = "No ID specified in URL."
NUMERIC_ID = re.compile(r"[+-]?[0-9]+")


def missing_fields(body: Mapping, fields: Sequence[str]) -> List[str]:
    """
    Find the required fields absent from a JSON object.

    Args:
        body: Parsed JSON object
        fields: Required field names

    Returns:
        Missing field names in the order they were supplied
    """
    return [name for name in fields if name not in body]


def validate_json_body(*fields: str) -> Callable:
    """
    Decorator requiring a JSON object body, optionally with specific fields.

    Args:
        fields: Names of fields that must be present in the body

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            with tracer.start_as_current_span("validation.validate_json_body") as span:
                span.set_attributes({
                    "http.method": request.method,
                    "http.path": request.path
                })

                body = request.get_json(silent=True)
                if not isinstance(body, dict):
                    span.set_attribute("validation.result", "no_body")
                    logger.warning(
                        "Request body validation failed: no JSON object",
                        extra={"path": request.path, "method": request.method}
                    )
                    return reply_with_error(400, NO_BODY_MESSAGE)

                missing = missing_fields(body, fields)
                if missing:
                    span.set_attribute("validation.result", "missing_fields")
                    logger.warning(
                        "Request body validation failed: missing fields",
                        extra={
                            "path": request.path,
                            "method": request.method,
                            "missing": missing
                        }
                    )
                    return reply_with_error(400, f"Missing parameters: {', '.join(missing)}")

                span.set_attribute("validation.result", "success")
                return f(*args, **kwargs)

        return decorated_function
    return decorator


def valid_numeric_id(parameter: str = "id") -> Callable:
    """
    Decorator requiring a base-10 integer path parameter.

    The parsed integer replaces the view argument of the same name and is
    recorded in the endpoint context.

    Args:
        parameter: Name of the path parameter

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            raw = (request.view_args or {}).get(parameter)
            if raw is None or str(raw) == "":
                return reply_with_error(400, NO_ID_MESSAGE)

            candidate = str(raw).strip()
            if not NUMERIC_ID.fullmatch(candidate):
                logger.debug(
                    "Rejected non-numeric ID",
                    extra={"parameter": parameter, "value": raw}
                )
                return reply_with_error(400, f'"{raw}" is an invalid numeric ID.')

            value = int(candidate, 10)
            get_endpoint_context().params[parameter] = value
            if parameter in kwargs:
                kwargs[parameter] = value
            return f(*args, **kwargs)

        return decorated_function
    return decorator


def valid_id(parameter: str = "id") -> Callable:
    """
    Decorator requiring a non-blank path parameter.

    The trimmed value replaces the view argument of the same name and is
    recorded in the endpoint context.

    Args:
        parameter: Name of the path parameter

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            raw = (request.view_args or {}).get(parameter)
            value = str(raw).strip() if raw is not None else ""
            if not value:
                return reply_with_error(400, NO_ID_MESSAGE)

            get_endpoint_context().params[parameter] = value
            if parameter in kwargs:
                kwargs[parameter] = value
            return f(*args, **kwargs)

        return decorated_function
    return decorator
