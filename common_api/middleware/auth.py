# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Authentication decorators for Basic and Bearer Authorization headers.

Both decorators accept either static credentials or a predicate used for the
check. Predicates run synchronously inside the request.
"""

from functools import wraps
from flask import Response, request
from typing import Callable, Optional
from opentelemetry import trace
import base64
import binascii
import logging
import re

from ..models import Credentials
from ..utils.context import get_endpoint_context

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

BEARER_PREFIX = re.compile(r"^\s*bearer\s*", re.IGNORECASE)


def atob(value: str) -> str:
    """
    Decode base64 text the way the browser's ``window.atob`` does.

    Raises:
        ValueError: If the value is not valid base64
    """
    return base64.b64decode(value, validate=True).decode("latin-1")


def parse_basic_credentials(header: Optional[str]) -> Optional[Credentials]:
    """
    Extract credentials from a Basic Authorization header.

    Args:
        header: Raw Authorization header value

    Returns:
        Credentials, or None if the header is missing or malformed
    """
    if not header or not header.split():
        return None

    encoded = header.split()[-1]
    try:
        decoded = atob(encoded)
    except (binascii.Error, ValueError):
        return None

    parts = decoded.split(":")
    if len(parts) != 2:
        return None

    return Credentials(username=parts[0], password=parts[1])


def extract_bearer_token(header: Optional[str]) -> Optional[str]:
    """
    Strip the ``Bearer`` scheme from an Authorization header.

    Returns:
        Token string, or None if the header is missing or empty
    """
    if not header:
        return None

    token = BEARER_PREFIX.sub("", header, count=1).strip()
    return token or None


def basic_challenge() -> Response:
    """401 response asking the client for Basic credentials."""
    response = Response(status=401)
    response.headers["WWW-Authenticate"] = f"Basic realm={request.headers.get('Host', '')}"
    return response


def basic_auth(
    username: Optional[str] = None,
    password: Optional[str] = None,
    verify: Optional[Callable] = None
) -> Callable:
    """
    Decorator requiring HTTP Basic authentication.

    With ``verify`` the check is delegated to
    ``verify(username, password, grant, deny)``: ``grant()`` runs the view,
    ``deny()`` builds the 401 challenge, and the predicate returns whichever
    result it produced. Returning None counts as a denial.

    Args:
        username: Expected username
        password: Expected password
        verify: Credential predicate replacing the static comparison

    Returns:
        Decorator function
    """
    if verify is None and (username is None or password is None):
        raise ValueError("basic_auth requires a username and password or a verify function")

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            with tracer.start_as_current_span("auth.basic") as span:
                credentials = parse_basic_credentials(request.headers.get("Authorization"))
                if credentials is None:
                    span.set_attribute("auth.result", "missing_credentials")
                    logger.warning(
                        "Basic authentication failed: missing or malformed credentials",
                        extra={"path": request.path}
                    )
                    return basic_challenge()

                def grant():
                    span.set_attribute("auth.result", "success")
                    get_endpoint_context().credentials = credentials
                    return f(*args, **kwargs)

                def deny():
                    span.set_attribute("auth.result", "denied")
                    logger.warning(
                        "Basic authentication failed: invalid credentials",
                        extra={"path": request.path, "username": credentials.username}
                    )
                    return basic_challenge()

                if verify is not None:
                    result = verify(credentials.username, credentials.password, grant, deny)
                    return deny() if result is None else result

                if credentials.username == username and credentials.password == password:
                    return grant()
                return deny()

        return decorated_function
    return decorator


def bearer_auth(
    token: Optional[str] = None,
    ignore_case: bool = False,
    verify: Optional[Callable[[str], bool]] = None
) -> Callable:
    """
    Decorator requiring a Bearer token.

    Args:
        token: Expected token
        ignore_case: Compare the token case-insensitively
        verify: Predicate called with the presented token instead of comparing

    Returns:
        Decorator function
    """
    if verify is None and token is None:
        raise ValueError("bearer_auth requires a token or a verify function")

    def matches(presented: str) -> bool:
        if verify is not None:
            return bool(verify(presented))
        if ignore_case:
            return presented.casefold() == token.casefold()
        return presented == token

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            with tracer.start_as_current_span("auth.bearer") as span:
                presented = extract_bearer_token(request.headers.get("Authorization"))
                if presented is None:
                    span.set_attribute("auth.result", "missing_token")
                    logger.warning("Bearer authentication failed: missing token")
                    return Response(status=401)

                if not matches(presented):
                    span.set_attribute("auth.result", "invalid_token")
                    logger.warning(
                        "Bearer authentication failed: invalid token",
                        extra={"path": request.path}
                    )
                    return Response(status=401)

                span.set_attribute("auth.result", "success")
                get_endpoint_context().token = presented
                return f(*args, **kwargs)

        return decorated_function
    return decorator
