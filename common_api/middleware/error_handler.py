# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Structured error replies.

Every error leaving the middleware has the shape ``{"status": int, "message": str}``
and carries the message in the HTTP reason phrase as well. Server errors are
logged as incidents before the reply is built.
"""

from flask import Response, current_app, has_app_context, jsonify
from typing import Optional
from opentelemetry import trace
import logging
import uuid

from ..models import ErrorReply

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Invalid Request"
MASKED_ERROR_TEMPLATE = "An error occurred. Reference: {reference}"


class EndpointError(Exception):
    """Exception carrying the HTTP status of the reply it should produce."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status


def error_message(error: BaseException) -> str:
    """Message text of an exception, falling back to its class name."""
    return str(error) or error.__class__.__name__


def reason_phrase(message: str) -> str:
    """Fold a message into a single latin-1 line usable as an HTTP reason phrase."""
    folded = " ".join(message.splitlines())
    return folded.encode("latin-1", "replace").decode("latin-1")


def uses_text_errors() -> bool:
    """Whether the current app is configured for plain-text error bodies."""
    if not has_app_context():
        return False
    return current_app.config.get("ERROR_RESPONSE_FORMAT", "json") == "text"


def reply_with_error(
    status: int = 500,
    message: str = DEFAULT_ERROR_MESSAGE,
    error: Optional[BaseException] = None
) -> Response:
    """
    Build a structured error response.

    Args:
        status: HTTP status code
        message: Error message sent to the client
        error: Exception whose message replaces ``message`` when given

    Returns:
        Response with the status, reason phrase and error body set
    """
    if error is not None:
        message = error_message(error)

    with tracer.start_as_current_span("error_reply") as span:
        span.set_attributes({
            "error.status": status,
            "error.incident": status >= 500
        })

        if status >= 500:
            logger.error(
                "server.incident",
                extra={
                    "extra_fields": {
                        "name": "Server Error",
                        "message": message,
                        "status": status
                    }
                }
            )

        if uses_text_errors():
            response = Response(message, mimetype="text/plain")
        else:
            response = jsonify(ErrorReply(status=status, message=message).model_dump())

        response.status = f"{status} {reason_phrase(message)}"
        return response


def reply_with_masked_error(
    status: int = 500,
    message: str = DEFAULT_ERROR_MESSAGE,
    error: Optional[BaseException] = None
) -> Response:
    """
    Build an error response that hides the real message behind a reference id.

    The real status and message are only written to the server log, tagged
    with the reference id returned to the client.
    """
    if error is not None:
        message = error_message(error)

    reference = str(uuid.uuid4())

    logger.error(
        f"[{reference}] {status} {message}",
        extra={
            "extra_fields": {
                "reference": reference,
                "status": status,
                "message": message
            }
        }
    )

    return reply_with_error(status, MASKED_ERROR_TEMPLATE.format(reference=reference))
