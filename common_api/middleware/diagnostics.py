# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Diagnostic middleware: request and header logging, error logging and a
marker decorator for checking middleware wiring.
"""

from functools import wraps
from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException
from typing import Callable, Optional
from rich.console import Console
from rich.markup import escape
import logging

from .error_handler import EndpointError, reply_with_error
from ..config import utc_now

logger = logging.getLogger(__name__)

console = Console(stderr=True)

METHOD_STYLES = {
    "GET": "green",
    "POST": "yellow",
    "PUT": "blue",
    "PATCH": "magenta",
    "DELETE": "red",
    "HEAD": "cyan",
    "OPTIONS": "cyan"
}

DEFAULT_LITMUS_MESSAGE = "LITMUS TEST"


def format_request_line(method: str, path: str, timestamp: Optional[str] = None) -> str:
    """Rich markup for a single request log line."""
    timestamp = timestamp or utc_now().isoformat()
    style = METHOD_STYLES.get(method.upper(), "white")
    return f"[dim]{timestamp}[/dim] [bold {style}]{method.upper()}[/bold {style}] {escape(path)}"


def log_requests(app: Flask, output: Optional[Console] = None) -> None:
    """
    Print one colourised line for every request the app receives.

    Args:
        app: Flask application
        output: Console to print to, defaults to stderr
    """
    target = output or console

    @app.before_request
    def print_request_line():
        target.print(format_request_line(request.method, request.path), highlight=False)


def log_request_headers(app: Flask) -> None:
    """Log every request header, one line each, for debugging proxies and gateways."""

    @app.before_request
    def dump_request_headers():
        for name, value in request.headers.items():
            logger.info(f"{name.lower()}: {value}")


def log_errors(app: Flask) -> None:
    """
    Log unhandled errors and answer the ones no other handler formats.

    ``HTTPException`` is logged at WARNING and passed back to Flask unchanged.
    ``EndpointError`` becomes a structured error reply. Anything else is logged
    at ERROR with its traceback and answered with a 500 carrying the raw error
    text.
    """

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            logger.warning(
                f"HTTP error: {error.code} {error.name}",
                extra={
                    "extra_fields": {
                        "status": error.code,
                        "path": request.path,
                        "method": request.method
                    }
                }
            )
            return error

        logger.error(
            f"Unhandled error: {error.__class__.__name__}",
            extra={
                "extra_fields": {
                    "error_class": error.__class__.__name__,
                    "error_message": str(error),
                    "path": request.path,
                    "method": request.method
                }
            },
            exc_info=error
        )

        if isinstance(error, EndpointError):
            return reply_with_error(error.status, error=error)

        return Response(str(error), status=500, mimetype="text/plain")


def litmus_test(message: str = DEFAULT_LITMUS_MESSAGE) -> Callable:
    """
    Decorator logging a marker before the view runs.

    Args:
        message: Marker written to the log

    Returns:
        Decorator function
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            logger.info(message, extra={"path": request.path})
            return f(*args, **kwargs)

        return decorated_function
    return decorator
