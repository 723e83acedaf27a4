# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
CORS (Cross-Origin Resource Sharing) middleware.
Adds permissive CORS headers to every response of a Flask application.
"""

from flask import Flask, request
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

WILDCARD = "*"

DEFAULT_ALLOWED_HEADERS = [
    "Origin",
    "X-Requested-With",
    "Content-Type",
    "Accept",
    "Authorization"
]

DEFAULT_ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


class CORSMiddleware:
    """CORS middleware for Flask applications."""

    def __init__(
        self,
        app: Flask,
        host: str = WILDCARD,
        allowed_headers: Optional[List[str]] = None,
        allowed_methods: Optional[List[str]] = None
    ):
        """
        Initialize CORS middleware.

        Args:
            app: Flask application
            host: Allowed origin, ``*`` for any
            allowed_headers: Headers listed in Access-Control-Allow-Headers
            allowed_methods: Methods listed in Access-Control-Allow-Methods
        """
        self.app = app
        self.host = host
        self.allowed_headers = allowed_headers or DEFAULT_ALLOWED_HEADERS
        self.allowed_methods = allowed_methods or DEFAULT_ALLOWED_METHODS

        self.register_cors_handlers()

    def resolve_origin(self, host_header: Optional[str]) -> str:
        """
        Value of Access-Control-Allow-Origin for a request.

        A wildcard configuration is narrowed to the request host when the
        client is addressing ``localhost``.
        """
        if self.host == WILDCARD and host_header and host_header.startswith("localhost"):
            return host_header
        return self.host

    def add_cors_headers(self, response, host_header: Optional[str] = None):
        """Add CORS headers to a response."""
        response.headers["Access-Control-Allow-Origin"] = self.resolve_origin(host_header)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(self.allowed_headers)
        response.headers["Access-Control-Allow-Methods"] = ", ".join(self.allowed_methods)
        return response

    def register_cors_handlers(self):
        """Register CORS handlers with Flask application."""

        @self.app.after_request
        def add_cors_headers_to_response(response):
            return self.add_cors_headers(response, request.headers.get("Host"))


def allow_all(app: Flask, host: str = WILDCARD, **kwargs) -> CORSMiddleware:
    """
    Configure CORS for a Flask application.

    Args:
        app: Flask application
        host: Allowed origin, ``*`` for any
        **kwargs: Further CORSMiddleware options

    Returns:
        Configured CORSMiddleware instance
    """
    logger.debug("CORS enabled", extra={"allowed_origin": host})
    return CORSMiddleware(app, host, **kwargs)
