# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
One-shot configuration shared by every service: header hygiene, request
logging and the ``/ping``, ``/version`` and ``/info`` endpoints.
"""

from flask import Flask, Response, jsonify
from typing import List
import logging

from .config import AppConfig
from .middleware.diagnostics import log_requests
from .models import InfoResponse

logger = logging.getLogger(__name__)

EXTENSION_KEY = "common_api"
IDENTIFYING_HEADERS = ("X-Powered-By", "Server")


def registered_routes(app: Flask) -> List[str]:
    """Sorted, de-duplicated rule paths currently registered on the app."""
    return sorted({rule.rule for rule in app.url_map.iter_rules()})


def apply_common_configuration(app: Flask, config: AppConfig) -> Flask:
    """
    Apply the common configuration to a Flask application.

    Args:
        app: Flask application
        config: Settings captured at startup

    Returns:
        The same application
    """
    app.extensions[EXTENSION_KEY] = config
    app.config["ERROR_RESPONSE_FORMAT"] = config.error_response_format

    @app.after_request
    def remove_identifying_headers(response):
        for header in IDENTIFYING_HEADERS:
            response.headers.pop(header, None)
        return response

    if config.log_requests:
        log_requests(app)

    @app.get("/ping")
    def ping():
        return Response(status=200)

    @app.get("/version")
    def version():
        return Response(config.version, status=200, mimetype="text/plain")

    @app.get("/info")
    def info():
        body = InfoResponse(
            running_since=config.running_since,
            version=config.version,
            routes=registered_routes(app)
        )
        return jsonify(body.to_json())

    logger.info(
        "Common configuration applied",
        extra={
            "version": config.version,
            "log_requests": config.log_requests,
            "error_response_format": config.error_response_format
        }
    )

    return app
