# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Demonstration Flask application wiring every middleware helper.

Run with ``python -m common_api.app``; the same factory backs the
integration tests.
"""

import os
from typing import Optional
from flask import Flask, jsonify

from . import responses
from .common import apply_common_configuration
from .config import AppConfig
from .middleware.auth import basic_auth, bearer_auth
from .middleware.cors import allow_all
from .middleware.diagnostics import litmus_test, log_errors
from .middleware.error_handler import EndpointError, reply_with_error, reply_with_masked_error
from .middleware.validation import valid_id, valid_numeric_id, validate_json_body
from .observability import setup_logging, setup_tracing
from .utils.urls import apply_base_url, apply_relative_url

DISTRIBUTION = "common-api"


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """
    Create the demonstration application.

    Args:
        config: Settings captured at startup, read from the environment if omitted

    Returns:
        Configured Flask application
    """
    config = config or AppConfig.from_environment(DISTRIBUTION)

    app = Flask(__name__)
    app.config['ENVIRONMENT'] = os.getenv('ENVIRONMENT', 'development')

    apply_common_configuration(app, config)
    allow_all(app)
    log_errors(app)

    for path, code in (('/status/ok', 200), ('/status/created', 201), ('/status/missing', 404)):
        app.add_url_rule(path, endpoint=f'status_{code}', view_func=responses.status_responder(code))

    app.add_url_rule('/status/unimplemented', view_func=responses.NOT_IMPLEMENTED)

    @app.post('/items')
    @validate_json_body('name')
    def create_item():
        return responses.CREATED()

    @app.get('/items/<id>')
    @valid_numeric_id()
    def get_item(id):
        return jsonify({"id": id})

    @app.get('/slugs/<slug>')
    @valid_id('slug')
    def get_slug(slug):
        return jsonify({"slug": slug})

    @app.get('/secure/basic')
    @basic_auth(os.getenv('BASIC_AUTH_USER', 'user'), os.getenv('BASIC_AUTH_PASSWORD', 'pass'))
    def secure_basic():
        return responses.OK()

    @app.get('/secure/bearer')
    @bearer_auth(os.getenv('BEARER_TOKEN', 'mytoken'))
    def secure_bearer():
        return responses.OK()

    @app.get('/errors/custom')
    def custom_error():
        return reply_with_error(477, 'custom_error')

    @app.get('/errors/masked')
    def masked_error():
        return reply_with_masked_error(477, 'custom_error')

    @app.get('/errors/raised')
    def raised_error():
        raise EndpointError('Upstream unavailable', 503)

    @app.get('/links/self')
    def self_link():
        return apply_base_url('/self')

    @app.get('/links/child')
    def child_link():
        return apply_relative_url('/child')

    @app.get('/litmus')
    @litmus_test()
    def litmus():
        return responses.OK()

    app.add_url_rule('/moved', view_func=responses.redirect('/status/ok', permanent=True))

    return app


if __name__ == '__main__':
    setup_logging()
    application = create_app()
    setup_tracing(application.extensions['common_api'])
    application.run(
        host='0.0.0.0',
        port=int(os.getenv('PORT', 5000)),
        debug=application.config['ENVIRONMENT'] == 'development'
    )
