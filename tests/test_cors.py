# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for CORS middleware.
"""

import pytest

from common_api import responses
from common_api.middleware.cors import CORSMiddleware, allow_all


class TestCORSMiddleware:
    """Test CORS header handling."""

    @pytest.fixture(autouse=True)
    def routes(self, app):
        """Register routes under test."""
        app.add_url_rule('/test', endpoint='test', view_func=responses.OK)

    def test_wildcard_for_remote_host(self, app, client):
        """Test the wildcard origin for remote hosts."""
        allow_all(app)

        response = client.get('/test', base_url='http://example.com')

        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_localhost_narrowed_to_host(self, app, client):
        """Test localhost requests get their own origin."""
        allow_all(app)

        response = client.get('/test', base_url='http://localhost:5173')

        assert response.headers["Access-Control-Allow-Origin"] == "localhost:5173"

    def test_configured_host(self, app, client):
        """Test a configured origin is sent as is."""
        allow_all(app, 'https://app.example.com')

        response = client.get('/test', base_url='http://localhost')

        assert response.headers["Access-Control-Allow-Origin"] == "https://app.example.com"

    def test_allow_headers_and_methods(self, app, client):
        """Test the default allowed headers and methods."""
        allow_all(app)

        response = client.get('/test')

        assert "Authorization" in response.headers["Access-Control-Allow-Headers"]
        assert "Content-Type" in response.headers["Access-Control-Allow-Headers"]
        assert "DELETE" in response.headers["Access-Control-Allow-Methods"]
        assert "OPTIONS" in response.headers["Access-Control-Allow-Methods"]

    def test_headers_added_to_error_responses(self, app, client):
        """Test CORS headers on error responses."""
        allow_all(app)

        response = client.get('/missing', base_url='http://example.com')

        assert response.status_code == 404
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_resolve_origin(self, app):
        """Test origin resolution."""
        cors_middleware = CORSMiddleware(app)

        assert cors_middleware.resolve_origin("localhost") == "localhost"
        assert cors_middleware.resolve_origin("api.example.com") == "*"
        assert cors_middleware.resolve_origin(None) == "*"

    def test_custom_lists(self, app, client):
        """Test custom header and method lists."""
        allow_all(app, allowed_headers=["X-Custom"], allowed_methods=["GET"])

        response = client.get('/test')

        assert response.headers["Access-Control-Allow-Headers"] == "X-Custom"
        assert response.headers["Access-Control-Allow-Methods"] == "GET"
