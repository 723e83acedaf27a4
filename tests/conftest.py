# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import base64
import pytest
from datetime import datetime, timezone
from flask import Flask

from common_api.config import AppConfig


def encode_basic(username: str, password: str) -> str:
    """Authorization header value for Basic credentials."""
    token = base64.b64encode(f"{username}:{password}".encode("latin-1")).decode("ascii")
    return f"Basic {token}"


@pytest.fixture
def basic_header():
    """Builder for Basic Authorization header values."""
    return encode_basic


@pytest.fixture
def app():
    """Bare Flask application in testing mode."""
    app = Flask(__name__)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Test client for the bare application."""
    return app.test_client()


@pytest.fixture
def app_config():
    """Fixed configuration for the informational endpoints."""
    return AppConfig(
        version="2.3.4",
        running_since=datetime(2024, 1, 1, tzinfo=timezone.utc),
        log_requests=False,
        service_name="common-api-test"
    )
