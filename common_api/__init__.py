# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Flask middleware: request validation, Basic and Bearer
authentication, structured error replies, CORS, request diagnostics and the
common informational endpoints.
"""

from .config import AppConfig
from .common import apply_common_configuration
from .models import Credentials, ErrorReply, InfoResponse
from .middleware.auth import atob, basic_auth, bearer_auth
from .middleware.cors import CORSMiddleware, allow_all
from .middleware.diagnostics import litmus_test, log_errors, log_request_headers, log_requests
from .middleware.error_handler import EndpointError, reply_with_error, reply_with_masked_error
from .middleware.validation import valid_id, valid_numeric_id, validate_json_body
from .responses import redirect, status_responder
from .utils.context import EndpointContext, get_endpoint_context
from .utils.urls import apply_base_url, apply_relative_url

__all__ = [
    "AppConfig",
    "apply_common_configuration",
    "Credentials",
    "ErrorReply",
    "InfoResponse",
    "atob",
    "basic_auth",
    "bearer_auth",
    "CORSMiddleware",
    "allow_all",
    "litmus_test",
    "log_errors",
    "log_request_headers",
    "log_requests",
    "EndpointError",
    "reply_with_error",
    "reply_with_masked_error",
    "valid_id",
    "valid_numeric_id",
    "validate_json_body",
    "redirect",
    "status_responder",
    "EndpointContext",
    "get_endpoint_context",
    "apply_base_url",
    "apply_relative_url"
]
