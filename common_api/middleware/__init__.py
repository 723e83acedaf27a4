# SPDX-License-Identifier: Apache-2.0

"""
Middleware package for request processing.

This package contains decorators and Flask hooks for validation,
authentication, CORS, diagnostics and structured error replies.
"""
