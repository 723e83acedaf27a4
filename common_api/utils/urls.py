# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
URL builders based on the current request's scheme and Host header.
"""

from flask import request


def apply_base_url(path: str = "", force_https: bool = False) -> str:
    """
    Build an absolute URL on the host the client addressed.

    Args:
        path: Path appended after the host, e.g. ``/items/1``
        force_https: Use ``https`` regardless of the request scheme

    Returns:
        URL of the form ``scheme://host<path>``
    """
    scheme = "https" if force_https else request.scheme
    host = request.headers.get("Host", request.host)
    return f"{scheme}://{host}{path}"


def apply_relative_url(path: str = "", force_https: bool = False) -> str:
    """
    Build an absolute URL below the current request path.

    Args:
        path: Suffix appended after the current path
        force_https: Use ``https`` regardless of the request scheme

    Returns:
        URL of the form ``scheme://host<current path><path>``
    """
    return apply_base_url(request.path.rstrip("/") + path, force_https)
