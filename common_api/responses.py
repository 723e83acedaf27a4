# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Ready-made views answering with a fixed status or a redirect.

Every standard status code is available twice: as ``HTTP<code>`` and under
its ``http.HTTPStatus`` name, e.g. ``HTTP404`` and ``NOT_FOUND``.
"""

from flask import Response
from http import HTTPStatus
from typing import Callable, Dict
import itertools
import logging

logger = logging.getLogger(__name__)

_responders: Dict[int, Callable] = {}
_redirect_ids = itertools.count(1)


def status_responder(code: int) -> Callable:
    """
    View answering with ``code`` and an empty body.

    Args:
        code: HTTP status code

    Returns:
        View function ignoring its arguments
    """
    if code in _responders:
        return _responders[code]

    def respond(*args, **kwargs):
        return Response(status=code)

    respond.__name__ = f"HTTP{code}"
    respond.__qualname__ = respond.__name__
    _responders[code] = respond
    return respond


def _alias(code: int, name: str) -> Callable:
    numeric = status_responder(code)

    def respond(*args, **kwargs):
        return numeric(*args, **kwargs)

    respond.__name__ = name
    respond.__qualname__ = respond.__name__
    return respond


# __members__ keeps alias names such as UNPROCESSABLE_ENTITY
for _name, _status in HTTPStatus.__members__.items():
    globals()[f"HTTP{_status.value}"] = status_responder(_status.value)
    globals()[_name] = _alias(_status.value, _name)


def redirect_status(permanent: bool = False, method_change: bool = False) -> int:
    """
    Status code for a redirect.

    Args:
        permanent: The resource moved for good
        method_change: The client may switch to GET when following

    Returns:
        301, 303, 307 or 308
    """
    if permanent:
        return 301 if method_change else 308
    return 303 if method_change else 307


def redirect(url: str, permanent: bool = False, method_change: bool = False) -> Callable:
    """
    View redirecting every request to ``url``.

    Args:
        url: Target sent in the Location header
        permanent: Use a permanent redirect status
        method_change: Allow the client to change the request method

    Returns:
        View function
    """
    status = redirect_status(permanent, method_change)

    def respond(*args, **kwargs):
        logger.debug("Redirecting request", extra={"location": url, "status": status})
        response = Response(status=status)
        response.headers["Location"] = url
        return response

    # Default Flask endpoint, unique per view
    respond.__name__ = f"redirect_{status}_{next(_redirect_ids)}"
    respond.__qualname__ = respond.__name__
    return respond
