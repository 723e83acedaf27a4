# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Per-request context populated by the validators and authentication decorators.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from flask import g

from ..models import Credentials

CONTEXT_ATTRIBUTE = "endpoint_context"


@dataclass
class EndpointContext:
    """Values established by middleware for the current request."""
    params: Dict[str, Any] = field(default_factory=dict)
    credentials: Optional[Credentials] = None
    token: Optional[str] = None


def get_endpoint_context() -> EndpointContext:
    """
    Get the endpoint context of the current request, creating it on first use.

    Returns:
        EndpointContext stored on Flask's ``g`` object
    """
    context = g.get(CONTEXT_ATTRIBUTE)
    if context is None:
        context = EndpointContext()
        setattr(g, CONTEXT_ATTRIBUTE, context)
    return context
