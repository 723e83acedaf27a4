# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Process-wide configuration for the common endpoints.

The launch timestamp and the version string are captured once, when the
configuration is built at startup, and handed to ``apply_common_configuration``.
"""

import os
import logging
from datetime import datetime, timezone
from importlib import metadata
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0.0.0"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def read_package_version(distribution: str) -> str:
    """
    Read the version of an installed distribution.

    Args:
        distribution: Distribution name as published on the index

    Returns:
        Version string, or ``DEFAULT_VERSION`` if the distribution is not installed
    """
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        logger.warning(
            "Package metadata not found, using default version",
            extra={"distribution": distribution, "version": DEFAULT_VERSION}
        )
        return DEFAULT_VERSION


class AppConfig(BaseModel):
    """Immutable settings shared by the informational endpoints."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(default=DEFAULT_VERSION, description="Host project version")
    running_since: datetime = Field(default_factory=utc_now, description="Process launch timestamp")
    log_requests: bool = Field(default=True, description="Install the request logger")
    error_response_format: Literal["json", "text"] = Field(
        default="json", description="Body format of structured error replies"
    )
    service_name: str = Field(default="common-api", description="Service name for tracing")

    @classmethod
    def from_package(cls, distribution: str, **overrides) -> "AppConfig":
        """Build a configuration using the version of an installed distribution."""
        values = {"version": read_package_version(distribution), "service_name": distribution}
        values.update(overrides)
        return cls(**values)

    @classmethod
    def from_environment(cls, distribution: str) -> "AppConfig":
        """
        Build a configuration from package metadata and environment variables.

        Recognised variables: ``LOG_REQUESTS``, ``ERROR_RESPONSE_FORMAT``,
        ``SERVICE_NAME`` and ``SERVICE_VERSION``.
        """
        overrides = {
            "log_requests": os.getenv("LOG_REQUESTS", "true").lower() == "true",
            "error_response_format": os.getenv("ERROR_RESPONSE_FORMAT", "json").lower(),
        }

        service_name = os.getenv("SERVICE_NAME")
        if service_name:
            overrides["service_name"] = service_name

        version = os.getenv("SERVICE_VERSION")
        if version:
            overrides["version"] = version

        return cls.from_package(distribution, **overrides)
