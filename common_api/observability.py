# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
OpenTelemetry and logging setup for services using the common middleware.
"""

import os
import logging
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource

from .config import AppConfig

LOG_LEVELS = {
    'production': logging.WARNING,
    'staging': logging.INFO,
    'development': logging.DEBUG
}


def setup_tracing(config: AppConfig, enabled: bool = None) -> bool:
    """
    Install a console-exporting tracer provider.

    Args:
        config: Application configuration providing service name and version
        enabled: Override for the ``OTEL_ENABLED`` environment variable

    Returns:
        True if a tracer provider was installed
    """
    if enabled is None:
        enabled = os.getenv('OTEL_ENABLED', 'false').lower() == 'true'

    if not enabled:
        return False

    resource = Resource.create({
        "service.name": config.service_name,
        "service.version": config.version,
        "deployment.environment": os.getenv('ENVIRONMENT', 'development')
    })

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(tracer_provider)
    return True


def setup_logging(environment: str = None) -> None:
    """Configure root logging for the given environment."""
    environment = environment or os.getenv('ENVIRONMENT', 'development')
    log_level = LOG_LEVELS.get(environment, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        handlers=[logging.StreamHandler()]
    )

    if environment == 'production':
        logging.getLogger('werkzeug').setLevel(logging.WARNING)
