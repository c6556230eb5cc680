from __future__ import annotations

import logging
import os

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

_OTEL_CONFIGURED = False
logger = logging.getLogger(__name__)


def configure_otel() -> None:
    global _OTEL_CONFIGURED
    if _OTEL_CONFIGURED:
        return

    service_name = os.getenv("OTEL_SERVICE_NAME", "bistro-orders")
    exporter_name = os.getenv("OTEL_TRACES_EXPORTER", "none").lower()

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    if exporter_name == "console":
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    elif exporter_name != "none":
        logger.warning("otel_exporter_unsupported: %s", exporter_name)

    trace.set_tracer_provider(provider)
    _OTEL_CONFIGURED = True
