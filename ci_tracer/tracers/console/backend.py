"""Console tracer backend, for local debugging."""

import sys
from collections.abc import Generator
from contextlib import contextmanager

from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from ci_tracer.tracers.console.config import ConsoleConfig
from ci_tracer.tracers.otel import OpenTelemetryTracer, managed_tracer


@contextmanager
def console_tracer(config: ConsoleConfig) -> Generator[OpenTelemetryTracer]:
    """Create a tracer printing every finished span as JSON."""
    processor = SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stdout))
    with managed_tracer(config.service_name, processor) as tracer:
        yield tracer
