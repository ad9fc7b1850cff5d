"""OTLP tracer backend."""

from collections.abc import Generator
from contextlib import contextmanager

from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ci_tracer.tracers.otel import OpenTelemetryTracer, managed_tracer
from ci_tracer.tracers.otlp.config import OTLPConfig


@contextmanager
def otlp_tracer(config: OTLPConfig) -> Generator[OpenTelemetryTracer]:
    """Create a tracer exporting batches of spans to an OTLP endpoint."""
    exporter = OTLPSpanExporter(
        endpoint=config.endpoint,
        headers=dict(config.headers),
        timeout=config.timeout,
    )
    with managed_tracer(config.service_name, BatchSpanProcessor(exporter)) as tracer:
        yield tracer
