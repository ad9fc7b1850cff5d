"""OpenTelemetry implementation of the tracer capability."""

from collections.abc import Generator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import SpanProcessor, TracerProvider

from ci_tracer.models.base import TagValue
from ci_tracer.tracers.base import SpanTracer

INSTRUMENTATION_NAME = "ci_tracer"

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_nanoseconds(moment: datetime) -> int:
    """Convert an aware datetime to nanoseconds since the epoch."""
    return (moment - EPOCH) // timedelta(microseconds=1) * 1_000


@dataclass(frozen=True, kw_only=True)
class OpenTelemetryTracer(SpanTracer[trace.Span]):
    """Records spans through an OpenTelemetry tracer.

    Root spans are started from an empty context so that a span active in the
    calling code never becomes their parent.
    """

    tracer: trace.Tracer = field(repr=False)

    def start_span(
        self,
        name: str,
        *,
        start_time: datetime,
        tags: Mapping[str, TagValue],
        parent: trace.Span | None = None,
    ) -> trace.Span:
        """Start an OpenTelemetry span with the tags as attributes."""
        context = Context() if parent is None else trace.set_span_in_context(parent)
        return self.tracer.start_span(
            name,
            context=context,
            attributes=dict(tags),
            start_time=to_nanoseconds(start_time),
        )

    def finish_span(self, span: trace.Span, *, end_time: datetime) -> None:
        """End the span at the given instant."""
        span.end(end_time=to_nanoseconds(end_time))


@contextmanager
def managed_tracer(
    service_name: str, processor: SpanProcessor
) -> Generator[OpenTelemetryTracer]:
    """Create a tracer backed by its own provider, flushed and shut down on exit.

    The provider is never installed as the global tracer provider.
    """
    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    provider.add_span_processor(processor)
    try:
        yield OpenTelemetryTracer(tracer=provider.get_tracer(INSTRUMENTATION_NAME))
    finally:
        provider.shutdown()
