"""Abstract base class for tracing backends."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from ci_tracer.models.base import TagValue


@dataclass(frozen=True, kw_only=True)
class SpanTracer[S](ABC):
    """Abstract base for tracing backends.

    Spans are recorded after the fact: both ends carry an explicit timestamp
    taken from the webhook rather than the current time.

    Generic type S is the backend's handle for an open span. It is passed back
    to ``finish_span`` and used as the parent of child spans.
    """

    @abstractmethod
    def start_span(
        self,
        name: str,
        *,
        start_time: datetime,
        tags: Mapping[str, TagValue],
        parent: S | None = None,
    ) -> S:
        """Open a span.

        Args:
            name: Operation name (e.g., "gitlab-pipeline")
            start_time: Timezone-aware instant the span started at
            tags: Searchable key/value metadata
            parent: Handle of the parent span, None for a root span

        Returns:
            Handle of the open span

        """

    @abstractmethod
    def finish_span(self, span: S, *, end_time: datetime) -> None:
        """Close a span at the given instant."""
