"""Translation of GitLab pipeline hooks into traces."""

import logging
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime

from ci_tracer.config import InstanceConfig
from ci_tracer.errors import (
    JobError,
    JobTimestampError,
    PipelineTimestampError,
    SpanEmissionError,
    TimestampParseError,
)
from ci_tracer.ingesters.gitlab.models import Build, PipelineHook
from ci_tracer.models.outcome import JobOutcome
from ci_tracer.timestamps import parse_gitlab_time
from ci_tracer.tracers.base import SpanTracer

log = logging.getLogger(__name__)

PIPELINE_SPAN_NAME = "gitlab-pipeline"
JOB_SPAN_NAME = "gitlab-job"


@dataclass(frozen=True, kw_only=True)
class GitLabIngester[S]:
    """Builds one trace per pipeline hook.

    The pipeline is the root span and every build that ran is a child span.
    Spans are recorded retroactively with the timestamps from the hook.
    """

    tracer: SpanTracer[S]

    def ingest_pipeline(
        self, hook: PipelineHook, instance: InstanceConfig
    ) -> Sequence[JobOutcome]:
        """Trace a pipeline and its builds.

        A build that cannot be traced is logged and reported in its outcome;
        it never prevents the other builds or the pipeline span from being
        recorded.

        Args:
            hook: Decoded pipeline hook
            instance: Instance the hook was sent by

        Returns:
            One outcome per build, in the order of the hook

        Raises:
            PipelineTimestampError: If the pipeline creation or finish time
                cannot be parsed. No span is recorded in that case.

        """
        attributes = hook.object_attributes
        pipeline_start = self._parse_pipeline_time(
            attributes.id, "created_at", attributes.created_at
        )
        pipeline_end = self._parse_pipeline_time(
            attributes.id, "finished_at", attributes.finished_at
        )

        with self._pipeline_span(hook, instance, pipeline_start, pipeline_end) as span:
            outcomes = [
                self._trace_build(build, span, instance) for build in hook.builds
            ]

        log.info(
            "Ingested pipeline %d from %s (%d build(s))",
            attributes.id,
            instance.name,
            len(outcomes),
        )
        return outcomes

    def process_build(
        self, build: Build, parent: S, instance: InstanceConfig
    ) -> JobOutcome:
        """Record the span of a single build under its pipeline span.

        Builds that have not started or not finished are skipped without
        error; they are sent again once they reach a terminal state.

        Raises:
            JobTimestampError: If a build timestamp cannot be parsed
            SpanEmissionError: If the tracer fails to record the span

        """
        if build.started_at is None or build.finished_at is None:
            log.debug("Skipping build %d: not started or not finished", build.id)
            return JobOutcome(job_id=build.id, status="skipped")

        build_start = self._parse_build_time(build.id, "start", build.started_at)
        build_end = self._parse_build_time(build.id, "end", build.finished_at)

        try:
            span = self.tracer.start_span(
                JOB_SPAN_NAME,
                start_time=build_start,
                tags={"instance": instance.name, **build.span_tags()},
                parent=parent,
            )
            self.tracer.finish_span(span, end_time=build_end)
        except Exception as e:
            raise SpanEmissionError(build.id, e) from e

        return JobOutcome(job_id=build.id, status="traced")

    @contextmanager
    def _pipeline_span(
        self,
        hook: PipelineHook,
        instance: InstanceConfig,
        start: datetime,
        end: datetime,
    ) -> Generator[S]:
        """Open the pipeline span and finish it whatever happens to the builds."""
        span = self.tracer.start_span(
            PIPELINE_SPAN_NAME,
            start_time=start,
            tags={"instance": instance.name, **hook.span_tags()},
        )
        try:
            yield span
        finally:
            self.tracer.finish_span(span, end_time=end)

    def _trace_build(
        self, build: Build, parent: S, instance: InstanceConfig
    ) -> JobOutcome:
        try:
            return self.process_build(build, parent, instance)
        except JobError as e:
            log.warning("Could not trace build %d: %s", e.job_id, e)
            return JobOutcome(job_id=e.job_id, status="error", message=str(e))

    @staticmethod
    def _parse_pipeline_time(
        pipeline_id: int, field: str, value: str | None
    ) -> datetime:
        try:
            return parse_gitlab_time(value)
        except TimestampParseError as e:
            raise PipelineTimestampError(pipeline_id, field, value) from e

    @staticmethod
    def _parse_build_time(job_id: int, field: str, value: str) -> datetime:
        try:
            return parse_gitlab_time(value)
        except TimestampParseError as e:
            raise JobTimestampError(job_id, field, value) from e
