"""Exceptions raised while turning webhooks into traces."""

from collections.abc import Sequence


class CITracerError(Exception):
    """Base class for all ci-tracer errors."""


class DecodeError(CITracerError):
    """Raised when a webhook body is not a structurally valid hook."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not decode hook at '{path}': {reason}")


class TimestampParseError(CITracerError):
    """Raised when a value does not match the GitLab timestamp format."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"could not parse timestamp {value!r}")


class IngestError(CITracerError):
    """Raised when a whole hook cannot be ingested."""


class PipelineTimestampError(IngestError):
    """Raised when a pipeline-level timestamp cannot be parsed."""

    def __init__(self, pipeline_id: int, field: str, value: object) -> None:
        self.pipeline_id = pipeline_id
        self.field = field
        self.value = value
        super().__init__(
            f"could not parse pipeline {pipeline_id} {field} time: {value!r}"
        )


class JobError(CITracerError):
    """Raised when a single build of a pipeline cannot be traced."""

    def __init__(self, job_id: int, message: str) -> None:
        self.job_id = job_id
        super().__init__(message)


class JobTimestampError(JobError):
    """Raised when a build timestamp cannot be parsed."""

    def __init__(self, job_id: int, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(job_id, f"could not parse build {field} time: {value!r}")


class SpanEmissionError(JobError):
    """Raised when the tracer fails to record a build span."""

    def __init__(self, job_id: int, cause: BaseException) -> None:
        super().__init__(job_id, f"could not emit build span: {cause}")


class InstanceNotFoundError(CITracerError):
    """Raised when a webhook targets an instance that is not configured."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Instance '{name}' not found")


class TracerNotFoundError(CITracerError):
    """Raised when a tracer backend is not found."""

    def __init__(self, key: str, available: Sequence[str]) -> None:
        self.key = key
        self.available = tuple(sorted(available))
        super().__init__(
            f"Tracer '{key}' not found, known tracers: "
            f"{', '.join(self.available) or 'none'}"
        )
