"""Models for the outcome of tracing a pipeline's builds."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class JobOutcome:
    """Result of tracing a single build.

    ``skipped`` builds had not started or finished yet; ``error`` builds were
    dropped after a failure local to them.
    """

    job_id: int
    status: Literal["traced", "skipped", "error"]
    message: str | None = None
