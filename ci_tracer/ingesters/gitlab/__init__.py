"""GitLab webhook ingester module."""

from ci_tracer.ingesters.gitlab.decoder import (
    PIPELINE_HOOK_EVENT,
    decode_pipeline_hook,
)
from ci_tracer.ingesters.gitlab.ingester import GitLabIngester
from ci_tracer.ingesters.gitlab.models import Build, PipelineHook

__all__ = [
    "PIPELINE_HOOK_EVENT",
    "Build",
    "GitLabIngester",
    "PipelineHook",
    "decode_pipeline_hook",
]
