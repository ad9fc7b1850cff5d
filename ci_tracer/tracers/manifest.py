"""Tracer manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from pydantic import BaseModel

from ci_tracer.tracers.base import SpanTracer


@dataclass(frozen=True, kw_only=True)
class TracerManifest[ConfigT: BaseModel, SpanT]:
    """Manifest describing a tracing backend plugin.

    The factory owns the backend lifecycle: leaving its context flushes
    pending spans and shuts the backend down.
    """

    config_cls: type[ConfigT]
    tracer_factory: Callable[[ConfigT], AbstractContextManager[SpanTracer[SpanT]]]
