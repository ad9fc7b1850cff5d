"""Console tracer backend module."""

from ci_tracer.tracers.console.backend import console_tracer
from ci_tracer.tracers.console.config import ConsoleConfig
from ci_tracer.tracers.console.manifest import console_manifest

__all__ = ["ConsoleConfig", "console_manifest", "console_tracer"]
