"""Console tracer backend manifest."""

from ci_tracer.tracers.console.backend import console_tracer
from ci_tracer.tracers.console.config import ConsoleConfig
from ci_tracer.tracers.manifest import TracerManifest

console_manifest = TracerManifest(
    config_cls=ConsoleConfig,
    tracer_factory=console_tracer,
)
