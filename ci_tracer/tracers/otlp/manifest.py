"""OTLP tracer backend manifest."""

from ci_tracer.tracers.manifest import TracerManifest
from ci_tracer.tracers.otlp.backend import otlp_tracer
from ci_tracer.tracers.otlp.config import OTLPConfig

otlp_manifest = TracerManifest(
    config_cls=OTLPConfig,
    tracer_factory=otlp_tracer,
)
