"""OTLP tracer backend module."""

from ci_tracer.tracers.otlp.backend import otlp_tracer
from ci_tracer.tracers.otlp.config import OTLPConfig
from ci_tracer.tracers.otlp.manifest import otlp_manifest

__all__ = ["OTLPConfig", "otlp_manifest", "otlp_tracer"]
