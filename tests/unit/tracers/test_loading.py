"""Tests for tracer backend lookup."""

import pytest

from ci_tracer.errors import TracerNotFoundError
from ci_tracer.tracers.console import console_manifest
from ci_tracer.tracers.loading import load_tracer_manifest, registered_tracers
from ci_tracer.tracers.otlp import otlp_manifest


def test_bundled_backends_are_registered() -> None:
    """The OTLP and console backends ship with the package."""
    assert {"otlp", "console"} <= set(registered_tracers())


@pytest.mark.parametrize(
    ("key", "manifest"), [("otlp", otlp_manifest), ("console", console_manifest)]
)
def test_loads_manifest_by_key(key: str, manifest: object) -> None:
    """Resolves a key to the manifest object its entry point names."""
    assert load_tracer_manifest(key) is manifest


def test_unknown_key_lists_known_backends() -> None:
    """The error carries the unknown key and the keys that would work."""
    with pytest.raises(TracerNotFoundError) as exc_info:
        load_tracer_manifest("zipkin")

    error = exc_info.value
    assert error.key == "zipkin"
    assert "otlp" in error.available
    assert "console" in error.available
    assert "zipkin" not in error.available
    assert str(error).startswith("Tracer 'zipkin' not found")


def test_error_without_backends() -> None:
    """The message reads sensibly when nothing is installed."""
    error = TracerNotFoundError("otlp", [])

    assert error.available == ()
    assert str(error) == "Tracer 'otlp' not found, known tracers: none"
