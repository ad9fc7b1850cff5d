"""Tracing backends registered under the ``ci_tracer.tracers`` entry points."""

from importlib.metadata import EntryPoint, entry_points
from typing import Any

from ci_tracer.errors import TracerNotFoundError
from ci_tracer.tracers.manifest import TracerManifest

ENTRY_POINT_GROUP = "ci_tracer.tracers"


def registered_tracers() -> dict[str, EntryPoint]:
    """Entry points of the installed tracing backends, by key."""
    return {entry.name: entry for entry in entry_points(group=ENTRY_POINT_GROUP)}


def load_tracer_manifest(key: str) -> TracerManifest[Any, Any]:
    """Import the manifest of the backend registered as ``key``.

    Raises:
        TracerNotFoundError: If no installed backend uses that key

    """
    tracers = registered_tracers()
    try:
        entry = tracers[key]
    except KeyError:
        raise TracerNotFoundError(key, list(tracers)) from None
    manifest: TracerManifest[Any, Any] = entry.load()
    return manifest
