"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from aiohttp.test_utils import TestClient, TestServer
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import (
    InMemorySpanExporter,
)

from ci_tracer.api.app import create_app
from ci_tracer.config import InstanceConfig
from ci_tracer.ingesters.gitlab import GitLabIngester
from ci_tracer.registry import InstanceRegistry
from ci_tracer.tracers.otel import OpenTelemetryTracer, managed_tracer


@pytest.fixture
def exporter() -> InMemorySpanExporter:
    """Create exporter keeping finished spans in memory."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer(
    exporter: InMemorySpanExporter,
) -> Generator[OpenTelemetryTracer, None, None]:
    """Create tracer exporting synchronously to the in-memory exporter."""
    with managed_tracer("ci-tracer-test", SimpleSpanProcessor(exporter)) as impl:
        yield impl


@pytest.fixture
def registry() -> InstanceRegistry:
    """Create registry with an open and a token protected instance."""
    return InstanceRegistry.from_configs(
        [
            InstanceConfig(name="test"),
            InstanceConfig(name="protected", token="s3cr3t"),
        ]
    )


@pytest.fixture
async def client(
    tracer: OpenTelemetryTracer, registry: InstanceRegistry
) -> AsyncGenerator[TestClient, None]:
    """Create test client for the web application."""
    app = create_app(ingester=GitLabIngester(tracer=tracer), registry=registry)
    async with TestClient(TestServer(app)) as test_client:
        yield test_client
