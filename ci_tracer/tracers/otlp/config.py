"""Configuration for the OTLP tracer backend."""

from collections.abc import Mapping

from pydantic import BaseModel, Field


class OTLPConfig(BaseModel):
    """Configuration for exporting spans over OTLP/HTTP.

    Any OTLP receiver works, including the Jaeger collector and the Datadog
    agent with OTLP ingestion enabled.
    """

    endpoint: str = "http://127.0.0.1:4318/v1/traces"
    service_name: str = "ci-tracer"
    headers: Mapping[str, str] = Field(default_factory=dict)
    timeout: float = 10
