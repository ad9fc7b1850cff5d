"""Configuration for the console tracer backend."""

from pydantic import BaseModel


class ConsoleConfig(BaseModel):
    """Configuration for printing spans to standard output."""

    service_name: str = "ci-tracer"
