"""Configuration of the ci-tracer service."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, SecretStr, field_validator

# Hooks of pipelines with thousands of builds run to several megabytes.
DEFAULT_MAX_BODY_SIZE = 64 * 1024 * 1024


class InstanceConfig(BaseModel):
    """A GitLab deployment allowed to send webhooks.

    When ``token`` is set, webhooks must carry it in the ``X-Gitlab-Token``
    header (the secret token configured on the GitLab webhook).
    """

    name: str
    token: SecretStr | None = None


class ServiceConfig(BaseModel):
    """Configuration of the HTTP service."""

    listen_address: str = "127.0.0.1:3000"
    tracer: str = "otlp"
    tracer_config: dict[str, Any] = Field(default_factory=dict)
    instances: Sequence[InstanceConfig] = Field(default_factory=list)
    max_body_size: int = Field(default=DEFAULT_MAX_BODY_SIZE, gt=0)

    @field_validator("listen_address")
    @classmethod
    def _check_port(cls, value: str) -> str:
        _, separator, port = value.rpartition(":")
        if not separator or not port.isdigit():
            raise ValueError("listen address must be in host:port form")
        return value

    @property
    def host(self) -> str:
        """Host part of the listen address."""
        host, _, _ = self.listen_address.rpartition(":")
        return host or "0.0.0.0"

    @property
    def port(self) -> int:
        """Port part of the listen address."""
        _, _, port = self.listen_address.rpartition(":")
        return int(port)
