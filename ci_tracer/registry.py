"""Lookup of the GitLab instances webhooks may come from."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ci_tracer.config import InstanceConfig
from ci_tracer.errors import InstanceNotFoundError


@dataclass(frozen=True, kw_only=True)
class InstanceRegistry:
    """Read-only mapping of instance names to their configuration."""

    instances: Mapping[str, InstanceConfig]

    @classmethod
    def from_configs(cls, configs: Sequence[InstanceConfig]) -> "InstanceRegistry":
        """Build a registry from a list of instance configurations."""
        return cls(instances={config.name: config for config in configs})

    def resolve(self, name: str) -> InstanceConfig:
        """Return the configuration of the named instance.

        Raises:
            InstanceNotFoundError: If no instance with that name is configured

        """
        try:
            return self.instances[name]
        except KeyError:
            raise InstanceNotFoundError(name) from None
