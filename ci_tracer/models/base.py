"""Base model configuration for all data structures."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

type TagValue = str | int | float | bool


class Model(BaseModel):
    """Base model with standard configuration."""

    model_config = ConfigDict(frozen=True)


class PayloadModel(Model):
    """Base model for third-party payloads.

    Unknown fields are ignored and explicit nulls fall back to the field
    default, so a field GitLab leaves empty decodes to its zero value.
    Subclasses declare scalars with pydantic's strict types so that a value
    of the wrong JSON type is rejected instead of coerced.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
