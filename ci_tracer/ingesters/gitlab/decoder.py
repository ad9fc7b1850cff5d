"""Decoding of raw GitLab webhook bodies."""

from pydantic import ValidationError

from ci_tracer.errors import DecodeError
from ci_tracer.ingesters.gitlab.models import PipelineHook

PIPELINE_HOOK_EVENT = "Pipeline Hook"

ROOT_PATH = "<root>"


def decode_pipeline_hook(body: bytes | str) -> PipelineHook:
    """Decode a pipeline webhook body.

    Only the JSON structure is checked: unknown fields are ignored, missing
    fields take their zero value and values of the wrong JSON type (such as
    a quoted number) are rejected rather than coerced.

    Raises:
        DecodeError: If the body is not valid JSON or a field has the wrong type

    """
    try:
        return PipelineHook.model_validate_json(body)
    except ValidationError as e:
        error = e.errors(include_url=False)[0]
        path = ".".join(str(part) for part in error["loc"]) or ROOT_PATH
        raise DecodeError(path, error["msg"]) from e
