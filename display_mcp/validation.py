"""Decoding of raw tool arguments into typed parameter models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from display_mcp.errors import ParameterValidationError
from display_mcp.models import NameParams, PointParams

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into 'field: reason' fragments."""
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "arguments"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def decode_params(tool: str, model: type[ParamsT], arguments: Any) -> ParamsT:
    """Validate raw arguments against a parameter model.

    Raises ParameterValidationError naming the tool and offending fields.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ParameterValidationError(tool, f"arguments must be an object, got {type(arguments).__name__}")
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as exc:
        raise ParameterValidationError(tool, _describe(exc)) from exc


def decode_no_params(tool: str, arguments: Any) -> None:
    """Tools without parameters ignore whatever arguments they receive."""
    return None


def decode_point_params(tool: str, arguments: Any) -> PointParams:
    return decode_params(tool, PointParams, arguments)


def decode_name_params(tool: str, arguments: Any) -> NameParams:
    return decode_params(tool, NameParams, arguments)
