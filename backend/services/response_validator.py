"""Parse raw model text and check it against a response schema."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from services.errors import OutputValidationError, ValidationKind

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: OutputValidationError


def _reject_constant(token: str) -> float:
    raise ValueError(f"{token} is not valid JSON")


def validate(raw_text: str, schema: type[T]) -> T:
    """
    Return `raw_text` parsed into `schema`, all or nothing.

    Raises OutputValidationError(kind=PARSE) when the text is not a JSON object,
    and OutputValidationError(kind=SCHEMA) when any field is missing, out of
    range or outside its enum. Nothing is patched or defaulted.
    """
    try:
        data = json.loads(raw_text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise OutputValidationError(ValidationKind.PARSE, str(exc)) from exc
    if not isinstance(data, dict):
        raise OutputValidationError(
            ValidationKind.PARSE,
            f"expected a JSON object, got {type(data).__name__}",
        )

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise OutputValidationError(
            ValidationKind.SCHEMA,
            f"{exc.error_count()} error(s) against {schema.__name__}",
        ) from exc


def try_validate(raw_text: str, schema: type[T]) -> Ok[T] | Err:
    try:
        return Ok(validate(raw_text, schema))
    except OutputValidationError as exc:
        return Err(exc)
