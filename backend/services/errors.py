"""Error taxonomy for the sampling and generation pipeline."""

from __future__ import annotations

from enum import Enum


class InvalidInputError(Exception):
    """Client-supplied data failed a precondition. Surfaced as HTTP 400."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)
        self.message = message


class GatewayError(Exception):
    """The model call failed or returned nothing usable."""


class ValidationKind(str, Enum):
    PARSE = "parse"
    SCHEMA = "schema"


class OutputValidationError(Exception):
    """Model output did not parse, or parsed but did not match the schema."""

    def __init__(self, kind: ValidationKind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.message = message


class FrameSamplingError(Exception):
    """Base for sampler failures; `kind` is exposed to the UI."""

    kind = "sampling"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoadError(FrameSamplingError):
    kind = "load"


class SeekError(FrameSamplingError):
    kind = "seek"


class EncodeError(FrameSamplingError):
    kind = "encode"
