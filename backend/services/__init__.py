from .errors import (
    EncodeError,
    FrameSamplingError,
    GatewayError,
    InvalidInputError,
    LoadError,
    OutputValidationError,
    SeekError,
    ValidationKind,
)
from .pipeline import generate_pointers, generate_verdict

__all__ = [
    "EncodeError",
    "FrameSamplingError",
    "GatewayError",
    "InvalidInputError",
    "LoadError",
    "OutputValidationError",
    "SeekError",
    "ValidationKind",
    "generate_pointers",
    "generate_verdict",
]
