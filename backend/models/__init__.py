from .frames import SampledFrame, SampleSet, SampleSetResponse
from .pointers import Pointer, PointerFrame, PointersRequest, PointersResponse
from .verdict import (
    PLATFORM_LABELS,
    BestHook,
    NotableMoment,
    Verdict,
    VerdictRequest,
    VerdictResponse,
    VisionObservation,
)

__all__ = [
    "SampledFrame",
    "SampleSet",
    "SampleSetResponse",
    "Pointer",
    "PointerFrame",
    "PointersRequest",
    "PointersResponse",
    "PLATFORM_LABELS",
    "BestHook",
    "NotableMoment",
    "Verdict",
    "VerdictRequest",
    "VerdictResponse",
    "VisionObservation",
]
