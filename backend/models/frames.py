from dataclasses import dataclass, field

from pydantic import Field

from .base import WireModel


@dataclass(frozen=True)
class SampledFrame:
    t: float                   # seconds into the source
    jpg_base64: str            # JPEG bytes, base64, no data-URL prefix


@dataclass(frozen=True)
class SampleSet:
    duration_sec: float
    frames: list[SampledFrame] = field(default_factory=list)

    @property
    def total_chars(self) -> int:
        return sum(len(f.jpg_base64) for f in self.frames)


class SampledFrameOut(WireModel):
    t: float
    jpg_base64: str


class SampleSetResponse(WireModel):
    duration_sec: float
    frames: list[SampledFrameOut] = Field(default_factory=list)

    @classmethod
    def from_sample_set(cls, sample_set: SampleSet) -> "SampleSetResponse":
        return cls(
            duration_sec=sample_set.duration_sec,
            frames=[SampledFrameOut(t=f.t, jpg_base64=f.jpg_base64) for f in sample_set.frames],
        )
