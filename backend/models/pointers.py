from typing import Annotated, Literal

from pydantic import Field

from .base import WireModel
from .verdict import Platform

PointerVibe = Literal["HYPE", "CINEMATIC", "COMEDY", "DARK"]
PointerCategory = Literal["caption", "transition", "sfx", "speed", "zoom", "color"]
Intensity = Literal[1, 2, 3]


class PointerFrame(WireModel):
    t: float
    jpg_base64: str = Field(min_length=10)


class PointersRequest(WireModel):
    platform: Platform
    vibe: PointerVibe
    brief: str = Field(min_length=4)
    duration_sec: float = Field(gt=0)
    frames: Annotated[list[PointerFrame], Field(max_length=12)] | None = None
    video_description: str | None = None

    @property
    def has_frames(self) -> bool:
        return bool(self.frames)


class Pointer(WireModel):
    t: float
    title: str
    instruction: str
    category: PointerCategory
    intensity: Intensity


class PointersResponse(WireModel):
    summary: str
    pointers: list[Pointer] = Field(min_length=6, max_length=10)
