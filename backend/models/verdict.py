from typing import Annotated, Literal

from pydantic import Field

from .base import WireModel

Platform = Literal["reels", "tiktok"]
Goal = Literal["viral", "cinematic", "funny"]
Vibe = Literal["HYPE", "CINEMATIC", "DARK", "COMEDY"]

PLATFORM_LABELS: dict[str, str] = {
    "reels": "Instagram Reels",
    "tiktok": "TikTok",
}


class VerdictRequest(WireModel):
    platform: Platform
    goal: Goal | None = None
    filename: str | None = None
    duration_sec: Annotated[float, Field(gt=0)] | None = None
    frames: list[Annotated[str, Field(min_length=10)]] = Field(min_length=1, max_length=12)


class NotableMoment(WireModel):
    t: float
    desc: str


class VisionObservation(WireModel):
    what_happens: str
    scene_type: str
    notable_moments: list[NotableMoment] = Field(max_length=5)
    vibe: Vibe


class BestHook(WireModel):
    timestamp_sec: float
    reasoning: str


class Verdict(WireModel):
    title: str
    editors_call: str
    best_hook: BestHook
    vibe: Vibe
    edit_strategy: list[str] = Field(min_length=3, max_length=5)
    caption: str
    hashtags: list[str] = Field(min_length=3)
    avoid: str
    confidence: float = Field(ge=0, le=100)


class VerdictResponse(WireModel):
    """Verdict endpoint body. `fallback` is only present on placeholder output."""

    verdict: Verdict
    vision: VisionObservation
    fallback: bool | None = None
