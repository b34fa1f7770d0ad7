"""Chat payloads for the vision, verdict and pointers model calls. No I/O here."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from models.pointers import PointersRequest
from models.verdict import PLATFORM_LABELS, VerdictRequest, VisionObservation
from services.errors import InvalidInputError

VISION_TEMPERATURE = 0.4
VERDICT_TEMPERATURE = 0.65
POINTERS_TEMPERATURE = 0.6

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-zA-Z0-9.+-]+;base64,")

VISION_SYSTEM_PROMPT = "You are a sharp video observer. Give literal details. Do not guess. Return only JSON."

VISION_SHAPE = {
    "whatHappens": "2-4 sentence literal description of what is visible",
    "sceneType": "car / person / screen recording / sports / etc",
    "notableMoments": [{"t": 0, "desc": "short"}],
    "vibe": "HYPE|CINEMATIC|DARK|COMEDY",
}

VERDICT_SYSTEM_PROMPT = " ".join(
    [
        "You are a senior video editor. Be decisive. One option only.",
        "Keep it short, cinematic, and confident. Always include a warning.",
        "Use the observed visuals; do not invent. Mention at least 2 concrete visual details.",
        "If uncertain, say 'unclear'.",
        "Respond ONLY with JSON matching the provided schema.",
    ]
)

VERDICT_SHAPE = """
{
  "title": string,
  "editorsCall": string,
  "bestHook": { "timestampSec": number, "reasoning": string },
  "vibe": "HYPE" | "CINEMATIC" | "DARK" | "COMEDY",
  "editStrategy": string[] (3-5 items),
  "caption": string,
  "hashtags": string[] (>=3),
  "avoid": string,
  "confidence": number (0-100)
}""".strip()

POINTERS_SYSTEM_PROMPT = " ".join(
    [
        "You are a decisive video editor creating timeline pointers.",
        "No hedging. 6-10 pointers, well distributed across duration.",
        "Respect platform and vibe. Mention visible details if frames provided.",
    ]
)

POINTERS_SHAPE = {
    "summary": "string",
    "pointers": [
        {
            "t": "number (seconds)",
            "title": "string",
            "instruction": "string",
            "category": "caption|transition|sfx|speed|zoom|color",
            "intensity": "1|2|3",
        }
    ],
}


@dataclass(frozen=True)
class PromptPayload:
    messages: list[dict[str, Any]] = field(default_factory=list)
    temperature: float = 0.5

    @property
    def image_count(self) -> int:
        count = 0
        for message in self.messages:
            content = message.get("content")
            if isinstance(content, list):
                count += sum(1 for part in content if part.get("type") == "image_url")
        return count


def strip_data_url(image_b64: str) -> str:
    """Drop a leading `data:image/...;base64,` header if the caller left one on."""
    return _DATA_URL_PREFIX.sub("", image_b64, count=1)


def _image_parts(frames: Iterable[str]) -> list[dict[str, Any]]:
    return [
        {
            "type": "image_url",
            "image_url": {"url": f"data:image/jpeg;base64,{strip_data_url(f)}", "detail": "low"},
        }
        for f in frames
    ]


def build_vision_prompt(frames: list[str], context: str) -> PromptPayload:
    text = "\n".join(
        [
            "Analyze these frames.",
            "Respond with strict JSON:",
            json.dumps(VISION_SHAPE),
            "Rules:",
            "- Mention at least 2 concrete visual details (subject + action).",
            "- If unsure, say 'unclear' instead of inventing.",
            "- Notable moments: 0-5 items, use seconds if you can infer.",
            f"Context: {context}",
        ]
    )
    return PromptPayload(
        messages=[
            {"role": "system", "content": VISION_SYSTEM_PROMPT},
            {"role": "user", "content": [{"type": "text", "text": text}, *_image_parts(frames)]},
        ],
        temperature=VISION_TEMPERATURE,
    )


def verdict_context(request: VerdictRequest) -> str:
    parts = [
        PLATFORM_LABELS[request.platform],
        f"Goal: {request.goal}" if request.goal else None,
        f"Filename: {request.filename}" if request.filename else None,
        f"Duration: {round(request.duration_sec)}s" if request.duration_sec else None,
    ]
    return " | ".join(p for p in parts if p)


def build_verdict_prompt(request: VerdictRequest, vision: VisionObservation) -> PromptPayload:
    moments = json.dumps([m.model_dump(by_alias=True) for m in vision.notable_moments])
    text = "\n".join(
        [
            f"Context: {verdict_context(request)}",
            "Observed visuals:",
            f"whatHappens: {vision.what_happens}",
            f"sceneType: {vision.scene_type}",
            f"notableMoments: {moments}",
            f"visionVibe: {vision.vibe}",
            "Generate the verdict JSON using these visuals.",
            VERDICT_SHAPE,
            "JSON only:",
        ]
    )
    return PromptPayload(
        messages=[
            {"role": "system", "content": VERDICT_SYSTEM_PROMPT},
            {"role": "user", "content": [{"type": "text", "text": text}]},
        ],
        temperature=VERDICT_TEMPERATURE,
    )


def _pointers_header(request: PointersRequest) -> list[str]:
    return [
        f"Platform: {request.platform}",
        f"Vibe: {request.vibe}",
        f"Brief: {request.brief}",
        f"Duration: {round(request.duration_sec)}s",
    ]


def build_pointers_prompt(request: PointersRequest) -> PromptPayload:
    system = {"role": "system", "content": POINTERS_SYSTEM_PROMPT}
    shape = json.dumps(POINTERS_SHAPE)

    if request.has_frames:
        text = "\n".join(
            [
                *_pointers_header(request),
                "Create 6-10 pointers referencing visible content.",
                "Respond with strict JSON:",
                shape,
            ]
        )
        images = _image_parts(f.jpg_base64 for f in request.frames or [])
        user = {"role": "user", "content": [{"type": "text", "text": text}, *images]}
    elif request.video_description:
        text = "\n".join(
            [
                *_pointers_header(request),
                f"Video description: {request.video_description}",
                "Create 6-10 pointers across the timeline.",
                "Respond with strict JSON:",
                shape,
            ]
        )
        user = {"role": "user", "content": text}
    else:
        raise InvalidInputError("Provide frames or a videoDescription for context.")

    return PromptPayload(messages=[system, user], temperature=POINTERS_TEMPERATURE)
