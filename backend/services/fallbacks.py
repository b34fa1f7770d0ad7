"""Fixed placeholder output served when the model is unavailable or unusable."""

from __future__ import annotations

from typing import Any

from models.pointers import PointersResponse
from models.verdict import Verdict, VisionObservation

MOCK_VISION: dict[str, Any] = {
    "whatHappens": "Dark alley with smoke, a figure turns toward flashing siren lights. Camera pushes in fast.",
    "sceneType": "person",
    "notableMoments": [
        {"t": 3, "desc": "Lights flash red/blue across the subject."},
        {"t": 7, "desc": "Silhouette faces camera with smoke behind."},
    ],
    "vibe": "CINEMATIC",
}

MOCK_VERDICT: dict[str, Any] = {
    "title": "Verdict #001",
    "editorsCall": "Hit hard at second 3, freeze on the scream, drop title in acid green.",
    "bestHook": {
        "timestampSec": 7,
        "reasoning": "Sirens + smoke silhouette is the grabber. Land before the beat drops.",
    },
    "vibe": "CINEMATIC",
    "editStrategy": [
        "Open cold with ambient sound, then slam the beat at 0:03.",
        "Use rapid push-in on the protagonist with chromatic split.",
        "Flash the caption on freeze-frame; cut to black on impact.",
        "Add sub-bass riser and ash particles overlay.",
    ],
    "caption": "This city chews up editors. The AI spits verdicts. #EditorsVerdict",
    "hashtags": ["#EditorsVerdict", "#Cinematic", "#AIEdit"],
    "avoid": "Do not crossfade into silence—cut hard to black at 0:15.",
    "confidence": 92,
}

MOCK_POINTERS: dict[str, Any] = {
    "summary": "Lean into crowd energy, punchy cuts, and meme captions to hype the clip.",
    "pointers": [
        {
            "t": 2,
            "title": "Open on impact",
            "instruction": "Start with the loudest reaction shot; add a meme caption top bar.",
            "category": "caption",
            "intensity": 2,
        },
        {
            "t": 6,
            "title": "Bass drop zoom",
            "instruction": "Micro-zoom on the main subject as the beat lands.",
            "category": "zoom",
            "intensity": 3,
        },
        {
            "t": 9,
            "title": "Speed pop",
            "instruction": "Ramp speed x1.6 for 0.7s, then snap back to normal.",
            "category": "speed",
            "intensity": 2,
        },
        {
            "t": 13,
            "title": "SFX hit",
            "instruction": "Layer a whoosh into a metallic hit on the transition.",
            "category": "sfx",
            "intensity": 2,
        },
        {
            "t": 16,
            "title": "Caption punch",
            "instruction": "Add a two-word meme caption synced to the reaction.",
            "category": "caption",
            "intensity": 1,
        },
        {
            "t": 20,
            "title": "Outro call",
            "instruction": "Fade to a CTA card with a quick stinger sfx.",
            "category": "transition",
            "intensity": 1,
        },
    ],
}


# Fresh instances per call so no request can mutate another's placeholder.
def mock_vision() -> VisionObservation:
    return VisionObservation.model_validate(MOCK_VISION)


def mock_verdict() -> Verdict:
    return Verdict.model_validate(MOCK_VERDICT)


def mock_pointers() -> PointersResponse:
    return PointersResponse.model_validate(MOCK_POINTERS)
