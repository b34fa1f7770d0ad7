"""
Pointers and Verdict flows.

`run_*` functions are the inner pipeline: they raise GatewayError or
OutputValidationError on the first failure. `generate_*` functions are the
outer adapter the routes call: they never raise past input validation and
substitute the fixed placeholder output instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from models.pointers import PointersRequest, PointersResponse
from models.verdict import Verdict, VerdictRequest, VerdictResponse, VisionObservation
from services.errors import GatewayError, InvalidInputError, OutputValidationError
from services.fallbacks import mock_pointers, mock_verdict, mock_vision
from services.model_gateway import ModelGateway
from services.prompt_builder import build_pointers_prompt, build_verdict_prompt, build_vision_prompt
from services.response_validator import validate

logger = logging.getLogger(__name__)

# Frames beyond this are dropped before the vision pass to bound cost.
VISION_FRAME_CAP = 10
MISSING_CONTEXT_MESSAGE = "Provide frames or a videoDescription for context."


@dataclass(frozen=True)
class VerdictResult:
    verdict: Verdict
    vision: VisionObservation


def ensure_pointers_context(request: PointersRequest) -> None:
    if not request.has_frames and not request.video_description:
        raise InvalidInputError(MISSING_CONTEXT_MESSAGE)


async def run_pointers(request: PointersRequest, gateway: ModelGateway) -> PointersResponse:
    branch = "frames" if request.has_frames else "text"
    logger.info("[pipeline.pointers] building_prompt branch=%s", branch)
    payload = build_pointers_prompt(request)
    logger.info("[pipeline.pointers] awaiting_model")
    raw = await gateway.invoke(payload)
    logger.info("[pipeline.pointers] validating %d chars", len(raw))
    return validate(raw, PointersResponse)


async def generate_pointers(request: PointersRequest, gateway: ModelGateway | None) -> PointersResponse:
    """
    Pointers for the timeline, or the placeholder set.

    InvalidInputError is the only exception that leaves this function. Unlike
    the verdict flow there is no fallback marker on the response.
    """
    ensure_pointers_context(request)
    if gateway is None:
        logger.info("[pipeline.pointers] fallback: no model credential configured")
        return mock_pointers()
    try:
        result = await run_pointers(request, gateway)
    except (GatewayError, OutputValidationError) as exc:
        logger.error("[pipeline.pointers] fallback: %s", exc, exc_info=True)
        return mock_pointers()
    except Exception as exc:  # noqa: BLE001
        logger.error("[pipeline.pointers] fallback: unexpected %s", type(exc).__name__, exc_info=True)
        return mock_pointers()
    logger.info("[pipeline.pointers] done pointers=%d", len(result.pointers))
    return result


def vision_context(request: VerdictRequest) -> str:
    return " | ".join(p for p in (request.platform, request.goal, request.filename) if p)


async def run_vision_pass(request: VerdictRequest, gateway: ModelGateway) -> VisionObservation:
    frames = request.frames[:VISION_FRAME_CAP]
    logger.info("[pipeline.verdict] vision_pass frames=%d", len(frames))
    raw = await gateway.invoke(build_vision_prompt(frames, vision_context(request)))
    return validate(raw, VisionObservation)


async def run_verdict_pass(
    request: VerdictRequest,
    vision: VisionObservation,
    gateway: ModelGateway,
) -> Verdict:
    logger.info("[pipeline.verdict] verdict_pass vision_vibe=%s", vision.vibe)
    raw = await gateway.invoke(build_verdict_prompt(request, vision))
    return validate(raw, Verdict)


async def run_verdict(request: VerdictRequest, gateway: ModelGateway) -> VerdictResult:
    # A failed vision pass raises here, so the verdict pass is never attempted.
    vision = await run_vision_pass(request, gateway)
    verdict = await run_verdict_pass(request, vision, gateway)
    return VerdictResult(verdict=verdict, vision=vision)


def fallback_verdict() -> VerdictResponse:
    return VerdictResponse(verdict=mock_verdict(), vision=mock_vision(), fallback=True)


async def generate_verdict(request: VerdictRequest, gateway: ModelGateway | None) -> VerdictResponse:
    """Two-pass verdict, or the flagged placeholder pair. Never raises."""
    if gateway is None:
        logger.info("[pipeline.verdict] fallback: no model credential configured")
        return fallback_verdict()
    try:
        result = await run_verdict(request, gateway)
    except (GatewayError, OutputValidationError) as exc:
        logger.error("[pipeline.verdict] fallback: %s", exc, exc_info=True)
        return fallback_verdict()
    except Exception as exc:  # noqa: BLE001
        logger.error("[pipeline.verdict] fallback: unexpected %s", type(exc).__name__, exc_info=True)
        return fallback_verdict()
    logger.info("[pipeline.verdict] done confidence=%.0f", result.verdict.confidence)
    return VerdictResponse(verdict=result.verdict, vision=result.vision)
