"""Frame sampling API. POST /api/frames (multipart upload)."""

import logging
from typing import Literal

from fastapi import APIRouter, File, Form, UploadFile

from models.frames import SampleSetResponse
from services.frame_sampler import PRESETS, FrameSampler

router = APIRouter(tags=["frames"])
logger = logging.getLogger(__name__)


@router.post("/frames", response_model=SampleSetResponse, status_code=200)
async def sample_frames(
    file: UploadFile = File(...),
    count: int | None = Form(None, ge=1, le=12),
    preset: Literal["verdict", "pointers"] = Form("pointers"),
) -> SampleSetResponse:
    """
    Sample evenly spaced JPEG frames from an uploaded clip.

    `preset` picks the payload cap used by the caller that will receive the
    frames: verdict keeps 6 frames past 1.5M chars, pointers keeps 8 past 1.8M.
    Sampling failures are answered with 422 and a `kind` of load, seek or encode.
    """
    chosen = PRESETS[preset]
    count = count or chosen.count
    logger.info("[frames] POST /api/frames filename=%r count=%d preset=%s", file.filename, count, preset)
    sampler = FrameSampler.from_preset(chosen)
    try:
        sample_set = await sampler.sample_async(file.file, count)
    finally:
        await file.close()
    logger.info(
        "[frames] Sampled %d frames (%d chars) over %.2fs",
        len(sample_set.frames),
        sample_set.total_chars,
        sample_set.duration_sec,
    )
    return SampleSetResponse.from_sample_set(sample_set)
