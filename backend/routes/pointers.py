"""Timeline pointers API. POST /api/pointers."""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_gateway
from models.pointers import PointersRequest, PointersResponse
from services.model_gateway import ModelGateway
from services.pipeline import generate_pointers

router = APIRouter(tags=["pointers"])
logger = logging.getLogger(__name__)


@router.post("/pointers", response_model=PointersResponse, status_code=200)
async def create_pointers(
    body: PointersRequest,
    gateway: ModelGateway | None = Depends(get_gateway),
) -> PointersResponse:
    """
    Generate 6-10 timestamped edit pointers.

    400 when the body is invalid or carries neither frames nor a
    videoDescription. Every other outcome is 200: model output when it
    validates, the placeholder set otherwise.
    """
    logger.info(
        "[pointers] POST /api/pointers platform=%s vibe=%s frames=%d mock=%s",
        body.platform,
        body.vibe,
        len(body.frames or []),
        gateway is None,
    )
    return await generate_pointers(body, gateway)
