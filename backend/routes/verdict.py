"""Editor's verdict API. POST /api/verdict."""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_gateway
from models.verdict import VerdictRequest, VerdictResponse
from services.model_gateway import ModelGateway
from services.pipeline import generate_verdict

router = APIRouter(tags=["verdict"])
logger = logging.getLogger(__name__)


@router.post(
    "/verdict",
    response_model=VerdictResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def create_verdict(
    body: VerdictRequest,
    gateway: ModelGateway | None = Depends(get_gateway),
) -> VerdictResponse:
    """Vision pass then verdict pass. `fallback: true` marks placeholder output."""
    logger.info(
        "[verdict] POST /api/verdict platform=%s goal=%s frames=%d mock=%s",
        body.platform,
        body.goal,
        len(body.frames),
        gateway is None,
    )
    return await generate_verdict(body, gateway)
