import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.dependencies import close_gateways
from app.errors import register_error_handlers
from app.logging_config import configure_logging
from routes.frames import router as frames_router
from routes.pointers import router as pointers_router
from routes.verdict import router as verdict_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await close_gateways()
    logger.info("[app] Shutdown, model clients closed")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Editor's Verdict API", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(frames_router, prefix="/api")
    app.include_router(pointers_router, prefix="/api")
    app.include_router(verdict_router, prefix="/api")

    logger.info(
        "[app] Started model=%s mode=%s",
        settings.openai_model,
        "mock" if settings.mock_mode else "live",
    )
    return app


app = create_app()
