"""Environment-driven settings. A missing OPENAI_API_KEY selects mock mode."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_LLM_TIMEOUT_SECONDS = 45.0
ENV_FILE = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseModel):
    openai_api_key: str | None = None
    openai_model: str = DEFAULT_MODEL
    llm_timeout_seconds: float = Field(default=DEFAULT_LLM_TIMEOUT_SECONDS, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def mock_mode(self) -> bool:
        return not self.openai_api_key

    @classmethod
    def from_env(cls) -> Settings:
        api_key = os.environ.get("OPENAI_API_KEY", "").strip() or None
        origins = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
        return cls(
            openai_api_key=api_key,
            openai_model=os.environ.get("OPENAI_MODEL", "").strip() or DEFAULT_MODEL,
            llm_timeout_seconds=float(os.environ.get("LLM_TIMEOUT_SECONDS", DEFAULT_LLM_TIMEOUT_SECONDS)),
            cors_origins=origins or ["*"],
            log_level=os.environ.get("LOG_LEVEL", "INFO").strip() or "INFO",
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "8000")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Load .env from backend dir; real environment variables take precedence.
    load_dotenv(ENV_FILE)
    return Settings.from_env()
