"""Single-attempt chat completion calls against an OpenAI-compatible API."""

from __future__ import annotations

import logging
from typing import Protocol

from openai import AsyncOpenAI, OpenAIError

from app.config import DEFAULT_LLM_TIMEOUT_SECONDS, DEFAULT_MODEL, Settings
from services.errors import GatewayError
from services.prompt_builder import PromptPayload

logger = logging.getLogger(__name__)


class ModelGateway(Protocol):
    async def invoke(self, payload: PromptPayload) -> str: ...


class OpenAIGateway:
    """
    Sends one PromptPayload per call and returns the raw message text.

    Retries are disabled on the client: every failure (network, non-2xx,
    timeout, empty content) surfaces once as GatewayError and the caller
    decides what to fall back to.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_LLM_TIMEOUT_SECONDS,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def invoke(self, payload: PromptPayload) -> str:
        logger.info(
            "[gateway] chat.completions model=%s images=%d temperature=%.2f",
            self._model,
            payload.image_count,
            payload.temperature,
        )
        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                temperature=payload.temperature,
                messages=payload.messages,
                response_format={"type": "json_object"},
            )
        except OpenAIError as exc:
            raise GatewayError(f"{type(exc).__name__}: {exc}") from exc

        choices = getattr(completion, "choices", None)
        if not choices:
            raise GatewayError("Malformed response: no choices")
        content = choices[0].message.content if choices[0].message else None
        if not content or not content.strip():
            raise GatewayError("No response content from model")
        return content

    async def aclose(self) -> None:
        await self._client.close()


def build_gateway(settings: Settings) -> OpenAIGateway | None:
    """Return None in mock mode (no credential configured)."""
    if settings.mock_mode or not settings.openai_api_key:
        return None
    return OpenAIGateway(
        settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.llm_timeout_seconds,
    )
