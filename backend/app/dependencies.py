from fastapi import Depends

from app.config import Settings, get_settings
from services.model_gateway import ModelGateway, OpenAIGateway, build_gateway

# One gateway (and one HTTP connection pool) per credential/model/timeout.
_gateways: dict[tuple[str, str, float], OpenAIGateway] = {}


def get_gateway(settings: Settings = Depends(get_settings)) -> ModelGateway | None:
    """None means mock mode; the pipeline serves placeholder output."""
    key = (settings.openai_api_key or "", settings.openai_model, settings.llm_timeout_seconds)
    if key in _gateways:
        return _gateways[key]
    gateway = build_gateway(settings)
    if gateway is not None:
        _gateways[key] = gateway
    return gateway


async def close_gateways() -> None:
    """Close every cached gateway client. Called on application shutdown."""
    while _gateways:
        _, gateway = _gateways.popitem()
        await gateway.aclose()
