# app/core/dependency.py
from fastapi import Request
from functools import lru_cache
from app.analysis.ai_providers.base import AIService
from app.analysis.ai_providers.gemini import GeminiAIService
from app.analysis.ai_providers.openai import OpenAIAIService
from app.analysis.quotes import QuoteClient
from app.core.config import AI_PROVIDER
import logging

logger = logging.getLogger(__name__)
SUPPORTED_MODELS = ("gemini", "openai")


@lru_cache(maxsize=None)
def _gemini() -> AIService:
    return GeminiAIService()


@lru_cache(maxsize=None)
def _openai() -> AIService:
    return OpenAIAIService()


def pick_ai_service(model: str | None) -> AIService:
    """
    Returns the cached engine for a model name, falling back to AI_PROVIDER.
    """
    name = (model or AI_PROVIDER).strip().lower()
    if name not in SUPPORTED_MODELS:
        logger.warning(f"Unknown model '{name}' requested. Falling back to '{AI_PROVIDER}'.")
        name = AI_PROVIDER.strip().lower()

    if name == "openai":
        return _openai()
    return _gemini()


def get_ai_service(request: Request) -> AIService:
    """
    FastAPI dependency that returns the appropriate AI service implementation
    based on the `model` query parameter.
    """
    return pick_ai_service(request.query_params.get("model"))


@lru_cache(maxsize=None)
def get_quote_client() -> QuoteClient:
    return QuoteClient()
