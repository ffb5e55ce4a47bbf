from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from app.analysis.ai_providers.base import AIService, AIServiceError, is_rate_limit_error
from app.core.config import OPENAI_API_KEY, OPENAI_CHAT_MODEL, OPENAI_FLASH_MODEL

logger = logging.getLogger(__name__)


class OpenAIAIService(AIService):
    """Facade around OpenAI chat completions."""

    model_tag = "openai"
    provider_name = "OpenAI"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = OPENAI_CHAT_MODEL,
        flash_model: str = OPENAI_FLASH_MODEL,
    ):
        self.api_key = api_key or OPENAI_API_KEY
        self.default_model = default_model
        self.flash_model = flash_model
        self.client: Optional[OpenAI] = OpenAI(api_key=self.api_key) if self.api_key else None

        if self.client is None:
            logger.warning("OPENAI_API_KEY is not set; OpenAI calls will use fallbacks")

    @property
    def has_token(self) -> bool:
        return bool(self.api_key)

    def generate(
        self,
        prompt: str,
        *,
        tier: str = "pro",
        max_tokens: int = 500,
        temperature: float = 0.7,
        top_p: float = 0.95,
    ) -> str:
        if self.client is None:
            raise AIServiceError("OpenAI client not initialized.")

        try:
            resp = self.client.chat.completions.create(
                model=self.model_for(tier),
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
                top_p=top_p,
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            if is_rate_limit_error(str(e)):
                raise AIServiceError("API rate limit exceeded. Please try again later.") from e
            raise AIServiceError(f"OpenAI API error: {e}") from e

        return resp.choices[0].message.content or ""
