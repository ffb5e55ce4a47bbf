import logging
from typing import Optional

from google import genai
from google.genai import types

from app.analysis.ai_providers.base import AIService, AIServiceError, is_rate_limit_error
from app.core.config import GEMINI_API_KEY, GEMINI_DEFAULT_MODEL, GEMINI_FLASH_MODEL

logger = logging.getLogger(__name__)


class GeminiAIService(AIService):
    """Google Gemini engine built on the `google-genai` client."""

    model_tag = "gemini"
    provider_name = "Google Gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        default_model: str = GEMINI_DEFAULT_MODEL,
        flash_model: str = GEMINI_FLASH_MODEL,
    ):
        self.api_key = api_key or GEMINI_API_KEY
        self.default_model = default_model
        self.flash_model = flash_model
        self.client: Optional[genai.Client] = None

        if self.api_key:
            try:
                self.client = genai.Client(api_key=self.api_key)
                logger.info("Google Gemini API client initialized successfully")
            except Exception as e:
                logger.warning(f"Failed to initialize Google Gemini API client: {e}")
        else:
            logger.warning("GEMINI_API_KEY is not set; Gemini calls will use fallbacks")

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
            raise AIServiceError("Google Gemini API client not initialized.")

        try:
            response = self.client.models.generate_content(
                model=self.model_for(tier),
                contents=prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=max_tokens,
                    temperature=temperature,
                    top_p=top_p,
                ),
            )
        except Exception as e:
            logger.error(f"Google Gemini API error: {e}")
            if is_rate_limit_error(str(e)):
                raise AIServiceError("API rate limit exceeded. Please try again later.") from e
            raise AIServiceError(f"Google Gemini API error: {e}") from e

        return getattr(response, "text", None) or ""
