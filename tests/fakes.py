from typing import Callable, List, Optional, Union

from app.analysis.ai_providers.base import AIService, AIServiceError
from app.analysis.quotes import QuoteServiceError

Reply = Union[str, Exception, Callable[[str], str]]


class FakeAIService(AIService):
    """
    Scripted engine: `replies` maps a prompt substring to a reply, an exception
    to raise, or a callable of the prompt. Unmatched prompts get `default`.
    """

    model_tag = "fake"
    provider_name = "Fake AI"
    default_model = "fake-pro"
    flash_model = "fake-flash"

    def __init__(self, replies: Optional[dict] = None, default: Reply = ""):
        self.replies = dict(replies or {})
        self.default = default
        self.prompts: List[str] = []
        self.tiers: List[str] = []

    @property
    def has_token(self) -> bool:
        return True

    def generate(self, prompt, *, tier="pro", max_tokens=500, temperature=0.7, top_p=0.95):
        self.prompts.append(prompt)
        self.tiers.append(tier)
        reply = self.default
        for needle, scripted in self.replies.items():
            if needle in prompt:
                reply = scripted
                break
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(prompt)
        return reply


class FailingAIService(FakeAIService):
    def __init__(self):
        super().__init__(default=AIServiceError("API rate limit exceeded. Please try again later."))


class FakeQuoteClient:
    def __init__(self, quote: Optional[dict] = None, error: bool = False):
        self.quote = quote if quote is not None else {"q": "Stay curious.", "a": "Someone Wise"}
        self.error = error

    def get_random_quote(self):
        if self.error:
            raise QuoteServiceError("ZenQuotes API error: offline")
        return self.quote


