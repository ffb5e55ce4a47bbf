import logging
from typing import Any, Dict, Optional

import requests

from app.core.config import HTTP_TIMEOUT_SECONDS, ZENQUOTES_URL

logger = logging.getLogger(__name__)


class QuoteServiceError(Exception):
    """Raised when the quotes API is unreachable or returns an unexpected body."""


class QuoteClient:
    """Thin client for the ZenQuotes API."""

    def __init__(self, base_url: str = ZENQUOTES_URL, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout

    def get_random_quote(self) -> Dict[str, Any]:
        """
        Fetches one random quote.

        Returns:
            Dict[str, Any]: The raw quote object, with `q` (text) and `a` (author).

        Raises:
            QuoteServiceError: On network errors or a malformed response.
        """
        try:
            response = requests.get(f"{self.base_url}random", timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"ZenQuotes API error: {e}")
            raise QuoteServiceError(f"ZenQuotes API error: {e}") from e

        if not isinstance(data, list) or not data:
            raise QuoteServiceError("ZenQuotes API error: empty response")
        return data[0]


def format_quote(data: Optional[Dict[str, Any]]) -> Optional[str]:
    if data and data.get("q") and data.get("a"):
        return f"{data['q']} - {data['a']}"
    return None
