import datetime
import logging
from typing import Dict, List

from fastapi import HTTPException

from app.analysis.ai_providers.base import AIService
from app.analysis.quotes import QuoteClient, format_quote
from app.core.config import is_development

logger = logging.getLogger(__name__)

CHAT_MOODS = ("happy", "sad", "frustrated", "study")

MOOD_FAQS: Dict[str, List[str]] = {
    "happy": [
        "How can I sustain this positive feeling?",
        "What activities can boost my happiness further?",
        "How can I share my positive energy with others?",
        "Can journaling help maintain my positive mood?",
        "What are some gratitude practices I can try?",
    ],
    "sad": [
        "What are some healthy ways to process sadness?",
        "How can I practice self-care when feeling down?",
        "When should I consider seeking professional help?",
        "What small steps can I take to feel better?",
        "How can I express my feelings constructively?",
    ],
    "frustrated": [
        "How can I reduce stress quickly?",
        "What techniques help manage overwhelming feelings?",
        "How can I improve my focus when frustrated?",
        "What's a good way to reset my mindset?",
        "How can I communicate when I'm feeling frustrated?",
    ],
    "study": [
        "What's the most effective study technique?",
        "How can I retain information better?",
        "What's the ideal study session length?",
        "How do I create an effective study schedule?",
        "What foods help with concentration and focus?",
    ],
}

FALLBACK_MESSAGES: Dict[str, str] = {
    "happy": "I'm glad you're feeling positive! Keep embracing those good feelings.",
    "sad": "I'm sorry to hear you're feeling down. Remember to be gentle with yourself.",
    "frustrated": "It sounds like you're dealing with some frustration. Taking a short break might help clear your mind.",
    "study": "Focus on one small task at a time, and remember to take breaks.",
}
DEFAULT_FALLBACK_MESSAGE = "I'm here to chat with you. What's on your mind?"

DEFAULT_QUOTE = "Enjoy the present moment."
FALLBACK_QUOTE = "The best way out is always through. - Robert Frost"


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def mood_chat(mood: str, message: str, ai_service: AIService, quote_client: QuoteClient) -> Dict[str, object]:
    """
    Answers a chat message in the voice that matches the user's mood, with a quote and mood FAQs.

    Args:
        mood (str): One of CHAT_MOODS.
        message (str): The user's message.
        ai_service (AIService): Engine producing the reply.
        quote_client (QuoteClient): Source of the accompanying quote.

    Returns:
        Dict[str, object]: bot_message, quote, faq, timestamp and, in development, error.

    Raises:
        HTTPException: 400 for a missing message or unknown mood.
    """
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")
    if mood not in CHAT_MOODS:
        raise HTTPException(status_code=400, detail="Invalid mood type")

    try:
        bot_message = ai_service.get_chat_response(mood, message)
        quote = format_quote(quote_client.get_random_quote()) or DEFAULT_QUOTE
        return {
            "bot_message": bot_message,
            "quote": quote,
            "faq": MOOD_FAQS.get(mood, []),
            "timestamp": _now_iso(),
        }
    except Exception as e:
        logger.error(f"Chat API error: {e}")
        return {
            "bot_message": FALLBACK_MESSAGES.get(mood, DEFAULT_FALLBACK_MESSAGE),
            "quote": FALLBACK_QUOTE,
            "faq": MOOD_FAQS.get(mood, []),
            "error": str(e) if is_development() else None,
            "timestamp": _now_iso(),
        }
