import datetime
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from app.analysis import parsers
import app.analysis.prompts.prompt_templates as prompts
from app.study.schemas import QuizQuestion

logger = logging.getLogger(__name__)

CHAT_FALLBACKS: Dict[str, str] = {
    "happy": "I'm glad you're feeling positive! Keep embracing those good feelings. What specifically made you happy today?",
    "sad": (
        "I'm sorry to hear you're feeling down. Remember to be gentle with yourself during difficult times. "
        "Would it help to talk more about what's bothering you?"
    ),
    "frustrated": (
        "It sounds like you're dealing with some frustration. Taking a deep breath and a short break might help "
        "clear your mind. What's causing the frustration?"
    ),
    "study": (
        "For effective studying, try breaking your work into smaller, manageable chunks. "
        "What subject are you focusing on right now?"
    ),
}
DEFAULT_CHAT_FALLBACK = "I apologize, but I'm unable to process your request at the moment. Please try again later."

DEFAULT_JOURNAL_PROMPTS: List[str] = [
    "What are three things that went well today and why?",
    "Describe a challenge you faced recently and what you learned from it.",
    "What are you grateful for in this moment?",
]

SUMMARY_FAILED = "Summary could not be generated due to an API error."

UNPARSED_QUIZ_QUESTION = QuizQuestion(
    question="What is the main topic of the text?",
    options=[
        "It varies based on the content",
        "Unable to determine",
        "Please review the content yourself",
        "The quiz generation failed",
    ],
    correct_answer=0,
)
FAILED_QUIZ_QUESTION = QuizQuestion(
    question="Quiz generation failed. What might be the reason?",
    options=[
        "API connection issues",
        "Text might be too complex",
        "Model limitations",
        "All of the above",
    ],
    correct_answer=3,
)

SENTIMENT_TEXT_LIMIT = 2000
EMOTION_TEXT_LIMIT = 1000
SUMMARY_TEXT_LIMIT = 10000
SHORT_SUMMARY_TEXT_LIMIT = 2000
QUIZ_TEXT_LIMIT = 2000


class AIServiceError(Exception):
    """Raised when the generative-language API cannot produce a reply."""


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def is_rate_limit_error(message: str) -> bool:
    lowered = message.lower()
    return "quota" in lowered or "rate limit" in lowered or "429" in lowered


class AIService(ABC):
    """
    Prompting and response-shaping shared by every generative-language engine.

    Subclasses implement `generate` against their vendor SDK. Everything else
    is plain prompt building plus parsing of the free-text reply, and every
    high-level call degrades to a canned fallback instead of raising.
    """

    model_tag: str
    provider_name: str
    default_model: str
    flash_model: str

    @property
    @abstractmethod
    def has_token(self) -> bool:
        ...

    @abstractmethod
    def generate(
        self,
        prompt: str,
        *,
        tier: str = "pro",
        max_tokens: int = 500,
        temperature: float = 0.7,
        top_p: float = 0.95,
    ) -> str:
        """
        Sends one prompt and returns the reply text.

        Args:
            prompt (str): Full prompt.
            tier (str): "pro" for `default_model`, "flash" for `flash_model`.

        Raises:
            AIServiceError: On transport, quota or client errors.
        """

    def model_for(self, tier: str) -> str:
        return self.flash_model if tier == "flash" else self.default_model

    # 1. Mood chat
    def get_chat_response(self, mood: str, message: str) -> str:
        system_prompt = prompts.CHAT_SYSTEM_PROMPTS.get(mood, prompts.DEFAULT_CHAT_SYSTEM_PROMPT)
        prompt = prompts.CHAT_USER_TEMPLATE.format(
            system_prompt=system_prompt, message=message, mood=mood or "neutral"
        )
        try:
            text = self.generate(prompt, tier="flash", max_tokens=250, temperature=0.7, top_p=0.95)
            if not text.strip():
                raise AIServiceError("Empty response from API")
            return text.strip()
        except Exception as e:
            logger.error(f"Chat response error for mood {mood}: {e}")
            return CHAT_FALLBACKS.get(mood, DEFAULT_CHAT_FALLBACK)

    # 2. Journal analysis
    def analyze_sentiment(self, text: str) -> Dict[str, Any]:
        prompt = prompts.SENTIMENT_TEMPLATE.format(text=text[:SENTIMENT_TEXT_LIMIT])
        try:
            reply = self.generate(prompt, tier="flash")
        except Exception as e:
            logger.error(f"Sentiment analysis error: {e}")
            return {"label": "NEUTRAL", "score": parsers.DEFAULT_SENTIMENT_SCORE}
        if not reply.strip():
            return {"label": "NEUTRAL", "score": parsers.DEFAULT_SENTIMENT_SCORE}
        return parsers.parse_sentiment(reply)

    def analyze_emotions(self, text: str) -> Dict[str, Any]:
        prompt = prompts.EMOTIONS_TEMPLATE.format(text=text[:EMOTION_TEXT_LIMIT])
        try:
            reply = self.generate(prompt, tier="flash", temperature=0.3)
        except Exception as e:
            logger.error(f"Emotion analysis error: {e}")
            return {"dominant": "unknown", "emotions": [{"emotion": "neutral", "intensity": 1.0}]}

        parsed = parsers.parse_emotions(reply)
        if parsed:
            return parsed
        return {"dominant": "neutral", "emotions": [{"emotion": "neutral", "intensity": 1.0}]}

    def get_journal_prompts(self, mood: str) -> List[str]:
        prompt = prompts.JOURNAL_PROMPTS_TEMPLATE.format(mood=mood)
        try:
            reply = self.generate(prompt, tier="flash", max_tokens=200, temperature=0.7)
        except Exception as e:
            logger.error(f"Journal prompts error: {e}")
            return list(DEFAULT_JOURNAL_PROMPTS)
        if not reply.strip():
            return list(DEFAULT_JOURNAL_PROMPTS)
        return parsers.parse_journal_prompts(reply)

    # 3. Study tools
    def generate_summary(self, text: str) -> str:
        prompt = prompts.SUMMARY_TEMPLATE.format(text=text[:SUMMARY_TEXT_LIMIT])
        try:
            summary = self.generate(prompt, tier="pro", max_tokens=500, temperature=0.4)
            if not summary.strip():
                raise AIServiceError("Empty response from API")
            return summary.strip()
        except Exception as e:
            logger.error(f"Summary generation error: {e}")

        # Retry once with a shorter chunk on the faster model
        try:
            shorter = prompts.SHORT_SUMMARY_TEMPLATE.format(text=text[:SHORT_SUMMARY_TEXT_LIMIT])
            summary = self.generate(shorter, tier="flash", max_tokens=250, temperature=0.3)
            if summary.strip():
                return summary.strip()
        except Exception as e:
            logger.error(f"Fallback summarization failed: {e}")

        return SUMMARY_FAILED

    def generate_quiz_questions(self, text: str, num_questions: int = 3) -> List[QuizQuestion]:
        prompt = prompts.QUIZ_TEMPLATE.format(num_questions=num_questions, text=text[:QUIZ_TEXT_LIMIT])
        try:
            reply = self.generate(prompt, tier="pro", max_tokens=800, temperature=0.5, top_p=0.9)
        except Exception as e:
            logger.error(f"Quiz generation error: {e}")
            return [FAILED_QUIZ_QUESTION.model_copy()]

        questions = [QuizQuestion(**q) for q in parsers.parse_quiz_questions(reply, num_questions)]
        if not questions:
            logger.warning("Could not parse any quiz questions from model output")
            return [UNPARSED_QUIZ_QUESTION.model_copy()]
        return questions

    # 4. Health check
    def check_status(self) -> Dict[str, Any]:
        try:
            sample = self.generate(prompts.STATUS_PROBE_PROMPT, tier="flash")
            if not sample:
                raise AIServiceError("Invalid response from API")
            return {
                "status": "ok",
                "message": f"{self.provider_name} API service is accessible (using {self.flash_model})",
                "timestamp": _now_iso(),
                "sample": sample[:100] + "...",
            }
        except Exception as e:
            logger.error(f"API status check failed: {e}")
            return {
                "status": "error",
                "message": f"{self.provider_name} API service is not accessible: {e}",
                "timestamp": _now_iso(),
            }
