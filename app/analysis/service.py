import datetime
import re
from collections import Counter
from typing import Any, Dict, List

from app.analysis.ai_providers.base import AIService

SENTIMENT_THRESHOLD = 0.6
MAX_FREQUENCY_KEYWORDS = 5
MAX_KEYWORDS = 7
REFLECTION_PROMPT_MOOD = "reflection"

STOP_WORDS = frozenset(
    [
        "this", "that", "with", "from", "have", "what", "about", "like",
        "also", "been", "were", "would", "should", "could", "there", "their",
        "then", "than", "when", "some", "very", "really", "just",
    ]
)

_WORD_RE = re.compile(r"\b[a-z]{4,}\b")

NEGATIVE_RECOMMENDATIONS: Dict[str, List[str]] = {
    "anger": [
        "Consider a physical outlet for frustration like exercise",
        "Practice deep breathing when you feel anger rising",
        "Write a letter expressing your feelings (you don't have to send it)",
        "Take a short break from the situation if possible",
    ],
    "sadness": [
        "Be gentle with yourself during this difficult time",
        "Connect with someone supportive who can listen",
        "Engage in a small self-care activity today",
        "Remember that feelings are temporary, even when intense",
    ],
    "anxiety": [
        "Try grounding techniques like the 5-4-3-2-1 method",
        "Focus on what you can control, not what you can't",
        "Break overwhelming tasks into small, manageable steps",
        "Practice progressive muscle relaxation before bed",
    ],
    "other": [
        "Consider practicing mindfulness or meditation",
        "Try a physical activity to boost your mood",
        "Connect with a supportive friend or family member",
        "List three things you are grateful for today",
    ],
}
EMOTION_GROUPS: Dict[str, str] = {
    "anger": "anger",
    "annoyance": "anger",
    "sadness": "sadness",
    "disappointment": "sadness",
    "anxiety": "anxiety",
    "fear": "anxiety",
}
POSITIVE_RECOMMENDATIONS: List[str] = [
    "Channel this positive energy into a creative project",
    "Share your positivity with someone who might need it",
    "Journal about what contributed to these positive feelings",
    "Build on this momentum to tackle a challenging task",
]
NEUTRAL_RECOMMENDATIONS: List[str] = [
    "Reflect on your emotions more deeply in your next journal",
    "Try a new activity that brings you joy",
    "Set a small goal for tomorrow",
    "Consider what might elevate your mood further",
]


def map_sentiment(result: Dict[str, Any]) -> str:
    """
    Collapses a model {label, score} result into positive / negative / neutral.

    Low-confidence polar labels count as neutral.
    """
    label = str(result.get("label", "")).upper()
    score = float(result.get("score", 0.0))
    if label == "POSITIVE" and score > SENTIMENT_THRESHOLD:
        return "positive"
    if label == "NEGATIVE" and score > SENTIMENT_THRESHOLD:
        return "negative"
    return "neutral"


def extract_keywords(text: str, emotions: List[Dict[str, Any]]) -> List[str]:
    """
    Combines the most frequent words of the text with the detected emotion names.

    Args:
        text (str): Journal text.
        emotions (List[Dict[str, Any]]): Emotion objects with an `emotion` key.

    Returns:
        List[str]: At most seven unique keywords, frequency keywords first.
    """
    words = [w for w in _WORD_RE.findall(text.lower()) if w not in STOP_WORDS]
    # Counter keeps first-seen order, so equal counts stay in reading order
    frequency = sorted(Counter(words).items(), key=lambda item: -item[1])
    frequency_keywords = [word for word, _ in frequency[:MAX_FREQUENCY_KEYWORDS]]

    emotion_words = [
        str(e.get("emotion"))
        for e in emotions
        if e.get("emotion") and str(e.get("emotion")) not in STOP_WORDS
    ]

    return list(dict.fromkeys(frequency_keywords + emotion_words))[:MAX_KEYWORDS]


def build_recommendations(sentiment: str, dominant_emotion: str, journal_prompts: List[str]) -> List[str]:
    if sentiment == "negative":
        group = EMOTION_GROUPS.get(dominant_emotion or "neutral", "other")
        recommendations = list(NEGATIVE_RECOMMENDATIONS[group])
    elif sentiment == "positive":
        recommendations = list(POSITIVE_RECOMMENDATIONS)
    else:
        recommendations = list(NEUTRAL_RECOMMENDATIONS)

    return recommendations + list(journal_prompts or [])


def analyze_text(text: str, ai_service: AIService) -> Dict[str, Any]:
    """
    Runs sentiment, emotion and prompt generation over a journal text.

    Args:
        text (str): Decrypted journal text or ad-hoc content.
        ai_service (AIService): Engine used for the model calls.

    Returns:
        Dict[str, Any]: sentiment, sentiment_score, emotions, dominant_emotion,
        keywords, recommendations and timestamp.
    """
    sentiment_result = ai_service.analyze_sentiment(text)
    emotions_result = ai_service.analyze_emotions(text)
    journal_prompts = ai_service.get_journal_prompts(REFLECTION_PROMPT_MOOD)

    sentiment = map_sentiment(sentiment_result)
    emotions = emotions_result.get("emotions", [])
    dominant = emotions_result.get("dominant") or "neutral"

    return {
        "sentiment": sentiment,
        "sentiment_score": float(sentiment_result.get("score", 0.5)),
        "emotions": emotions,
        "dominant_emotion": dominant,
        "keywords": extract_keywords(text, emotions),
        "recommendations": build_recommendations(sentiment, dominant, journal_prompts),
        "timestamp": datetime.datetime.now(datetime.timezone.utc),
    }
