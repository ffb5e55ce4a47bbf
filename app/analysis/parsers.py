"""
Best-effort scrapers for free-text model output.

The model is asked for a fixed layout but rarely follows it exactly, so each
parser tries the strict shape first and degrades to looser matching.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

SENTIMENT_LABELS = ("POSITIVE", "NEGATIVE", "NEUTRAL")
DEFAULT_SENTIMENT_SCORE = 0.5
DEFAULT_INTENSITY = 0.5

_SCORE_RE = re.compile(r"([0-9]\.[0-9]+)")
_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")
_EMOTION_RE = re.compile(r"[\"']?emotion[\"']?\s*[:=]\s*[\"']?([^\"',}]+)[\"']?", re.IGNORECASE)
_INTENSITY_RE = re.compile(r"[\"']?intensity[\"']?\s*[:=]\s*(0\.\d+)", re.IGNORECASE)

_QUIZ_RE = re.compile(
    r"Q\d+:?\s*(.+?)\s*\n\s*A\)\s*(.+?)\s*\n\s*B\)\s*(.+?)\s*\n\s*C\)\s*(.+?)\s*\n\s*D\)\s*(.+?)\s*\n\s*Answer:?\s*([A-D])",
    re.IGNORECASE | re.DOTALL,
)
_QUIZ_SPLIT_RE = re.compile(r"Q\d+:|Question \d+:", re.IGNORECASE)
_OPTION_PREFIX_RE = re.compile(r"^[A-D][.)]\s*")
_ANSWER_LETTER_RE = re.compile(r"answer\W*([A-D])\b", re.IGNORECASE)

_PROMPT_SPLIT_RE = re.compile(r"\d+\.|\n-|\n\*")


def _answer_index(letter: str) -> int:
    return max(0, min(3, ord(letter.upper()) - ord("A")))


def _to_intensity(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return DEFAULT_INTENSITY


def parse_sentiment(text: str) -> Dict[str, Any]:
    """
    Reads a `LABEL\\nscore` reply.

    Returns:
        Dict[str, Any]: {"label": POSITIVE|NEGATIVE|NEUTRAL, "score": float in [0, 1]}.
    """
    lines = (text or "").strip().split("\n")
    label = lines[0].strip().strip("\"'*.").upper()
    if label not in SENTIMENT_LABELS:
        label = "NEUTRAL"

    score = DEFAULT_SENTIMENT_SCORE
    if len(lines) > 1:
        match = _SCORE_RE.search(lines[1])
        if match:
            score = float(match.group(1))

    return {"label": label, "score": min(1.0, max(0.0, score))}


def parse_emotions(text: str) -> Optional[Dict[str, Any]]:
    """
    Extracts up to three emotions from a JSON-ish reply.

    Returns:
        Optional[Dict[str, Any]]: {"dominant": str, "emotions": [{"emotion", "intensity"}]},
        or None when nothing usable was found.
    """
    if not text:
        return None

    block = _JSON_BLOCK_RE.search(text)
    if block:
        try:
            data = json.loads(block.group(0))
        except json.JSONDecodeError as e:
            logger.warning(f"Emotion reply was not valid JSON: {e}")
            data = None

        if isinstance(data, dict) and isinstance(data.get("emotions"), list):
            emotions = [
                {"emotion": str(item.get("emotion")), "intensity": _to_intensity(item.get("intensity"))}
                for item in data["emotions"][:3]
                if isinstance(item, dict) and item.get("emotion")
            ]
            if emotions:
                return {"dominant": emotions[0]["emotion"], "emotions": emotions}

    names = _EMOTION_RE.findall(text)
    intensities = _INTENSITY_RE.findall(text)
    emotions = []
    for i, name in enumerate(names[:3]):
        emotions.append(
            {
                "emotion": name.lower().strip(),
                "intensity": float(intensities[i]) if i < len(intensities) else DEFAULT_INTENSITY,
            }
        )
    if emotions:
        return {"dominant": emotions[0]["emotion"], "emotions": emotions}
    return None


def parse_quiz_questions(text: str, limit: int) -> List[Dict[str, Any]]:
    """
    Parses multiple-choice questions in the `Q1: / A) .. D) / Answer: X` layout.

    Falls back to splitting on question headers and reading the next five
    lines when the strict layout does not match.
    """
    questions: List[Dict[str, Any]] = []
    raw = text or ""

    for match in _QUIZ_RE.finditer(raw):
        if len(questions) >= limit:
            break
        question, a, b, c, d, answer = match.groups()
        questions.append(
            {
                "question": question.strip(),
                "options": [a.strip(), b.strip(), c.strip(), d.strip()],
                "correct_answer": _answer_index(answer),
            }
        )

    if questions:
        return questions

    for block in _QUIZ_SPLIT_RE.split(raw):
        if len(questions) >= limit:
            break
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        if len(lines) < 5:
            continue

        correct_answer = 0
        answer_line = next((line for line in lines if "answer" in line.lower()), None)
        if answer_line:
            letter = _ANSWER_LETTER_RE.search(answer_line)
            if letter:
                correct_answer = _answer_index(letter.group(1))

        questions.append(
            {
                "question": lines[0],
                "options": [_OPTION_PREFIX_RE.sub("", line).strip() for line in lines[1:5]],
                "correct_answer": correct_answer,
            }
        )

    return questions


def parse_journal_prompts(text: str, limit: int = 3) -> List[str]:
    """Splits a numbered or bulleted list into prompts longer than 10 characters."""
    items = [item.strip() for item in _PROMPT_SPLIT_RE.split(text or "")]
    return [item for item in items if len(item) > 10][:limit]
