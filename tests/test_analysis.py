from app.analysis.service import (
    NEGATIVE_RECOMMENDATIONS,
    NEUTRAL_RECOMMENDATIONS,
    POSITIVE_RECOMMENDATIONS,
    analyze_text,
    build_recommendations,
    extract_keywords,
    map_sentiment,
)
from tests.fakes import FakeAIService


def test_map_sentiment_thresholds():
    assert map_sentiment({"label": "POSITIVE", "score": 0.61}) == "positive"
    assert map_sentiment({"label": "POSITIVE", "score": 0.6}) == "neutral"
    assert map_sentiment({"label": "NEGATIVE", "score": 0.95}) == "negative"
    assert map_sentiment({"label": "NEGATIVE", "score": 0.3}) == "neutral"
    assert map_sentiment({"label": "NEUTRAL", "score": 0.99}) == "neutral"


def test_extract_keywords_frequency_then_emotions():
    text = "Exams exams exams tomorrow. Studying physics tonight, physics is hard. Also really tired"
    keywords = extract_keywords(text, [{"emotion": "anxiety"}, {"emotion": "exams"}])
    assert keywords == ["exams", "physics", "tomorrow", "studying", "tonight", "anxiety"]


def test_extract_keywords_skips_stop_words_and_caps_length():
    text = "this that with really alpha bravo charlie delta echoes foxtrot"
    keywords = extract_keywords(
        text, [{"emotion": "joy"}, {"emotion": "calm"}, {"emotion": "hope"}, {"emotion": "really"}]
    )
    assert "this" not in keywords
    assert "really" not in keywords
    assert keywords == ["alpha", "bravo", "charlie", "delta", "echoes", "joy", "calm"]


def test_build_recommendations_branches():
    prompts = ["What helped you today?"]
    assert build_recommendations("negative", "annoyance", prompts) == NEGATIVE_RECOMMENDATIONS["anger"] + prompts
    assert build_recommendations("negative", "disappointment", []) == NEGATIVE_RECOMMENDATIONS["sadness"]
    assert build_recommendations("negative", "fear", []) == NEGATIVE_RECOMMENDATIONS["anxiety"]
    assert build_recommendations("negative", "boredom", []) == NEGATIVE_RECOMMENDATIONS["other"]
    assert build_recommendations("positive", "joy", prompts) == POSITIVE_RECOMMENDATIONS + prompts
    assert build_recommendations("neutral", "neutral", []) == NEUTRAL_RECOMMENDATIONS


def test_analyze_text_combines_model_calls():
    ai = FakeAIService(
        replies={
            "Analyze the sentiment": "NEGATIVE\n0.9",
            "emotional tone": '{"emotions": [{"emotion": "anger", "intensity": 0.9}]}',
            "journaling prompts": "1. What set off your anger today?\n2. How could tomorrow go differently?",
        }
    )
    result = analyze_text("Traffic traffic everywhere, meeting was late again", ai)

    assert result["sentiment"] == "negative"
    assert result["sentiment_score"] == 0.9
    assert result["dominant_emotion"] == "anger"
    assert result["emotions"] == [{"emotion": "anger", "intensity": 0.9}]
    assert result["keywords"][0] == "traffic"
    assert "anger" in result["keywords"]
    assert result["recommendations"] == NEGATIVE_RECOMMENDATIONS["anger"] + [
        "What set off your anger today?",
        "How could tomorrow go differently?",
    ]
    assert result["timestamp"].tzinfo is not None
