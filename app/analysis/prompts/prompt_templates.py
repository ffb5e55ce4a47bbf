# Persona prompts for mood chat
CHAT_SYSTEM_PROMPTS: dict[str, str] = {
    "happy": (
        "You are an enthusiastic chatbot that celebrates achievements and amplifies positive emotions. "
        "Be cheerful, congratulatory, and help users maintain their positive state."
    ),
    "sad": (
        "You are an empathetic chatbot specializing in supporting people through sadness or depression. "
        "Respond with warmth, validation, and gentle encouragement. Never be dismissive of feelings."
    ),
    "frustrated": (
        "You are a calm, patient chatbot that helps users manage frustration and stress. "
        "Provide practical strategies for regaining focus and perspective."
    ),
    "study": (
        "You are a focused study assistant chatbot. Help users understand complex topics, plan study sessions, "
        "and provide clear explanations. Be concise and educational."
    ),
}
DEFAULT_CHAT_SYSTEM_PROMPT: str = "You are a helpful and supportive chatbot."

CHAT_USER_TEMPLATE: str = (
    "{system_prompt}\n\n"
    "User message: {message}\n\n"
    "Remember to respond in a way that's appropriate for someone feeling {mood}. "
    "Keep your response concise (maximum 4 sentences) and focused on addressing the user's needs directly."
)

SENTIMENT_TEMPLATE: str = (
    'Analyze the sentiment of the following text and respond with EXACTLY ONE WORD: either "POSITIVE", '
    '"NEGATIVE", or "NEUTRAL".\n'
    "Also include a confidence score between 0 and 1 (e.g., 0.8) on the next line.\n"
    'Here is the text to analyze: "{text}"'
)

EMOTIONS_TEMPLATE: str = (
    "Analyze the emotional tone of the following text. Return exactly 3 emotions and their intensities "
    "(as decimal values between 0 and 1) in JSON format like this:\n"
    "{{\n"
    '  "emotions": [\n'
    '    {{"emotion": "joy", "intensity": 0.8}},\n'
    '    {{"emotion": "surprise", "intensity": 0.4}},\n'
    '    {{"emotion": "neutral", "intensity": 0.2}}\n'
    "  ]\n"
    "}}\n\n"
    "Use emotions like: joy, sadness, anger, fear, surprise, disgust, neutral, love, excitement, confusion, etc.\n"
    'The text to analyze: "{text}"'
)

SUMMARY_TEMPLATE: str = (
    "Please provide a concise summary of the following text in 2-3 paragraphs:\n\n"
    "{text}\n\n"
    "Summary:"
)
SHORT_SUMMARY_TEMPLATE: str = (
    "Summarize the following text in a brief paragraph:\n\n"
    "{text}\n\n"
    "Summary:"
)

QUIZ_TEMPLATE: str = (
    "You are a helpful assistant that creates educational quiz questions. Generate exactly {num_questions} "
    "multiple-choice questions with 4 options each, using the provided text as the source material. "
    "Format each question as follows:\n\n"
    "Q1: [Question text]?\n"
    "A) [Option A]\n"
    "B) [Option B]\n"
    "C) [Option C]\n"
    "D) [Option D]\n"
    "Answer: [Correct letter]\n\n"
    "Here is the source text to base questions on:\n"
    "{text}"
)

JOURNAL_PROMPTS_TEMPLATE: str = (
    "You are a helpful assistant that provides thoughtful journaling prompts.\n\n"
    "Generate 3 specific journaling prompts for someone feeling {mood}. Each prompt should be 1-2 sentences "
    "and encourage self-reflection.\n\n"
    "Format your response as a numbered list like this:\n"
    "1. [First prompt]\n"
    "2. [Second prompt]\n"
    "3. [Third prompt]"
)

STATUS_PROBE_PROMPT: str = "Explain how AI works in a few words"
