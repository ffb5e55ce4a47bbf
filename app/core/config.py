import os
from dotenv import load_dotenv

load_dotenv()  # Load from .env file

APP_ENV = os.getenv("APP_ENV", "production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./echoorb.db")

# Journal encryption
ENCRYPTION_KEY = os.getenv("ENCRYPTION_KEY")

# AI engine: "gemini" or "openai"
AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini")

# Google Gemini
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_DEFAULT_MODEL = os.getenv("GEMINI_DEFAULT_MODEL", "gemini-2.5-flash-lite")
GEMINI_FLASH_MODEL = os.getenv("GEMINI_FLASH_MODEL", "gemini-2.5-flash-lite")

# OpenAI
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_CHAT_MODEL = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
OPENAI_FLASH_MODEL = os.getenv("OPENAI_FLASH_MODEL", "gpt-4o-mini")

# Quotes
ZENQUOTES_URL = os.getenv("ZENQUOTES_URL", "https://zenquotes.io/api/")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# HTTP surface
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
CHAT_RATE_LIMIT = os.getenv("CHAT_RATE_LIMIT", "100/15minutes")
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))


def is_development() -> bool:
    return APP_ENV.lower() == "development"
