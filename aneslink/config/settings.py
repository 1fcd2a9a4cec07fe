import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# API Configuration
API_TITLE = "AnesLink Chat API"
API_DESCRIPTION = "Anesthesiology assistant proxy for the DeepSeek chat API"
API_VERSION = "1.0.0"

# Model Configuration
MODEL_NAME = "deepseek-chat"
BASE_URL = "https://api.deepseek.com"
TEMPERATURE = 0.7
MAX_TOKENS = 1000
REQUEST_TIMEOUT = 30  # seconds

# "explicit" uses the request's language field, "detect" classifies the message text
LANGUAGE_POLICY = os.getenv("LANGUAGE_POLICY", "explicit")


def get_deepseek_api_key() -> Optional[str]:
    """Read the upstream credential at request time.

    Used as a FastAPI dependency so the key is never cached at import and
    tests can override it.
    """
    key = os.getenv("DEEPSEEK_API_KEY")
    if key is None or not key.strip():
        return None
    return key.strip()


# Sent on every response, including errors and the OPTIONS pre-flight
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

# Logging Configuration
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": "INFO"
        }
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO"
    }
}
