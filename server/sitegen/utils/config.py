# sitegen/utils/config.py
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# backend
AI_MODEL = os.environ.get("AI_MODEL", "gemini-2.5-flash")
AI_TEMPERATURE = float(os.environ.get("AI_TEMPERATURE", 0.7))
AI_MAX_TOKENS = int(os.environ.get("AI_MAX_TOKENS", 4000))
AI_TIMEOUT = float(os.environ.get("AI_TIMEOUT", 60))  # seconds per backend call

# modes
LOCAL_MODE = _env_flag("SITEGEN_LOCAL_MODE", False)

# logging / transport
LOG_DIR = os.environ.get("AI_BACKEND_LOG_DIR", "./ai_backend_logs")
CLIENT_URL = os.environ.get("CLIENT_URL", "http://localhost:5173")
SERVICE_NAME = "Smart Genesis Backend"


def get_api_key() -> Optional[str]:
    """
    Backend credential, read at call time so a key added to the environment
    is picked up without a restart. Absent key means fallback-only operation.
    """
    key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY")
    if key and key.strip():
        return key.strip()
    return None


def backend_configured() -> bool:
    return get_api_key() is not None
