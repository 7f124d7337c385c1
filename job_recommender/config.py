"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw.strip() else default
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Resume storage: "/uploads/resumes/x.pdf" resolves against this directory
UPLOADS_ROOT: str = os.getenv("UPLOADS_ROOT", "") or os.getcwd()

# Document parsing can hang on malformed files; bound each extraction
EXTRACTION_TIMEOUT_SECONDS: float = _env_float("EXTRACTION_TIMEOUT_SECONDS", 5.0)

# HTTP / fetch settings (remote resume URLs)
HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", 30.0)

# Recommendation limits
RECOMMENDATION_LIMIT: int = _env_int("RECOMMENDATION_LIMIT", 10)
REASON_MAX_SKILLS: int = _env_int("REASON_MAX_SKILLS", 4)

# Additive bonuses on top of the skill coverage score (final score capped at 100)
TITLE_BONUS: float = _env_float("TITLE_BONUS", 10.0)
EXPERIENCE_BONUS: float = _env_float("EXPERIENCE_BONUS", 5.0)

# Optional JSON vocabulary overriding the built-in skill/title lists
SKILL_VOCABULARY_PATH: str = os.getenv("SKILL_VOCABULARY_PATH", "")

# Supported resume extensions (lower-case, with dot)
RESUME_EXTENSIONS: dict = {
    ".pdf": "pdf",
    ".docx": "docx",
    ".doc": "doc",
    ".txt": "txt",
}
