"""Utility exports."""

from .helpers import normalize_skill, normalize_skills
from .logger import configure_package_logging, get_logger

__all__ = [
    "get_logger",
    "configure_package_logging",
    "normalize_skill",
    "normalize_skills",
]
