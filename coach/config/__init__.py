"""
Configuration layer - Settings and constants
"""

from coach.config.settings import settings, Settings, PROJECT_ROOT
from coach.config.constants import COACH_SYSTEM_PROMPT, CLIENT_ROLES

__all__ = [
    "settings",
    "Settings",
    "PROJECT_ROOT",
    "COACH_SYSTEM_PROMPT",
    "CLIENT_ROLES",
]
