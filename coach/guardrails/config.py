"""
Guardrail configuration - limits and the locked system prompt.

Built once at startup and passed explicitly into the chat pipeline, so tests can
run the same pipeline with alternate limits.
"""

from dataclasses import dataclass

from coach.config.constants import COACH_SYSTEM_PROMPT


@dataclass(frozen=True)
class GuardrailConfig:
    """Immutable request limits applied to every chat call"""

    max_messages: int = 20
    max_message_chars: int = 1200
    max_total_chars: int = 8000
    system_prompt: str = COACH_SYSTEM_PROMPT

    def __post_init__(self):
        for name in ("max_messages", "max_message_chars", "max_total_chars"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if not self.system_prompt or not self.system_prompt.strip():
            raise ValueError("system_prompt must not be empty")

    @classmethod
    def from_settings(cls, settings) -> "GuardrailConfig":
        """Build guardrails from application settings"""
        return cls(
            max_messages=settings.chat_max_messages,
            max_message_chars=settings.chat_max_message_chars,
            max_total_chars=settings.chat_max_total_chars,
        )
