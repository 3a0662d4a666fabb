"""
Guardrails - request sanitization and prompt assembly
"""

from coach.guardrails.config import GuardrailConfig
from coach.guardrails.sanitizer import extract_messages, sanitize_messages, count_chars
from coach.guardrails.prompt import assemble_prompt

__all__ = [
    "GuardrailConfig",
    "extract_messages",
    "sanitize_messages",
    "count_chars",
    "assemble_prompt",
]
