"""
Prompt assembly - the operator's instructions always go first, exactly once.
"""

from typing import List

from coach.config.constants import SYSTEM_ROLE
from coach.guardrails.config import GuardrailConfig
from coach.models.conversation import ConversationMessage


def assemble_prompt(messages: List[ConversationMessage], config: GuardrailConfig) -> List[ConversationMessage]:
    """Prepend the configured system prompt to sanitized history."""
    return [ConversationMessage(role=SYSTEM_ROLE, content=config.system_prompt), *messages]
