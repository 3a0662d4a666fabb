"""
Conversation models shared by the guardrails and the LLM layer.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class ConversationMessage:
    """A single chat turn. List position encodes chronological order."""

    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to the {role, content} wire shape"""
        return asdict(self)
