"""
Domain models
"""

from coach.models.conversation import ConversationMessage

__all__ = ["ConversationMessage"]
