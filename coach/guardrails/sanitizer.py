"""
Message sanitizer

Turns an untrusted JSON payload into a bounded, well-typed list of
conversation messages that is safe to forward to the completion provider.

Rules, applied in order:
1. Role whitelist - only {user, assistant} objects with string content survive.
   Client-supplied system messages are dropped (prompt injection defense).
2. Per-message clip to ``max_message_chars``.
3. Sliding window - only the last ``max_messages`` entries are kept.
4. Aggregate budget - more than ``max_total_chars`` rejects the whole request.
"""

from typing import Any, List

from loguru import logger

from coach.config.constants import CLIENT_ROLES
from coach.guardrails.config import GuardrailConfig
from coach.models.conversation import ConversationMessage
from coach.utils.errors import InvalidPayload, PayloadTooLarge


def extract_messages(body: Any) -> Any:
    """
    Pull the ``messages`` value out of a decoded request body.

    Raises:
        InvalidPayload: If the body is not an object with a ``messages`` list
    """
    if not isinstance(body, dict) or not isinstance(body.get("messages"), list):
        raise InvalidPayload("Invalid request payload")
    return body["messages"]


def _is_client_message(item: Any) -> bool:
    return (
        isinstance(item, dict)
        and isinstance(item.get("role"), str)
        and item["role"] in CLIENT_ROLES
        and isinstance(item.get("content"), str)
    )


def count_chars(messages: List[ConversationMessage]) -> int:
    """Total content length across messages"""
    return sum(len(m.content) for m in messages)


def sanitize_messages(raw_messages: Any, config: GuardrailConfig) -> List[ConversationMessage]:
    """
    Filter, clip and window client-supplied conversation history.

    Pure function: the same input and config always give the same output, and
    running it again on its own output changes nothing.

    Args:
        raw_messages: Value claimed to be a list of {role, content} objects
        config: Guardrail limits

    Returns:
        Sanitized messages, oldest first

    Raises:
        InvalidPayload: If the input is not a list or nothing valid remains
        PayloadTooLarge: If the retained content exceeds the character budget
    """
    if not isinstance(raw_messages, list):
        raise InvalidPayload("Invalid request payload")

    cleaned = [
        ConversationMessage(role=item["role"], content=item["content"][:config.max_message_chars])
        for item in raw_messages
        if _is_client_message(item)
    ]
    dropped = len(raw_messages) - len(cleaned)
    if dropped:
        logger.debug(f"Dropped {dropped} message(s) with invalid role or content")

    cleaned = cleaned[-config.max_messages:]

    if not cleaned:
        raise InvalidPayload("No valid messages provided")

    total = count_chars(cleaned)
    if total > config.max_total_chars:
        logger.info(f"Rejected chat payload: {total} chars exceeds budget of {config.max_total_chars}")
        raise PayloadTooLarge()

    return cleaned
