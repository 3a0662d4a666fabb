"""
Chat pipeline

Gate -> Sanitizer -> Prompt Assembler -> Completion Invoker, in that order.
Stateless: nothing is kept between requests.
"""

from typing import Any

from loguru import logger
from starlette.requests import ClientDisconnect

from coach.auth.gate import RequestGate
from coach.guardrails.config import GuardrailConfig
from coach.guardrails.prompt import assemble_prompt
from coach.guardrails.sanitizer import count_chars, extract_messages, sanitize_messages
from coach.llm.invoker import CompletionInvoker
from coach.utils.errors import InvalidPayload


async def read_json_body(request: Any) -> Any:
    """Decode the request body as JSON; malformed bodies are InvalidPayload."""
    try:
        return await request.json()
    except ClientDisconnect:
        logger.info("Client disconnected while sending the request body")
        raise InvalidPayload("Invalid request payload")
    except (ValueError, UnicodeDecodeError):
        raise InvalidPayload("Invalid request payload")


class ChatPipeline:
    """Single chat handler shared by every request."""

    def __init__(self, gate: RequestGate, invoker: CompletionInvoker, guardrails: GuardrailConfig):
        self.gate = gate
        self.invoker = invoker
        self.guardrails = guardrails

    async def reply(self, request: Any) -> str:
        """
        Run one chat request through the full pipeline.

        Args:
            request: Incoming request (identity assertion + JSON body)

        Returns:
            Generated reply text

        Raises:
            CoachError: Any of the typed failures, each terminal for the request
        """
        user_id = await self.gate.authorize(request)

        body = await read_json_body(request)
        messages = sanitize_messages(extract_messages(body), self.guardrails)
        prompt = assemble_prompt(messages, self.guardrails)

        logger.info(f"Chat request - user={user_id}, messages={len(messages)}, chars={count_chars(messages)}")
        reply = await self.invoker.invoke(prompt)
        logger.debug(f"Reply: {reply[:100]}...")
        return reply
