"""
Completion invoker

Sends the assembled conversation to the external text-generation provider and
turns its outcome into either reply text or a typed, non-leaking error.
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from loguru import logger

from coach.config.constants import ASSISTANT_ROLE, SYSTEM_ROLE, USER_ROLE
from coach.llm.client import create_llm
from coach.llm.response_utils import extract_text_from_response
from coach.models.conversation import ConversationMessage
from coach.utils.errors import EmptyCompletion, UpstreamUnavailable


@dataclass(frozen=True)
class CompletionParams:
    """Generation parameters, configured once and shared by every request"""

    model: str
    temperature: float = 0.6
    max_tokens: int = 450
    timeout_seconds: float = 30.0

    @classmethod
    def from_settings(cls, settings) -> "CompletionParams":
        model = settings.openai_model if settings.llm_provider.lower() == "openai" else settings.ollama_model
        return cls(
            model=model,
            temperature=settings.chat_temperature,
            max_tokens=settings.chat_max_output_tokens,
            timeout_seconds=settings.llm_timeout_seconds,
        )


class CompletionProvider(Protocol):
    """External text-generation service"""

    async def complete(self, messages: List[ConversationMessage], params: CompletionParams) -> Optional[str]:
        ...


_MESSAGE_TYPES = {
    SYSTEM_ROLE: SystemMessage,
    USER_ROLE: HumanMessage,
    ASSISTANT_ROLE: AIMessage,
}


def to_langchain_messages(messages: List[ConversationMessage]) -> List[BaseMessage]:
    """Convert conversation messages to LangChain message objects"""
    return [_MESSAGE_TYPES[m.role](content=m.content) for m in messages]


class LangChainCompletionProvider:
    """CompletionProvider backed by the configured LangChain chat model."""

    def __init__(self):
        self._llms: Dict[CompletionParams, object] = {}

    def _llm_for(self, params: CompletionParams):
        llm = self._llms.get(params)
        if llm is None:
            llm = create_llm(
                temperature=params.temperature,
                max_completion_tokens=params.max_tokens,
                model=params.model,
                timeout=params.timeout_seconds,
            )
            self._llms[params] = llm
        return llm

    async def complete(self, messages: List[ConversationMessage], params: CompletionParams) -> Optional[str]:
        llm = self._llm_for(params)
        response = await llm.ainvoke(to_langchain_messages(messages))
        return extract_text_from_response(response)


class CompletionInvoker:
    """
    Single-attempt provider call with a timeout.

    Outcomes:
    - non-empty text: returned as-is
    - empty or missing text: EmptyCompletion
    - provider error or timeout: UpstreamUnavailable (cause logged, never surfaced)
    """

    def __init__(self, provider: CompletionProvider, params: CompletionParams):
        self.provider = provider
        self.params = params

    async def invoke(self, messages: List[ConversationMessage]) -> str:
        try:
            reply = await asyncio.wait_for(
                self.provider.complete(messages, self.params),
                timeout=self.params.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(f"Completion provider timed out after {self.params.timeout_seconds}s (model={self.params.model})")
            raise UpstreamUnavailable()
        except Exception:
            logger.exception(f"Completion provider call failed (model={self.params.model})")
            raise UpstreamUnavailable()

        if not isinstance(reply, str) or not reply.strip():
            logger.warning(f"Completion provider returned no text (model={self.params.model})")
            raise EmptyCompletion()

        return reply
