"""
LLM layer - Client factory, completion invoker, and response utilities
"""

from coach.llm.client import create_llm, log_provider_status
from coach.llm.invoker import (
    CompletionInvoker,
    CompletionParams,
    CompletionProvider,
    LangChainCompletionProvider,
)
from coach.llm.response_utils import extract_text_from_response

__all__ = [
    "create_llm",
    "log_provider_status",
    "CompletionInvoker",
    "CompletionParams",
    "CompletionProvider",
    "LangChainCompletionProvider",
    "extract_text_from_response",
]
