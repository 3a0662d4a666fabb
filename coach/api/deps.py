"""
Dependency providers

Each collaborator is built once from settings. Tests swap them through
``app.dependency_overrides``.
"""

from functools import lru_cache

from coach.auth.gate import RequestGate
from coach.config.settings import settings
from coach.guardrails.config import GuardrailConfig
from coach.infra.supabase import (
    SupabaseEntitlementStore,
    SupabaseIdentityResolver,
    SupabaseTelemetryStore,
)
from coach.llm.invoker import CompletionInvoker, CompletionParams, LangChainCompletionProvider
from coach.services.chat_pipeline import ChatPipeline
from coach.telemetry.records import TelemetryStore


@lru_cache(maxsize=1)
def get_guardrails() -> GuardrailConfig:
    return GuardrailConfig.from_settings(settings)


@lru_cache(maxsize=1)
def get_request_gate() -> RequestGate:
    return RequestGate(SupabaseIdentityResolver(), SupabaseEntitlementStore())


@lru_cache(maxsize=1)
def get_completion_invoker() -> CompletionInvoker:
    return CompletionInvoker(LangChainCompletionProvider(), CompletionParams.from_settings(settings))


@lru_cache(maxsize=1)
def get_chat_pipeline() -> ChatPipeline:
    return ChatPipeline(get_request_gate(), get_completion_invoker(), get_guardrails())


@lru_cache(maxsize=1)
def get_telemetry_store() -> TelemetryStore:
    return SupabaseTelemetryStore()
