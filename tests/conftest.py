"""
Shared fixtures for the test suite
"""

import pytest

from coach.auth.gate import RequestGate
from coach.guardrails.config import GuardrailConfig
from coach.llm.invoker import CompletionInvoker, CompletionParams
from coach.services.chat_pipeline import ChatPipeline
from tests.fakes import FakeCompletionProvider, FakeEntitlementStore, FakeIdentityResolver


TEST_PROMPT = "You are a test coach. Keep answers short."


@pytest.fixture
def guardrails():
    """Default limits with a test system prompt"""
    return GuardrailConfig(max_messages=20, max_message_chars=1200, max_total_chars=8000, system_prompt=TEST_PROMPT)


@pytest.fixture
def params():
    return CompletionParams(model="test-model", temperature=0.6, max_tokens=450, timeout_seconds=5.0)


@pytest.fixture
def resolver():
    return FakeIdentityResolver()


@pytest.fixture
def entitlements():
    return FakeEntitlementStore()


@pytest.fixture
def provider():
    return FakeCompletionProvider()


@pytest.fixture
def gate(resolver, entitlements):
    return RequestGate(resolver, entitlements)


@pytest.fixture
def pipeline(gate, provider, params, guardrails):
    return ChatPipeline(gate, CompletionInvoker(provider, params), guardrails)
