"""
Tests for the request gate

Authentication must be checked before entitlement, and both before any body work.
"""

import asyncio

import pytest

from coach.auth.gate import RequestGate
from coach.utils.errors import PaymentRequired, Unauthenticated
from tests.fakes import FakeEntitlementStore, FakeIdentityResolver, FakeRequest


def test_authorized_user_passes(gate, resolver, entitlements):
    """Authenticated, paid callers get their user id back"""
    user_id = asyncio.run(gate.authorize(FakeRequest()))
    assert user_id == "user-1"
    assert resolver.calls == 1
    assert entitlements.calls == ["user-1"]


@pytest.mark.parametrize("user_id", [None, ""])
def test_missing_identity_is_unauthenticated(user_id):
    """No identity means 401 and no entitlement lookup"""
    entitlements = FakeEntitlementStore()
    gate = RequestGate(FakeIdentityResolver(user_id=user_id), entitlements)

    with pytest.raises(Unauthenticated) as exc_info:
        asyncio.run(gate.authorize(FakeRequest()))

    assert exc_info.value.status_code == 401
    assert exc_info.value.public_message == "Authentication required"
    assert entitlements.calls == []


def test_resolver_failure_is_unauthenticated():
    """Auth provider errors are reported as 401, not 500"""
    entitlements = FakeEntitlementStore()
    gate = RequestGate(FakeIdentityResolver(error=RuntimeError("invalid JWT")), entitlements)

    with pytest.raises(Unauthenticated):
        asyncio.run(gate.authorize(FakeRequest()))
    assert entitlements.calls == []


def test_unpaid_user_is_payment_required():
    """Authenticated but unpaid callers get 402"""
    gate = RequestGate(FakeIdentityResolver(), FakeEntitlementStore(paid=False))

    with pytest.raises(PaymentRequired) as exc_info:
        asyncio.run(gate.authorize(FakeRequest()))
    assert exc_info.value.status_code == 402
    assert exc_info.value.public_message == "Paid access required"


def test_entitlement_lookup_failure_is_payment_required():
    """A failing entitlement store never grants access"""
    gate = RequestGate(FakeIdentityResolver(), FakeEntitlementStore(error=ConnectionError("db down")))

    with pytest.raises(PaymentRequired):
        asyncio.run(gate.authorize(FakeRequest()))


def test_truthy_non_bool_is_not_paid():
    """Only a real True grants access"""
    gate = RequestGate(FakeIdentityResolver(), FakeEntitlementStore(paid="yes"))

    with pytest.raises(PaymentRequired):
        asyncio.run(gate.authorize(FakeRequest()))


def test_authenticate_skips_entitlement(entitlements):
    """Login-only endpoints do not consult the entitlement store"""
    gate = RequestGate(FakeIdentityResolver(), entitlements)
    assert asyncio.run(gate.authenticate(FakeRequest())) == "user-1"
    assert entitlements.calls == []
