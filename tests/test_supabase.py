"""
Tests for the Supabase collaborators, using an in-memory client double
"""

import asyncio
from types import SimpleNamespace

import pytest

from coach.infra.supabase import (
    SupabaseEntitlementStore,
    SupabaseIdentityResolver,
    SupabaseTelemetryStore,
    extract_access_token,
)
from coach.telemetry.records import TelemetryRecord
from tests.fakes import FakeRequest


class _FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table

    def select(self, columns):
        self.client.log.append(("select", self.table, columns))
        return self

    def eq(self, column, value):
        self.client.log.append(("eq", column, value))
        return self

    def limit(self, n):
        return self

    def insert(self, row):
        self.client.log.append(("insert", self.table, row))
        return self

    def execute(self):
        return SimpleNamespace(data=self.client.rows)


class _FakeSupabaseClient:
    def __init__(self, user_id=None, rows=None, auth_error=None):
        self.user_id = user_id
        self.rows = rows if rows is not None else []
        self.auth_error = auth_error
        self.tokens = []
        self.log = []
        self.auth = SimpleNamespace(get_user=self._get_user)

    def _get_user(self, token):
        self.tokens.append(token)
        if self.auth_error:
            raise self.auth_error
        user = SimpleNamespace(id=self.user_id) if self.user_id else None
        return SimpleNamespace(user=user)

    def table(self, name):
        return _FakeQuery(self, name)


def test_token_from_bearer_header():
    """Bearer header wins over cookie"""
    request = FakeRequest(headers={"authorization": "Bearer abc.def"}, cookies={"sb-access-token": "cookie"})
    assert extract_access_token(request, "sb-access-token") == "abc.def"


def test_token_from_cookie():
    """Cookie is used when there is no bearer header"""
    request = FakeRequest(cookies={"sb-access-token": "from-cookie"})
    assert extract_access_token(request, "sb-access-token") == "from-cookie"


@pytest.mark.parametrize("headers", [{}, {"authorization": "Basic dXNlcg=="}, {"authorization": "Bearer   "}])
def test_no_token(headers):
    """Missing or non-bearer credentials give no token"""
    assert extract_access_token(FakeRequest(headers=headers), "sb-access-token") is None


def test_resolver_returns_user_id():
    """Valid token resolves to the Supabase user id"""
    client = _FakeSupabaseClient(user_id="6f1c")
    resolver = SupabaseIdentityResolver(client=client, cookie_name="sb-access-token")
    request = FakeRequest(headers={"authorization": "Bearer tok"})

    assert asyncio.run(resolver.resolve(request)) == "6f1c"
    assert client.tokens == ["tok"]


def test_resolver_without_token_skips_network():
    """No token means no Supabase call"""
    client = _FakeSupabaseClient(user_id="6f1c")
    resolver = SupabaseIdentityResolver(client=client, cookie_name="sb-access-token")

    assert asyncio.run(resolver.resolve(FakeRequest())) is None
    assert client.tokens == []


def test_resolver_propagates_auth_errors():
    """Auth errors surface to the gate, which turns them into 401"""
    client = _FakeSupabaseClient(auth_error=RuntimeError("invalid JWT"))
    resolver = SupabaseIdentityResolver(client=client, cookie_name="sb-access-token")

    with pytest.raises(RuntimeError):
        asyncio.run(resolver.resolve(FakeRequest(headers={"authorization": "Bearer bad"})))


@pytest.mark.parametrize("rows, expected", [
    ([{"is_paid": True}], True),
    ([{"is_paid": False}], False),
    ([{"is_paid": None}], False),
    ([], False),
])
def test_entitlement_store(rows, expected):
    """profiles.is_paid must be exactly true"""
    client = _FakeSupabaseClient(rows=rows)
    store = SupabaseEntitlementStore(client=client)

    assert asyncio.run(store.is_paid("6f1c")) is expected
    assert ("select", "profiles", "is_paid") in client.log
    assert ("eq", "id", "6f1c") in client.log


def test_telemetry_store_inserts_row():
    """Records are inserted into telemetry_events"""
    client = _FakeSupabaseClient()
    store = SupabaseTelemetryStore(client=client)
    record = TelemetryRecord(user_id="u1", session_id="s1", signals={"focus": 50})

    asyncio.run(store.record(record))

    action, table, row = client.log[0]
    assert (action, table) == ("insert", "telemetry_events")
    assert row["session_id"] == "s1"
    assert row["signals"] == {"focus": 50}
