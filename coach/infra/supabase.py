"""
Supabase-backed identity, entitlement and telemetry collaborators.

A single service-role client is shared by the process. The Supabase SDK is
blocking, so every call is pushed to the threadpool.
"""

from functools import lru_cache
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool
from loguru import logger
from supabase import Client, create_client

from coach.config.constants import PROFILES_TABLE, TELEMETRY_TABLE
from coach.config.settings import settings
from coach.telemetry.records import TelemetryRecord
from coach.utils.errors import ConfigurationError


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Create the service-role Supabase client (once)"""
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ConfigurationError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY")
    logger.debug(f"Creating Supabase client for {settings.supabase_url}")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def extract_access_token(request: Any, cookie_name: Optional[str] = None) -> Optional[str]:
    """
    Read the caller's access token.

    Looks at ``Authorization: Bearer <token>`` first, then the auth cookie.
    """
    auth_header = request.headers.get("authorization") or ""
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()

    cookie_token = request.cookies.get(cookie_name or settings.auth_cookie_name)
    if cookie_token and cookie_token.strip():
        return cookie_token.strip()
    return None


class SupabaseIdentityResolver:
    """IdentityResolver that validates the access token with Supabase Auth."""

    def __init__(self, client: Optional[Client] = None, cookie_name: Optional[str] = None):
        self._client = client
        self.cookie_name = cookie_name or settings.auth_cookie_name

    @property
    def client(self) -> Client:
        return self._client or get_supabase_client()

    async def resolve(self, request: Any) -> Optional[str]:
        token = extract_access_token(request, self.cookie_name)
        if not token:
            return None

        response = await run_in_threadpool(self.client.auth.get_user, token)
        user = getattr(response, "user", None)
        return str(user.id) if user and user.id else None


class SupabaseEntitlementStore:
    """EntitlementStore reading ``profiles.is_paid``."""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or get_supabase_client()

    def _fetch_is_paid(self, user_id: str) -> bool:
        result = (
            self.client.table(PROFILES_TABLE)
            .select("is_paid")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        rows = result.data or []
        return bool(rows) and rows[0].get("is_paid") is True

    async def is_paid(self, user_id: str) -> bool:
        return await run_in_threadpool(self._fetch_is_paid, user_id)


class SupabaseTelemetryStore:
    """TelemetryStore inserting rows into ``telemetry_events``."""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or get_supabase_client()

    def _insert(self, row: dict) -> None:
        self.client.table(TELEMETRY_TABLE).insert(row).execute()

    async def record(self, record: TelemetryRecord) -> None:
        await run_in_threadpool(self._insert, record.to_row())
