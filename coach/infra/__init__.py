"""
Infrastructure layer - Supabase collaborators
"""

from coach.infra.supabase import (
    SupabaseEntitlementStore,
    SupabaseIdentityResolver,
    SupabaseTelemetryStore,
    extract_access_token,
    get_supabase_client,
)

__all__ = [
    "SupabaseEntitlementStore",
    "SupabaseIdentityResolver",
    "SupabaseTelemetryStore",
    "extract_access_token",
    "get_supabase_client",
]
