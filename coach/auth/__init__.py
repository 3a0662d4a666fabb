"""
Auth layer - request gate and collaborator interfaces
"""

from coach.auth.gate import EntitlementStore, IdentityResolver, RequestGate

__all__ = [
    "EntitlementStore",
    "IdentityResolver",
    "RequestGate",
]
