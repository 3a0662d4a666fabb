"""
Request gate - authentication, then paid entitlement.

Runs before anything else touches the request, so rejected callers never cost
sanitization work or a provider call.
"""

from typing import Any, Optional, Protocol

from loguru import logger

from coach.utils.errors import PaymentRequired, Unauthenticated


class IdentityResolver(Protocol):
    """Resolves the caller's user id from the transport-level identity assertion"""

    async def resolve(self, request: Any) -> Optional[str]:
        ...


class EntitlementStore(Protocol):
    """Read-only view of the paid/unpaid flag per user"""

    async def is_paid(self, user_id: str) -> bool:
        ...


class RequestGate:
    """Authorize a request: identity first, entitlement second."""

    def __init__(self, identity_resolver: IdentityResolver, entitlement_store: EntitlementStore):
        self.identity_resolver = identity_resolver
        self.entitlement_store = entitlement_store

    async def authenticate(self, request: Any) -> str:
        """
        Resolve the caller's identity.

        Returns:
            Authenticated user id

        Raises:
            Unauthenticated: If no identity can be resolved
        """
        try:
            user_id = await self.identity_resolver.resolve(request)
        except Exception as e:
            logger.warning(f"Identity resolution failed: {type(e).__name__}: {e}")
            raise Unauthenticated()

        if not user_id:
            raise Unauthenticated()
        return user_id

    async def authorize(self, request: Any) -> str:
        """
        Authenticate the caller and require a paid entitlement.

        Returns:
            Authenticated, entitled user id

        Raises:
            Unauthenticated: If no identity can be resolved
            PaymentRequired: If the user is not entitled or the lookup fails
        """
        user_id = await self.authenticate(request)

        try:
            paid = await self.entitlement_store.is_paid(user_id)
        except Exception as e:
            logger.error(f"Entitlement lookup failed for user={user_id}: {type(e).__name__}: {e}")
            raise PaymentRequired()

        if paid is not True:
            logger.info(f"Paid access denied for user={user_id}")
            raise PaymentRequired()
        return user_id
