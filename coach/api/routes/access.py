"""
Access entry point - sends the browser to login, pricing, or chat.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from loguru import logger

from coach.api.deps import get_request_gate
from coach.auth.gate import RequestGate
from coach.utils.errors import PaymentRequired, Unauthenticated


router = APIRouter(tags=["access"])

LOGIN_URL = "/login?next=/start"
PRICING_URL = "/pricing"
CHAT_URL = "/chat"


@router.get("/start", include_in_schema=False)
async def start(request: Request, gate: RequestGate = Depends(get_request_gate)) -> RedirectResponse:
    """Redirect according to the same gate the chat endpoint uses."""
    try:
        user_id = await gate.authorize(request)
    except Unauthenticated:
        return RedirectResponse(LOGIN_URL)
    except PaymentRequired:
        return RedirectResponse(PRICING_URL)

    logger.debug(f"Start gate passed - user={user_id}")
    return RedirectResponse(CHAT_URL)
