"""
Telemetry endpoint - stores coaching signals reported by the chat client.
"""

from fastapi import APIRouter, Depends, Request
from loguru import logger

from coach.api.deps import get_request_gate, get_telemetry_store
from coach.api.models import ErrorResponse, TelemetryAck
from coach.auth.gate import RequestGate
from coach.services.chat_pipeline import read_json_body
from coach.telemetry.records import TelemetryStore, build_telemetry_record
from coach.utils.errors import TelemetryUnavailable


router = APIRouter(prefix="/api", tags=["telemetry"])


@router.post(
    "/telemetry",
    response_model=TelemetryAck,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def record_telemetry(
    request: Request,
    gate: RequestGate = Depends(get_request_gate),
    store: TelemetryStore = Depends(get_telemetry_store),
) -> TelemetryAck:
    """
    Record a telemetry event for the caller's session

    Requires login only; paid access is not checked.

    **Request:**
    ```json
    {
      "sessionId": "a1b2",
      "signals": {"focus": 62, "pressure": 48, "intent": "Stay calm on serve"},
      "summary": "Pre-match nerves",
      "source": "chat_client"
    }
    ```
    """
    user_id = await gate.authenticate(request)
    record = build_telemetry_record(user_id, await read_json_body(request))

    try:
        await store.record(record)
    except Exception:
        logger.exception(f"Telemetry insert failed - user={user_id}, session={record.session_id}")
        raise TelemetryUnavailable()

    return TelemetryAck(ok=True)
