"""
Session telemetry records

The chat client periodically reports coaching signals for a session. Only
authenticated callers may report, and free-text fields are clipped before
anything is stored.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol

from coach.config.constants import (
    TELEMETRY_DEFAULT_SOURCE,
    TELEMETRY_MAX_SOURCE_CHARS,
    TELEMETRY_MAX_SUMMARY_CHARS,
)
from coach.utils.errors import InvalidPayload


@dataclass(frozen=True)
class TelemetryRecord:
    """One telemetry event, ready to persist"""

    user_id: str
    session_id: str
    signals: Dict[str, Any]
    summary: str = ""
    sample: Optional[Dict[str, Any]] = None
    source: str = TELEMETRY_DEFAULT_SOURCE
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_row(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "session_id": self.session_id,
            "summary": self.summary,
            "signals": self.signals,
            "sample": self.sample,
            "source": self.source,
            "created_at": self.created_at,
        }


class TelemetryStore(Protocol):
    """Append-only sink for telemetry records"""

    async def record(self, record: TelemetryRecord) -> None:
        ...


def build_telemetry_record(user_id: str, body: Any) -> TelemetryRecord:
    """
    Validate a telemetry body and build the record to store.

    Args:
        user_id: Authenticated user id
        body: Decoded JSON body

    Returns:
        TelemetryRecord with clipped summary and source

    Raises:
        InvalidPayload: If the body is not an object, or sessionId/signals are missing
    """
    if not isinstance(body, dict):
        raise InvalidPayload("Invalid request payload")

    raw_session_id = body.get("sessionId")
    session_id = str(raw_session_id).strip() if raw_session_id else ""
    signals = body.get("signals")
    if not session_id or not isinstance(signals, dict):
        raise InvalidPayload("Missing required fields")

    summary = body.get("summary")
    sample = body.get("sample")
    source = body.get("source")

    return TelemetryRecord(
        user_id=user_id,
        session_id=session_id,
        signals=signals,
        summary=summary[:TELEMETRY_MAX_SUMMARY_CHARS] if isinstance(summary, str) else "",
        sample=sample if isinstance(sample, dict) else None,
        source=source[:TELEMETRY_MAX_SOURCE_CHARS] if isinstance(source, str) else TELEMETRY_DEFAULT_SOURCE,
    )
