"""
Session telemetry ingest
"""

from coach.telemetry.records import TelemetryRecord, TelemetryStore, build_telemetry_record

__all__ = [
    "TelemetryRecord",
    "TelemetryStore",
    "build_telemetry_record",
]
