"""
Pydantic models for the public API contract
"""

from pydantic import BaseModel, Field


class ChatReply(BaseModel):
    """Successful chat response"""
    reply: str = Field(..., description="Generated coaching reply")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"reply": "Before the serve, take one slow breath and pick a single target."}
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint. Never carries internal detail."""
    error: str = Field(..., description="Generic, caller-safe error message")


class TelemetryAck(BaseModel):
    """Telemetry accepted"""
    ok: bool = True


class HealthResponse(BaseModel):
    """
    Health check response

    Attributes:
        status: Service health status
        service: Service name
        version: API version
    """
    status: str = Field(..., description="Health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
