"""
Custom error classes for the application

Every error carries the HTTP status and the message a caller is allowed to see.
Underlying causes are logged server-side and never rendered.
"""


class CoachError(Exception):
    """Base exception for request failures"""
    status_code = 500
    public_message = "Internal server error"

    def __init__(self, public_message=None):
        if public_message is not None:
            self.public_message = public_message
        super().__init__(self.public_message)


class Unauthenticated(CoachError):
    """No resolvable identity on the request"""
    status_code = 401
    public_message = "Authentication required"


class PaymentRequired(CoachError):
    """Identity resolved but the user has no paid entitlement"""
    status_code = 402
    public_message = "Paid access required"


class InvalidPayload(CoachError):
    """Body missing, malformed, or empty after filtering"""
    status_code = 400
    public_message = "Invalid request payload"


class PayloadTooLarge(CoachError):
    """Aggregate character budget exceeded"""
    status_code = 413
    public_message = "Message content too long"


class EmptyCompletion(CoachError):
    """Provider answered but produced no usable text"""
    status_code = 500
    public_message = "No response generated"


class UpstreamUnavailable(CoachError):
    """Provider call failed or timed out"""
    status_code = 500
    public_message = "The coaching service is temporarily unavailable. Please try again shortly."


class TelemetryUnavailable(CoachError):
    """Telemetry event could not be written"""
    status_code = 500
    public_message = "Telemetry could not be recorded"


class ConfigurationError(Exception):
    """Required configuration is missing"""
    pass
