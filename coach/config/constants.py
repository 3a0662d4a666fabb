"""
Application constants

Centralized constants used across the application.
"""

# ============================================================================
# System Prompt (locked)
# ============================================================================

# Only ever sent as the first message of a completion request.
# Never built from, or merged with, client input.
COACH_SYSTEM_PROMPT = """
You are Dr. Brett GPT, a calm, practical mental performance coach for athletes (16+).

Your role:
- Focus on execution, not hype or therapy
- Give short, usable routines, cues, and plans
- Be supportive but direct
- No emojis, no slang, no fluff

Boundaries:
- You are NOT a doctor, therapist, or emergency service
- Do not give medical or clinical advice
- If the user expresses self-harm or crisis, advise seeking immediate professional help

Style:
- Clear
- Structured
- Athlete-friendly
- Calm and confident
"""


# ============================================================================
# Conversation roles
# ============================================================================

SYSTEM_ROLE = "system"
USER_ROLE = "user"
ASSISTANT_ROLE = "assistant"

# Roles a client is allowed to send
CLIENT_ROLES = frozenset({USER_ROLE, ASSISTANT_ROLE})


# ============================================================================
# Telemetry limits
# ============================================================================

TELEMETRY_MAX_SUMMARY_CHARS = 240
TELEMETRY_MAX_SOURCE_CHARS = 64
TELEMETRY_DEFAULT_SOURCE = "chat_client"
TELEMETRY_TABLE = "telemetry_events"

PROFILES_TABLE = "profiles"
