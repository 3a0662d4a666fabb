"""
Main FastAPI application for the Performance Coach API

This module creates and configures the FastAPI application with:
- CORS middleware for frontend integration
- API routes (chat, access gate, telemetry)
- Error handlers that never leak internal detail
- Health check endpoint
- Auto-generated API documentation
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from coach.api.deps import get_guardrails
from coach.api.models import HealthResponse
from coach.api.routes import access, chat, telemetry
from coach.config.settings import settings
from coach.llm.client import log_provider_status
from coach.utils.errors import CoachError
from coach.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan events

    Handles startup and shutdown tasks:
    - Startup: Log application start, provider status and guardrail limits
    - Shutdown: Log shutdown
    """
    # Startup
    logger.info("🚀 FastAPI application starting...")
    logger.info("📚 API docs available at http://localhost:8000/docs")
    logger.info("💬 Chat endpoint at http://localhost:8000/api/chat")

    log_provider_status()

    guardrails = get_guardrails()
    logger.info(
        f"🔒 Guardrails: max_messages={guardrails.max_messages}, "
        f"max_message_chars={guardrails.max_message_chars}, "
        f"max_total_chars={guardrails.max_total_chars}"
    )

    if not settings.supabase_url or not settings.supabase_service_role_key:
        logger.warning("⚠️  SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set - every gated request will be rejected")

    yield

    # Shutdown
    logger.info("🛑 FastAPI application shutting down...")


# Create FastAPI application
app = FastAPI(
    title="Performance Coach API",
    description="""
    Chat API for a mental performance coach.

    ## Features

    * **Paywalled chat** - login and an active paid profile are required
    * **Guardrails** - role whitelist, per-message clip, message window, character budget
    * **Locked system prompt** - clients cannot supply or override instructions
    * **Session telemetry** ingest for the chat client

    ## Example

    ```bash
    curl -X POST http://localhost:8000/api/chat \\
         -H "Authorization: Bearer $TOKEN" \\
         -H "Content-Type: application/json" \\
         -d '{"messages": [{"role": "user", "content": "I freeze on penalty kicks."}]}'
    ```
    """,
    version=settings.service_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS Configuration
# Origins come from settings (CORS_ORIGINS); credentials are needed for the auth cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(chat.router)
app.include_router(access.router)
app.include_router(telemetry.router)


@app.exception_handler(CoachError)
async def coach_error_handler(request: Request, exc: CoachError):
    """Render typed request failures as {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """
    Handle unhandled exceptions with a generic error response.

    Internal details are logged, never returned to the client.
    """
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint - API information
    """
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "health": "/health",
            "chat": "/api/chat",
            "start": "/start",
            "telemetry": "/api/telemetry",
        }
    }


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """
    Health check endpoint

    Use this endpoint to verify the service is running.
    Returns service status, name, and version.

    Returns:
        HealthResponse with service status
    """
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.service_version
    )
