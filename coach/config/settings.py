"""
Configuration management for the application.
Loads settings from environment variables and the project .env file.
"""

from pathlib import Path
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from loguru import logger

# Find project root (where .env and data/ live)
# This file is at coach/config/settings.py, so project root is 3 levels up
_project_root = Path(__file__).resolve().parent.parent.parent

# Export for use by the logger - ensures consistent data/ paths
PROJECT_ROOT = _project_root

# Load environment variables from project root
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(dotenv_path=_env_file, override=True)
    logger.debug(f"Loaded .env from: {_env_file}")
else:
    logger.warning(f".env file not found at: {_env_file}")
    # Fallback to default behavior (current directory)
    load_dotenv(override=True)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Service identity
    service_name: str = Field(default="coach-api")
    service_version: str = Field(default="1.0.0")
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(default=["http://localhost:3000", "http://127.0.0.1:3000"])

    # LLM Provider Selection
    llm_provider: str = Field(default="openai")  # Options: "openai" | "ollama"

    # API Keys
    openai_api_key: str = Field(default="")

    # OpenAI Configuration
    openai_model: str = Field(default="gpt-4o-mini")

    # Ollama Configuration
    ollama_base_url: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="llama3")

    # Completion parameters (fixed for every chat request)
    chat_temperature: float = Field(default=0.6)
    chat_max_output_tokens: int = Field(default=450)
    llm_timeout_seconds: float = Field(default=30.0)  # Provider call timeout

    # Chat guardrails (protect tokens & abuse)
    chat_max_messages: int = Field(default=20)  # Sliding window of client messages
    chat_max_message_chars: int = Field(default=1200)  # Per-message clip length
    chat_max_total_chars: int = Field(default=8000)  # Aggregate budget, rejected when exceeded

    # Supabase (identity, profiles, telemetry)
    supabase_url: str = Field(default="")
    supabase_service_role_key: str = Field(default="")
    auth_cookie_name: str = Field(default="sb-access-token")

    class Config:
        env_file = str(_project_root / ".env")
        env_file_encoding = "utf-8"
        extra = "allow"  # Allow extra fields from .env


# Create global settings instance
settings = Settings()
