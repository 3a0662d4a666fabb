"""
LLM client factory

Creates appropriate LLM instances based on provider configuration.
"""

from typing import Optional
from loguru import logger

from coach.config.settings import settings


def _validate_ollama_model():
    """Validate that the configured Ollama model is available on the server."""
    import httpx
    try:
        response = httpx.get(f"{settings.ollama_base_url}/api/tags", timeout=3.0)
        response.raise_for_status()
        models_data = response.json()
        available_models = [model.get("name", "").split(":")[0] for model in models_data.get("models", [])]

        # Check if the configured model is available (handle both "llama3" and "llama3:latest")
        model_name = settings.ollama_model.split(":")[0]
        if model_name not in available_models:
            logger.error(
                f"❌ Ollama model '{settings.ollama_model}' is not available on the server.\n"
                f"   Available models: {', '.join(available_models) if available_models else 'None'}\n"
                f"   To install the model, run: ollama pull {settings.ollama_model}"
            )
        else:
            logger.debug(f"✅ Ollama model '{settings.ollama_model}' is available")
    except httpx.HTTPError as e:
        logger.warning(
            f"⚠️  Could not reach Ollama server at {settings.ollama_base_url} to validate model. "
            f"Make sure Ollama is running. Error: {e}"
        )


def log_provider_status():
    """Log configuration status at startup and validate the Ollama model if needed."""
    if settings.llm_provider == "openai":
        if settings.openai_api_key:
            key = settings.openai_api_key
            masked_key = key[:8] + "..." + key[-4:] if len(key) > 12 else "***"
            logger.info(f"✅ LLM Provider: OpenAI | Model: {settings.openai_model} | API key loaded: {masked_key}")
        else:
            logger.warning("⚠️  LLM Provider: OpenAI but OPENAI_API_KEY not set in .env file - API calls will fail!")
    elif settings.llm_provider == "ollama":
        logger.info(f"✅ LLM Provider: Ollama | Base URL: {settings.ollama_base_url} | Model: {settings.ollama_model}")
        _validate_ollama_model()
    else:
        logger.warning(f"⚠️  Unknown LLM provider: {settings.llm_provider}. Supported: 'openai', 'ollama'")


def create_llm(
    temperature: Optional[float] = None,
    max_completion_tokens: Optional[int] = None,
    model: Optional[str] = None,
    timeout: Optional[float] = None,
):
    """
    Factory function to create appropriate LLM based on provider configuration.

    Clients are built with retries disabled: one provider attempt per request.

    Args:
        temperature: Generation temperature (defaults to settings.chat_temperature)
        max_completion_tokens: Max tokens for completion (defaults to settings.chat_max_output_tokens)
        model: Model name (defaults to provider-specific model)
        timeout: Request timeout in seconds (defaults to settings.llm_timeout_seconds)

    Returns:
        LangChain ChatModel instance (ChatOpenAI or ChatOllama)
    """
    provider = settings.llm_provider.lower()
    max_tokens = max_completion_tokens or settings.chat_max_output_tokens
    temperature = temperature if temperature is not None else settings.chat_temperature
    timeout = timeout or settings.llm_timeout_seconds

    if provider == "openai":
        from langchain_openai import ChatOpenAI

        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")

        return ChatOpenAI(
            model=model or settings.openai_model,
            api_key=settings.openai_api_key,
            temperature=temperature,
            max_completion_tokens=max_tokens,
            timeout=timeout,
            max_retries=0,
        )

    elif provider == "ollama":
        try:
            from langchain_community.chat_models import ChatOllama
        except ImportError:
            raise ImportError(
                "Ollama support requires 'langchain-community'. "
                "Install it with: pip install 'coach-api[ollama]'"
            )

        return ChatOllama(
            model=model or settings.ollama_model,
            base_url=settings.ollama_base_url,
            temperature=temperature,
            num_predict=max_tokens,  # Ollama uses num_predict instead of max_completion_tokens
            timeout=int(timeout),
        )

    else:
        raise ValueError(f"Unsupported LLM provider: {provider}. Supported: 'openai', 'ollama'")
