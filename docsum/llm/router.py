"""
LLM Router
Central routing logic for selecting and calling LLM providers.
Supports fallback chains; failures surface as RemoteServiceError so callers
can fall back to the local extractive engine.
"""

import os
from typing import Dict, Any, Optional, List
from docsum.core.errors import RemoteServiceError
from docsum.core.logging import setup_logger

logger = setup_logger()

PROVIDERS = ["gemini", "openai", "ollama"]


def get_provider() -> str:
    """
    Get the configured LLM provider from environment.
    
    Returns:
        Provider name: 'none', 'gemini', 'openai', 'ollama', or 'auto'
    """
    return os.getenv("LLM_PROVIDER", "none").lower()


def is_llm_enabled() -> bool:
    """True unless LLM_PROVIDER is 'none'."""
    return get_provider() != "none"


def is_llm_configured() -> bool:
    """
    Check if any LLM provider is properly configured.
    
    Returns:
        True if at least one LLM provider has its credentials configured
    """
    provider = get_provider()
    
    if provider == "none":
        return False
    
    if provider in ("gemini", "auto") and os.getenv("GEMINI_API_KEY"):
        return True
    
    if provider in ("openai", "auto") and os.getenv("OPENAI_API_KEY"):
        return True
    
    if provider == "ollama":
        return True  # Ollama runs locally
    
    return False


def call_llm(
    prompt: str,
    system: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None,
    temperature: float = 0.3
) -> Dict[str, Any]:
    """
    Routes the request to the active LLM provider with fallback logic.
    
    Provider priority:
    1) Provider selected in LLM_PROVIDER config
    2) 'auto' mode: try Gemini → OpenAI → Ollama
    
    Args:
        prompt: User prompt
        system: System instruction (optional)
        history: Prior chat turns (optional)
        temperature: Sampling temperature
        
    Returns:
        Unified response format:
        {
            "text": str,           # Generated text
            "provider": str,       # Provider used
            "raw": object          # Raw response object
        }
        
    Raises:
        RemoteServiceError: If no provider is enabled or all providers fail
    """
    provider = get_provider()
    
    if provider == "none":
        raise RemoteServiceError("LLM provider not enabled - running in lightweight mode")
    
    if provider in PROVIDERS:
        return _call_specific_provider(provider, prompt, system, history, temperature)
    
    if provider == "auto":
        return _call_with_fallback(prompt, system, history, temperature)
    
    raise RemoteServiceError(
        f"Unknown LLM provider '{provider}'. Set LLM_PROVIDER to 'none', 'gemini', 'openai', 'ollama', or 'auto'."
    )


def _call_specific_provider(
    provider: str,
    prompt: str,
    system: Optional[str],
    history: Optional[List[Dict[str, str]]],
    temperature: float
) -> Dict[str, Any]:
    """
    Call a specific LLM provider.
    
    Raises:
        RemoteServiceError: If the provider is unavailable, unconfigured or fails
    """
    try:
        if provider == "gemini":
            from docsum.llm.gemini_client import call_gemini
            logger.info("Using Gemini provider")
            return call_gemini(prompt, system, history, temperature)
        
        elif provider == "openai":
            from docsum.llm.openai_client import call_openai
            logger.info("Using OpenAI provider")
            return call_openai(prompt, system, history, temperature)
        
        elif provider == "ollama":
            from docsum.llm.ollama_client import call_ollama
            logger.info("Using Ollama provider")
            return call_ollama(prompt, system, history, temperature)
    
    except ImportError as e:
        error_msg = f"{provider.capitalize()} provider not available: {str(e)}"
        logger.error(error_msg)
        raise RemoteServiceError(error_msg, provider=provider) from e
    
    except ValueError as e:
        # Missing API key
        error_msg = f"{provider.capitalize()} provider not configured: {str(e)}"
        logger.error(error_msg)
        raise RemoteServiceError(error_msg, provider=provider) from e
    
    except Exception as e:
        error_msg = f"{provider.capitalize()} provider failed: {str(e)}"
        logger.error(error_msg)
        status_code = getattr(e, "status_code", None)
        raise RemoteServiceError(error_msg, provider=provider, status_code=status_code) from e
    
    raise RemoteServiceError(f"Unsupported provider '{provider}'", provider=provider)


def _call_with_fallback(
    prompt: str,
    system: Optional[str],
    history: Optional[List[Dict[str, str]]],
    temperature: float
) -> Dict[str, Any]:
    """
    Try multiple providers with fallback logic.
    Order: Gemini → OpenAI → Ollama
    
    Raises:
        RemoteServiceError: If every provider fails
    """
    errors = []
    
    for provider in PROVIDERS:
        logger.info(f"Attempting provider: {provider}")
        try:
            return _call_specific_provider(provider, prompt, system, history, temperature)
        except RemoteServiceError as e:
            errors.append(str(e))
            logger.warning(f"Provider {provider} failed, trying next provider")
    
    logger.error("All LLM providers failed")
    raise RemoteServiceError("All LLM providers failed: " + "; ".join(errors), provider="auto")
