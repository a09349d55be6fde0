"""
Ollama LLM Provider
Local models served by an Ollama daemon; no API key required.
"""

import os
from typing import Dict, Any, Optional, List
from docsum.core.logging import setup_logger
from docsum.llm.messages import build_chat_messages

logger = setup_logger()

DEFAULT_HOST = "http://localhost:11434"
DEFAULT_MODEL = "llama3.2"


def call_ollama(
    prompt: str,
    system: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None,
    temperature: float = 0.3
) -> Dict[str, Any]:
    """
    Chat with the model named by OLLAMA_MODEL on OLLAMA_HOST.
    
    Returns:
        Dict with 'text', 'provider', 'raw' keys
    """
    try:
        import ollama
    except ImportError as e:
        raise ImportError(f"Ollama SDK not installed. Install with: pip install ollama. Error: {e}")
    
    host = os.getenv("OLLAMA_HOST", DEFAULT_HOST)
    model = os.getenv("OLLAMA_MODEL", DEFAULT_MODEL)
    
    response = ollama.Client(host=host).chat(
        model=model,
        messages=build_chat_messages(prompt, system, history),
        options={"temperature": temperature}
    )
    
    logger.info(f"Ollama generation successful (model: {model}, host: {host})")
    
    return {
        "text": response["message"]["content"] or "",
        "provider": "ollama",
        "raw": response
    }
