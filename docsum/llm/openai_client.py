"""
OpenAI LLM Provider
Chat completions with a cheaper fallback model. The SDK is imported only when
this provider is selected.
"""

import os
from typing import Dict, Any, Optional, List
from docsum.core.logging import setup_logger
from docsum.llm.messages import build_chat_messages

logger = setup_logger()

DEFAULT_MODEL = "gpt-4o"
FALLBACK_MODEL = "gpt-4o-mini"
MAX_TOKENS = 600


class OpenAIClient:
    
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise ValueError("OPENAI_API_KEY not found in environment variables")
        
        try:
            from openai import OpenAI
        except ImportError as e:
            raise ImportError(f"OpenAI SDK not installed. Install with: pip install openai. Error: {e}")
        
        self.client = OpenAI(api_key=self.api_key)
        self.model = os.getenv("OPENAI_MODEL", DEFAULT_MODEL)
    
    def _complete(self, model: str, messages: List[Dict[str, str]], temperature: float, max_tokens: int):
        return self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens
        )
    
    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None,
        temperature: float = 0.3,
        max_tokens: int = MAX_TOKENS
    ) -> Dict[str, Any]:
        """
        Generate a chat completion.
        
        The configured model is tried first; on any API error the request is
        retried once with gpt-4o-mini.
        
        Returns:
            Dict with 'text', 'provider', 'raw' keys
        """
        messages = build_chat_messages(prompt, system, history)
        model = self.model
        
        try:
            response = self._complete(model, messages, temperature, max_tokens)
        except Exception as e:
            if model == FALLBACK_MODEL:
                raise
            logger.warning(f"{model} failed, retrying with {FALLBACK_MODEL}: {e}")
            model = FALLBACK_MODEL
            response = self._complete(model, messages, temperature, max_tokens)
        
        logger.info(f"OpenAI generation successful (model: {model})")
        
        return {
            "text": response.choices[0].message.content or "",
            "provider": "openai",
            "raw": response
        }


def call_openai(
    prompt: str,
    system: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None,
    temperature: float = 0.3
) -> Dict[str, Any]:
    return OpenAIClient().generate(prompt, system, history, temperature)
