"""
Gemini LLM Provider
Google GenAI SDK, imported only when this provider is selected.
"""

import os
from typing import Dict, Any, Optional, List
from docsum.core.logging import setup_logger

logger = setup_logger()

DEFAULT_MODEL = "gemini-2.5-flash-lite"
MAX_OUTPUT_TOKENS = 1024


class GeminiClient:
    
    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY not found in environment variables")
        
        try:
            from google import genai
            from google.genai import types
        except ImportError as e:
            raise ImportError(f"Google GenAI SDK not installed. Install with: pip install google-genai. Error: {e}")
        
        self.types = types
        self.client = genai.Client(api_key=self.api_key)
        self.model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    
    def _build_contents(self, prompt: str, history: Optional[List[Dict[str, str]]]) -> list:
        # Gemini names the assistant role "model"
        turns = [(item["role"], item["content"]) for item in history or []] + [("user", prompt)]
        return [
            self.types.Content(
                role="model" if role == "assistant" else "user",
                parts=[self.types.Part(text=content)]
            )
            for role, content in turns
        ]
    
    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None,
        temperature: float = 0.4,
        max_output_tokens: int = MAX_OUTPUT_TOKENS
    ) -> Dict[str, Any]:
        """
        Generate a response, concatenating the text parts of the first candidate.
        
        Args:
            prompt: User prompt
            system: System instruction (optional)
            history: Prior chat turns as {"role", "content"} dicts (optional)
            temperature: Sampling temperature
            max_output_tokens: Output token cap
            
        Returns:
            Dict with 'text', 'provider', 'raw' keys
        """
        config = self.types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            system_instruction=system
        )
        
        response = self.client.models.generate_content(
            model=self.model,
            contents=self._build_contents(prompt, history),
            config=config
        )
        
        text = ""
        if response.candidates and response.candidates[0].content.parts:
            text = "".join(part.text for part in response.candidates[0].content.parts if getattr(part, "text", None))
        
        logger.info(f"Gemini generation successful (model: {self.model})")
        
        return {
            "text": text,
            "provider": "gemini",
            "raw": response
        }


def call_gemini(
    prompt: str,
    system: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None,
    temperature: float = 0.4
) -> Dict[str, Any]:
    """Convenience function to call Gemini."""
    return GeminiClient().generate(prompt, system, history, temperature)
