"""
LLM Provider Module
Modular, optional LLM integrations for Gemini, OpenAI, and Ollama.
"""

from docsum.llm.router import call_llm, is_llm_enabled
from docsum.llm.remote import remote_summarize, remote_answer

__all__ = ["call_llm", "is_llm_enabled", "remote_summarize", "remote_answer"]
