"""
Chat message assembly shared by the OpenAI and Ollama providers.
"""

from typing import Dict, List, Optional


def build_chat_messages(
    prompt: str,
    system: Optional[str] = None,
    history: Optional[List[Dict[str, str]]] = None
) -> List[Dict[str, str]]:
    """
    Order: system instruction, prior turns, then the new user prompt.
    """
    messages = [{"role": "system", "content": system}] if system else []
    messages.extend({"role": item["role"], "content": item["content"]} for item in history or [])
    messages.append({"role": "user", "content": prompt})
    return messages
