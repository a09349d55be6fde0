"""
Remote summarization and document question answering via the LLM router.

These are the remote collaborators the local extractive engine backs up:
callers catch RemoteServiceError and fall back to the local path.
"""

import json
import re
from typing import Dict, Any, List, Optional

from docsum.core.config import settings
from docsum.core.errors import RemoteServiceError
from docsum.core.logging import setup_logger
from docsum.llm.router import call_llm

logger = setup_logger()

_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

CHAT_ROLES = ("user", "assistant")

SUMMARY_SYSTEM_PROMPT = (
    "You are a document summarizer. Create concise, accurate summaries based only on provided content."
)

CHAT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Use only the text in the user's document as context for every answer. "
    "Keep answers relevant, extractive, and cite the context as needed. "
    "If asked, you can provide summaries, key points, or clarifications. "
    "If information isn't in the document, be honest."
)

_STYLE_HINTS = {
    "paragraph": "a single concise paragraph",
    "bullets": "a bulleted list of key points",
    "tldr": "a TL;DR of at most two sentences",
}


def build_summary_prompt(text: str, summary_type: str, tone: str, length_percent: int) -> str:
    style = _STYLE_HINTS.get(summary_type, _STYLE_HINTS["paragraph"])
    return f"""Please analyze the following text and provide:
1. A summary written as {style}, in a {tone} tone, roughly {length_percent}% of the original length.
2. A list of 5-7 important keywords.

Format your response as JSON with the following structure exactly:
{{
  "summary": "Your summary text here...",
  "keywords": ["keyword1", "keyword2", "keyword3"]
}}

The text to summarize is:
{text}"""


def parse_summary_response(response_text: str) -> Dict[str, Any]:
    """
    Pull {"summary", "keywords"} out of a model response.
    
    Responses without a parsable JSON object are used verbatim as the summary.
    """
    match = _JSON_BLOCK_RE.search(response_text or "")
    if match:
        try:
            parsed = json.loads(match.group(0))
            if isinstance(parsed, dict) and parsed.get("summary"):
                keywords = parsed.get("keywords") or []
                return {
                    "summary": str(parsed["summary"]),
                    "keywords": [str(k) for k in keywords if k]
                }
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse summary JSON: {e}")
    
    return {"summary": (response_text or "").strip(), "keywords": []}


def remote_summarize(
    text: str,
    summary_type: str = "paragraph",
    tone: str = "neutral",
    length_percent: int = 50
) -> Dict[str, Any]:
    """
    Summarize text with the configured LLM provider.
    
    Returns:
        Dict with 'summary', 'keywords' and 'provider'
        
    Raises:
        RemoteServiceError: If the call fails or returns no text
    """
    response = call_llm(
        prompt=build_summary_prompt(text, summary_type, tone, length_percent),
        system=SUMMARY_SYSTEM_PROMPT,
        temperature=0.4
    )
    
    parsed = parse_summary_response(response.get("text", ""))
    if not parsed["summary"]:
        raise RemoteServiceError("Empty summary from LLM", provider=response.get("provider", "none"))
    
    parsed["provider"] = response.get("provider")
    return parsed


def trim_history(history: Optional[List[Dict[str, str]]], limit: int) -> List[Dict[str, str]]:
    """Keep the last `limit` well-formed user/assistant turns."""
    if not history or limit <= 0:
        return []
    
    valid = [
        {"role": item["role"], "content": item["content"]}
        for item in history
        if item and item.get("role") in CHAT_ROLES and item.get("content")
    ]
    return valid[-limit:]


def remote_answer(
    question: str,
    context: str,
    history: Optional[List[Dict[str, str]]] = None
) -> Dict[str, Any]:
    """
    Answer a question about a document with the configured LLM provider.
    
    Returns:
        Dict with 'answer' and 'provider'
        
    Raises:
        RemoteServiceError: If the call fails or returns no text
    """
    system = (
        f"{CHAT_SYSTEM_PROMPT}\n\n"
        f"Document content: {context[:settings.CHAT_CONTEXT_CHAR_LIMIT]}"
    )
    
    response = call_llm(
        prompt=question,
        system=system,
        history=trim_history(history, settings.CHAT_HISTORY_LIMIT),
        temperature=0.3
    )
    
    answer = (response.get("text") or "").strip()
    if not answer:
        raise RemoteServiceError("Empty answer from LLM", provider=response.get("provider", "none"))
    
    return {"answer": answer, "provider": response.get("provider")}
