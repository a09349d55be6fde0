"""
Graceful Response Layer

Turns degraded or failed outcomes into a short user-facing message plus a
suggested next step, keeping the internal reason alongside for debugging.

Messages never expose technical details, never blame the user and stay
within one or two sentences.
"""

from enum import Enum
from typing import Dict, Any, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class DegradationLevel(str, Enum):
    """
    How much an operation had to give up.

    - NONE: full result
    - MILD: full result with minor limitations
    - FALLBACK: result produced by the local fallback path
    - FAILED: no result
    """
    NONE = "none"
    MILD = "mild"
    FALLBACK = "fallback"
    FAILED = "failed"


# context -> (message, action hint)
_GUIDANCE: Dict[str, Tuple[str, str]] = {
    "summarize_too_short": (
        "The provided text is too short for meaningful summarization.",
        "Provide at least a few full sentences of text."
    ),
    "summarize_no_content": (
        "Unable to generate a meaningful summary from the provided text.",
        "Make sure the text contains complete sentences with punctuation."
    ),
    "summarize_local_fallback": (
        "The AI summarizer was unavailable, so a summary was built from key sentences.",
        "Try again later for an AI-generated summary."
    ),
    "summarize_no_keywords": (
        "No distinctive keywords were found in the text.",
        "Longer text usually yields better keywords."
    ),
    "chat_local_fallback": (
        "The AI assistant was unavailable, so the answer quotes the most relevant passages.",
        "Try again later for an AI-generated answer."
    ),
    "chat_no_answer": (
        "Sorry, I couldn't generate an answer.",
        "Try rephrasing your question or using words from the document."
    ),
    "chat_context_reduced": (
        "The document is long, so only the passages related to your question were used.",
        "Mention specific terms from the document to target the right passages."
    ),
    "ingest_unsupported": (
        "This file type isn't supported.",
        "Upload a PDF, DOCX or TXT file, or paste the text directly."
    ),
    "ingest_empty": (
        "No readable text could be extracted from the input.",
        "Check that the file or page contains selectable text."
    ),
    "generic_fallback": (
        "The operation completed with limitations.",
        "Results may be limited, consider refining your input."
    ),
    "generic_error": (
        "An unexpected issue occurred during processing.",
        "Please try again or contact support if the issue persists."
    ),
}


def _guidance(context: str, default: str) -> Tuple[str, str]:
    return _GUIDANCE.get(context, _GUIDANCE[default])


def success_message(
    context: str,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Graceful fields for a fully successful operation (no message, no hint).

    Args:
        context: The operation context (e.g., "summarize", "chat")
        details: Optional extra fields to merge in
    """
    return {
        "graceful_message": None,
        "degradation_level": DegradationLevel.NONE.value,
        "user_action_hint": None,
        **(details or {})
    }


def graceful_notice(
    context: str,
    meta: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Graceful fields for a full result that comes with a minor limitation."""
    message, hint = _guidance(context, "generic_fallback")

    return {
        "graceful_message": message,
        "degradation_level": DegradationLevel.MILD.value,
        "user_action_hint": hint,
        **(meta or {})
    }


def graceful_fallback(
    context: str,
    reason: str,
    suggestion: Optional[str] = None,
    meta: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Graceful fields for an operation that fell back to a lesser path.

    Args:
        context: Guidance key (e.g., "summarize_local_fallback")
        reason: Internal reason, kept as fallback_reason
        suggestion: Overrides the default action hint
        meta: Optional extra fields to merge in

    Returns:
        Dict with graceful_message, degradation_level, user_action_hint and fallback_reason

    Example:
        >>> graceful_fallback("chat_no_answer", "no matching sentences")["graceful_message"]
        "Sorry, I couldn't generate an answer."
    """
    message, hint = _guidance(context, "generic_fallback")
    logger.info(f"graceful_fallback context={context} reason={reason}")

    return {
        "graceful_message": message,
        "degradation_level": DegradationLevel.FALLBACK.value,
        "user_action_hint": suggestion or hint,
        "fallback_reason": reason,
        **(meta or {})
    }


def graceful_failure(
    context: str,
    error: str,
    meta: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Graceful fields for a failed operation. The error text is only logged.

    Returns:
        Dict with graceful_message, degradation_level, user_action_hint and error_type
    """
    message, hint = _guidance(context, "generic_error")
    logger.error(f"graceful_failure context={context} error={error}")

    return {
        "graceful_message": message,
        "degradation_level": DegradationLevel.FAILED.value,
        "user_action_hint": hint,
        "error_type": context,
        **(meta or {})
    }

