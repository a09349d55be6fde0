"""
Document summarization service: local extractive engine + optional LLM.

Modes:
- extractive: Local sentence extraction only (no LLM, deterministic)
- hybrid: Remote LLM summary, falling back to extractive on failure
- auto: hybrid when an LLM provider is enabled, otherwise extractive

The extractive path is pure: it depends only on its inputs and the fixed
stopword set, so it is safe to call from concurrent requests.
"""

import time
from dataclasses import dataclass
from typing import Dict, Any, Tuple

from docsum.core.config import settings
from docsum.core.errors import InputTooShortError, RemoteServiceError
from docsum.core.logging import setup_logger
from docsum.llm.remote import remote_summarize
from docsum.llm.router import is_llm_enabled
from docsum.utils.graceful_response import graceful_fallback, graceful_notice, success_message
from .extractive import extract_key_sentences, sentence_budget
from .formatter import format_summary, DEFAULT_SUMMARY_TYPE, DEFAULT_TONE
from .keywords import extract_keywords, PLACEHOLDER_KEYWORDS
from .tokenizer import word_count

logger = setup_logger()

VALID_MODES = ["auto", "extractive", "hybrid"]


@dataclass(frozen=True)
class SummaryParameters:
    """Caller-supplied summary shape; defaults match the UI defaults."""
    type: str = DEFAULT_SUMMARY_TYPE
    tone: str = DEFAULT_TONE
    length_percent: int = 50


@dataclass(frozen=True)
class Summary:
    """Formatted summary text and its keywords."""
    text: str
    keywords: Tuple[str, ...] = ()


def summarize_keywords(text: str, top_k: int = None) -> Tuple[str, ...]:
    """Top keywords for a summary, or the placeholder keywords when none are found."""
    keywords = extract_keywords(text, top_k or settings.KEYWORD_TOP_K)
    return tuple(keywords) or PLACEHOLDER_KEYWORDS


def summarize_text(text: str, params: SummaryParameters = SummaryParameters()) -> Summary:
    """
    Build an extractive summary of text.

    Args:
        text: Document text
        params: Summary type, tone and length

    Returns:
        Summary with formatted text and up to 8 keywords

    Raises:
        InputTooShortError: If the trimmed text is shorter than the minimum length
        NoExtractableContentError: If no usable sentences are found
    """
    if text is None or len(text.strip()) < settings.SUMMARY_MIN_CHARS:
        raise InputTooShortError()

    budget = sentence_budget(word_count(text), params.length_percent)
    sentences = extract_key_sentences(text, budget)

    return Summary(
        text=format_summary(sentences, params.type, params.tone),
        keywords=summarize_keywords(text)
    )


def summarize_document(
    text: str,
    params: SummaryParameters = SummaryParameters(),
    mode: str = "auto"
) -> Tuple[Summary, Dict[str, Any]]:
    """
    Summarize text, delegating to the LLM when requested and available.

    Args:
        text: Document text
        params: Summary type, tone and length
        mode: Summarization mode (auto, extractive, hybrid)

    Returns:
        Tuple of (Summary, telemetry_dict)

    Raises:
        ValueError: If mode is invalid
        InputTooShortError: If the text is too short to summarize
        NoExtractableContentError: If the local path is used and finds no sentences
    """
    start_time = time.time()

    if mode not in VALID_MODES:
        raise ValueError(f"Invalid mode '{mode}'. Must be one of: {', '.join(VALID_MODES)}")

    if text is None or len(text.strip()) < settings.SUMMARY_MIN_CHARS:
        raise InputTooShortError()

    if mode == "auto":
        selected_mode = "hybrid" if is_llm_enabled() else "extractive"
        logger.info(f"Auto-selecting {selected_mode.upper()} mode")
    else:
        selected_mode = mode

    logger.info(
        f"Starting summarization - Mode: {selected_mode}, Type: {params.type}, "
        f"Tone: {params.tone}, Length: {params.length_percent}%, Chars: {len(text)}"
    )

    telemetry = {
        "mode_requested": mode,
        "mode_used": None,
        "provider": None,
        "sentence_budget": None,
        "input_chars": len(text),
        "latency_ms_llm": 0,
        "latency_ms_total": 0
    }

    if selected_mode == "hybrid":
        llm_start = time.time()
        try:
            result = remote_summarize(text, params.type, params.tone, params.length_percent)
            telemetry["latency_ms_llm"] = int((time.time() - llm_start) * 1000)
            telemetry.update({"mode_used": "hybrid", "provider": result["provider"]})
            telemetry.update(success_message("summarize"))
            telemetry["latency_ms_total"] = int((time.time() - start_time) * 1000)

            logger.info(f"Hybrid summary generated using {result['provider']} in {telemetry['latency_ms_llm']}ms")

            summary = Summary(
                text=result["summary"],
                keywords=tuple(result["keywords"][:settings.KEYWORD_TOP_K]) or summarize_keywords(text)
            )
            return summary, telemetry
        except RemoteServiceError as e:
            telemetry["latency_ms_llm"] = int((time.time() - llm_start) * 1000)
            logger.error(f"LLM summarization failed: {str(e)}, falling back to extractive")
            telemetry.update(graceful_fallback(
                "summarize_local_fallback",
                reason=str(e),
                meta={"failed_provider": e.provider}
            ))

    summary = summarize_text(text, params)

    telemetry["mode_used"] = "extractive"
    telemetry["sentence_budget"] = sentence_budget(word_count(text), params.length_percent)
    if telemetry.get("degradation_level") is None:
        if summary.keywords == PLACEHOLDER_KEYWORDS:
            telemetry.update(graceful_notice("summarize_no_keywords"))
        else:
            telemetry.update(success_message("summarize"))
    telemetry["latency_ms_total"] = int((time.time() - start_time) * 1000)

    logger.info(
        f"Summarization complete - Mode: {telemetry['mode_used']}, "
        f"Keywords: {len(summary.keywords)}, Total: {telemetry['latency_ms_total']}ms"
    )

    return summary, telemetry
