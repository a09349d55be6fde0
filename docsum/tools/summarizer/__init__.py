"""
Summarizer tool package.
Provides extractive summarization with optional LLM delegation.
"""

from .keywords import extract_keywords, rank_keywords
from .extractive import extract_key_sentences, sentence_budget
from .formatter import format_summary, get_tone_prefix
from .summarizer_service import (
    Summary,
    SummaryParameters,
    summarize_text,
    summarize_document,
)

__all__ = [
    "extract_keywords",
    "rank_keywords",
    "extract_key_sentences",
    "sentence_budget",
    "format_summary",
    "get_tone_prefix",
    "Summary",
    "SummaryParameters",
    "summarize_text",
    "summarize_document",
]
