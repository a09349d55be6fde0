"""
Render selected sentences as paragraph, bullet list or TL;DR text.
"""

from typing import List

SUMMARY_TYPES = ("paragraph", "bullets", "tldr")
TONES = ("neutral", "formal", "casual", "friendly")

DEFAULT_SUMMARY_TYPE = "paragraph"
DEFAULT_TONE = "neutral"

TONE_PREFIXES = {
    "neutral": "Summary:",
    "formal": "Based on a comprehensive analysis of the provided text, the following summary has been generated:",
    "casual": "So, here's the deal with this text:",
    "friendly": "Hey there! Here's what this text is all about:",
}

BULLET_MARKER = "• "
TLDR_MAX_SENTENCES = 2


def get_tone_prefix(tone: str) -> str:
    """Prefix for a tone; unknown tones use the neutral prefix."""
    return TONE_PREFIXES.get(tone, TONE_PREFIXES[DEFAULT_TONE])


def format_paragraph(sentences: List[str], tone: str) -> str:
    return f"{get_tone_prefix(tone)} {' '.join(sentences)}"


def format_bullets(sentences: List[str], tone: str) -> str:
    bullets = "\n\n".join(f"{BULLET_MARKER}{sentence.strip()}" for sentence in sentences)
    return f"{get_tone_prefix(tone)}\n\n{bullets}"


def format_tldr(sentences: List[str], tone: str) -> str:
    return f"{get_tone_prefix(tone)} {' '.join(sentences[:TLDR_MAX_SENTENCES])}"


def format_summary(sentences: List[str], summary_type: str, tone: str) -> str:
    """
    Render sentences in the requested shape.
    
    Args:
        sentences: Selected sentences in document order
        summary_type: "paragraph", "bullets" or "tldr" (unknown -> paragraph)
        tone: "neutral", "formal", "casual" or "friendly" (unknown -> neutral)
        
    Returns:
        Summary text
    """
    if summary_type == "bullets":
        return format_bullets(sentences, tone)
    if summary_type == "tldr":
        return format_tldr(sentences, tone)
    return format_paragraph(sentences, tone)
