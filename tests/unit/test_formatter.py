"""
Tests for summary rendering (paragraph, bullets, TL;DR) and tone prefixes.
"""

import pytest

from docsum.tools.summarizer.formatter import format_summary, get_tone_prefix, TONE_PREFIXES

SENTENCES = ["First point is here.", "Second point follows.", "Third point closes."]


class TestTonePrefix:
    """Tests for tone prefixes."""
    
    @pytest.mark.parametrize("tone,prefix", [
        ("neutral", "Summary:"),
        ("formal", "Based on a comprehensive analysis of the provided text, the following summary has been generated:"),
        ("casual", "So, here's the deal with this text:"),
        ("friendly", "Hey there! Here's what this text is all about:"),
    ])
    def test_literal_prefixes(self, tone, prefix):
        """Each tone has a fixed prefix."""
        assert get_tone_prefix(tone) == prefix
    
    def test_unknown_tone_defaults_to_neutral(self):
        """Unknown tones use the neutral prefix."""
        assert get_tone_prefix("sarcastic") == "Summary:"
        assert get_tone_prefix("") == "Summary:"


class TestFormatSummary:
    """Tests for summary rendering."""
    
    def test_paragraph(self):
        """Paragraphs join sentences with spaces."""
        assert format_summary(SENTENCES, "paragraph", "neutral") == (
            "Summary: First point is here. Second point follows. Third point closes."
        )
    
    def test_bullets(self):
        """Bullets put one sentence per line after the prefix."""
        assert format_summary(SENTENCES, "bullets", "casual") == (
            "So, here's the deal with this text:\n\n"
            "• First point is here.\n\n"
            "• Second point follows.\n\n"
            "• Third point closes."
        )
    
    def test_bullets_trim_sentences(self):
        """Bullet sentences are trimmed."""
        assert format_summary(["  padded sentence text.  "], "bullets", "neutral") == (
            "Summary:\n\n• padded sentence text."
        )
    
    def test_tldr_keeps_first_two_sentences(self):
        """TL;DR keeps at most two sentences."""
        assert format_summary(SENTENCES, "tldr", "friendly") == (
            "Hey there! Here's what this text is all about: First point is here. Second point follows."
        )
    
    def test_tldr_with_single_sentence(self):
        """TL;DR of one sentence is just that sentence."""
        assert format_summary(SENTENCES[:1], "tldr", "neutral") == "Summary: First point is here."
    
    def test_unknown_type_renders_paragraph(self):
        """Unknown types render as a paragraph."""
        assert format_summary(SENTENCES, "haiku", "neutral") == format_summary(SENTENCES, "paragraph", "neutral")
    
    @pytest.mark.parametrize("summary_type", ["paragraph", "bullets", "tldr"])
    @pytest.mark.parametrize("tone", list(TONE_PREFIXES))
    def test_formatting_is_deterministic(self, summary_type, tone):
        """The same input always renders the same text."""
        first = format_summary(SENTENCES, summary_type, tone)
        second = format_summary(list(SENTENCES), summary_type, tone)
        assert first == second
        assert first.startswith(TONE_PREFIXES[tone])
