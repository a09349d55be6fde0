"""
Tests for frequency-based keyword ranking.
"""

from docsum.tools.summarizer.keywords import rank_keywords, extract_keywords


class TestRankKeywords:
    """Tests for frequency ranking."""
    
    def test_orders_by_frequency(self):
        """More frequent tokens rank first."""
        tokens = ["beta", "alpha", "beta", "gamma", "alpha", "beta"]
        assert rank_keywords(tokens, 2) == ["beta", "alpha"]
    
    def test_ties_keep_first_occurrence_order(self):
        """Equal counts keep first-occurrence order."""
        tokens = ["zeta", "alpha", "zeta", "alpha", "omega"]
        assert rank_keywords(tokens, 5) == ["zeta", "alpha", "omega"]
    
    def test_output_bounded_and_unique(self):
        """At most top_k distinct keywords."""
        tokens = ["one", "two", "three", "two", "four", "five", "one", "six"]
        for top_k in range(0, 10):
            result = rank_keywords(tokens, top_k)
            assert len(result) <= top_k
            assert len(result) == len(set(result))
            assert len(result) <= len(set(tokens))
    
    def test_empty_tokens(self):
        """No tokens, no keywords."""
        assert rank_keywords([], 8) == []


class TestExtractKeywords:
    """Tests for keyword extraction from raw text."""
    
    def test_standalone_extraction_uses_five_letter_minimum(self):
        """Words need five letters and are counted case-insensitively."""
        text = "Python python PYTHON code code tests"
        assert extract_keywords(text) == ["python", "tests"]
    
    def test_default_cap_is_eight(self):
        """Eight keywords by default."""
        text = " ".join(f"keyword{i}" for i in range(20))
        assert len(extract_keywords(text)) == 8
    
    def test_custom_top_k(self):
        """top_k caps the result."""
        text = "renewable energy storage renewable energy grids renewable"
        assert extract_keywords(text, top_k=1) == ["renewable"]
    
    def test_empty_text(self):
        """Empty text has no keywords."""
        assert extract_keywords("") == []
