"""
Frequency-based keyword ranking.
"""

from collections import Counter
from typing import List, Sequence

from .tokenizer import tokenize, KEYWORD_MIN_TOKEN_LENGTH

DEFAULT_TOP_K = 8

# Returned by the summarizer when a text yields no keywords at all
PLACEHOLDER_KEYWORDS = ("no", "keywords", "found")


def rank_keywords(tokens: Sequence[str], top_k: int = DEFAULT_TOP_K) -> List[str]:
    """
    Rank tokens by descending frequency.
    
    Ties keep first-occurrence order (Counter preserves insertion order and
    sorted() is stable).
    
    Args:
        tokens: Token sequence (already filtered)
        top_k: Maximum number of keywords to return
        
    Returns:
        Up to top_k distinct tokens, most frequent first
    """
    if top_k <= 0 or not tokens:
        return []
    
    frequency = Counter(tokens)
    ranked = sorted(frequency, key=lambda token: frequency[token], reverse=True)
    
    return ranked[:top_k]


def extract_keywords(text: str, top_k: int = DEFAULT_TOP_K) -> List[str]:
    """
    Extract the top_k most frequent content words from text.
    
    Args:
        text: Raw text
        top_k: Maximum number of keywords
        
    Returns:
        Keyword list, possibly empty
    """
    return rank_keywords(tokenize(text, min_length=KEYWORD_MIN_TOKEN_LENGTH), top_k)
