"""
Word and sentence tokenization for the extractive summarizer.

Tokens are lowercase, stripped of non-word characters and filtered against a
fixed English stopword set. Sentence boundaries follow a simple heuristic:
terminal punctuation followed by optional whitespace and an uppercase letter.
"""

import re
from typing import List

# Minimum-length thresholds (tokens must be strictly longer)
SCORING_MIN_TOKEN_LENGTH = 3
KEYWORD_MIN_TOKEN_LENGTH = 4

# Fragments at or below this length are treated as noise (abbreviations etc.)
MIN_SENTENCE_LENGTH = 10

STOPWORDS = frozenset([
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and", "any", "are", "as", "at", "be", "because",
    "been", "before", "being", "below", "between", "both", "but", "by", "could", "did", "do", "does", "doing", "down", "during",
    "each", "few", "for", "from", "further", "had", "has", "have", "having", "he", "her", "here", "hers", "herself", "him",
    "himself", "his", "how", "i", "if", "in", "into", "is", "it", "its", "itself", "me", "more", "most", "my", "myself", "no",
    "nor", "not", "of", "off", "on", "once", "only", "or", "other", "ought", "our", "ours", "ourselves", "out", "over", "own",
    "same", "she", "should", "so", "some", "such", "than", "that", "the", "their", "theirs", "them", "themselves", "then",
    "there", "these", "they", "this", "those", "through", "to", "too", "under", "until", "up", "very", "was", "we", "were",
    "what", "when", "where", "which", "while", "who", "whom", "why", "with", "would", "you", "your", "yours", "yourself",
    "yourselves",
])

_NON_WORD_RE = re.compile(r"[^\w\s]")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.?!])\s*(?=[A-Z])")


def normalize_words(text: str) -> List[str]:
    """Lowercase, drop punctuation and split on whitespace."""
    return _NON_WORD_RE.sub("", text.lower()).split()


def tokenize(text: str, min_length: int = SCORING_MIN_TOKEN_LENGTH) -> List[str]:
    """
    Split text into lowercase content tokens.
    
    Args:
        text: Raw text
        min_length: Tokens of this length or shorter are dropped
        
    Returns:
        Tokens in document order, stopwords removed
    """
    if not text:
        return []
    
    return [
        word for word in normalize_words(text)
        if len(word) > min_length and word not in STOPWORDS
    ]


def split_sentences(text: str) -> List[str]:
    """
    Split text into trimmed sentences, discarding short fragments.
    
    Abbreviations and decimals followed by a capital letter are mis-split;
    the heuristic is kept as-is.
    """
    if not text:
        return []
    
    sentences = []
    for fragment in _SENTENCE_BOUNDARY_RE.split(text):
        sentence = fragment.strip()
        if len(sentence) > MIN_SENTENCE_LENGTH:
            sentences.append(sentence)
    
    return sentences


def word_count(text: str) -> int:
    return len(text.split())
