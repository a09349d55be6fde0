"""
Extractive sentence selection.

Sentences are scored by position, keyword density and length band, and the
top-scoring ones are returned in their original reading order.
"""

import math
from dataclasses import dataclass
from typing import List

from docsum.core.errors import NoExtractableContentError
from .keywords import rank_keywords
from .tokenizer import tokenize, split_sentences, word_count, SCORING_MIN_TOKEN_LENGTH

# Score weights
POSITION_WEIGHT = 0.3
KEYWORD_WEIGHT = 0.5
LENGTH_WEIGHT = 0.2

# Number of keywords considered when scoring; also the keyword-score denominator
SCORING_KEYWORD_COUNT = 15

# Sentences with word counts strictly inside this band get the full length score
LENGTH_BAND = (5, 40)
OFF_BAND_LENGTH_SCORE = 0.5

MIN_SENTENCE_BUDGET = 2
MAX_SENTENCE_BUDGET = 10
WORDS_PER_SENTENCE = 15


@dataclass(frozen=True)
class ScoredSentence:
    """A sentence with its position in the document and its extractive score."""
    text: str
    index: int
    score: float


def sentence_budget(total_words: int, length_percent: float) -> int:
    """
    Number of sentences to select for a requested output length.
    
    Roughly one sentence per 15 words of requested output, clamped to [2, 10].
    """
    raw = math.floor(total_words * (length_percent / 100) / WORDS_PER_SENTENCE)
    return max(MIN_SENTENCE_BUDGET, min(MAX_SENTENCE_BUDGET, raw))


def score_sentences(sentences: List[str], keywords: List[str]) -> List[ScoredSentence]:
    """
    Score each sentence in [0, 1].
    
    Args:
        sentences: Sentences in document order
        keywords: Top document keywords
        
    Returns:
        ScoredSentence per input sentence, in document order
    """
    total = len(sentences)
    scored = []
    
    for index, sentence in enumerate(sentences):
        position_score = 1 - (index / total)
        
        lowered = sentence.lower()
        hits = sum(1 for keyword in keywords if keyword in lowered)
        keyword_score = hits / SCORING_KEYWORD_COUNT
        
        words = word_count(sentence)
        low, high = LENGTH_BAND
        length_score = 1.0 if low < words < high else OFF_BAND_LENGTH_SCORE
        
        score = (
            POSITION_WEIGHT * position_score
            + KEYWORD_WEIGHT * keyword_score
            + LENGTH_WEIGHT * length_score
        )
        scored.append(ScoredSentence(text=sentence, index=index, score=score))
    
    return scored


def extract_key_sentences(text: str, max_sentences: int) -> List[str]:
    """
    Select up to max_sentences representative sentences from text.
    
    Args:
        text: Document text
        max_sentences: Sentence budget
        
    Returns:
        Selected sentences in original document order
        
    Raises:
        NoExtractableContentError: If no sentence survives the length filter
    """
    sentences = split_sentences(text)
    
    if not sentences:
        raise NoExtractableContentError()
    
    if len(sentences) <= max_sentences:
        return sentences
    
    keywords = rank_keywords(
        tokenize(text, min_length=SCORING_MIN_TOKEN_LENGTH),
        top_k=SCORING_KEYWORD_COUNT
    )
    
    scored = score_sentences(sentences, keywords)
    
    # sorted() is stable, so equal scores keep document order
    top = sorted(scored, key=lambda item: item.score, reverse=True)[:max_sentences]
    top.sort(key=lambda item: item.index)
    
    return [item.text for item in top]
