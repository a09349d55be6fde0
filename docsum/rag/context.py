"""
Question-aware context selection for document chat.

Long documents are cut into fixed-size chunks and only the chunks sharing a
term with the question are forwarded to the answering step. This is a
recall-oriented presence filter, not ranked retrieval: any chunk containing
any question term (as a substring) qualifies.
"""

from typing import List

from docsum.core.config import settings
from docsum.core.logging import setup_logger
from docsum.tools.summarizer.tokenizer import normalize_words
from .chunking import chunk_document, DEFAULT_MAX_CHUNK_SIZE

logger = setup_logger()

DEFAULT_CHUNK_THRESHOLD = 3500
DEFAULT_MAX_CHUNKS = 4
FALLBACK_CHUNKS = 2
MIN_TERM_LENGTH = 3

CHUNK_SEPARATOR = "\n---\n"


def question_terms(question: str) -> List[str]:
    """Lowercase question words longer than 3 characters."""
    return [word for word in normalize_words(question) if len(word) > MIN_TERM_LENGTH]


def select_relevant_chunks(
    chunks: List[str],
    question: str,
    max_chunks: int = DEFAULT_MAX_CHUNKS,
    fallback_chunks: int = FALLBACK_CHUNKS
) -> List[str]:
    """
    Keep the chunks most likely to answer the question.
    
    Args:
        chunks: Document chunks in order
        question: User question
        max_chunks: Maximum number of matching chunks to keep
        fallback_chunks: Leading chunks returned when nothing matches
        
    Returns:
        Selected chunks in document order
    """
    if len(chunks) <= max_chunks:
        return list(chunks)
    
    terms = question_terms(question)
    
    matching = []
    for chunk in chunks:
        lowered = chunk.lower()
        if any(term in lowered for term in terms):
            matching.append(chunk)
            if len(matching) >= max_chunks:
                break
    
    if not matching:
        logger.info(f"No chunk matched question terms {terms}, using first {fallback_chunks} chunks")
        return chunks[:fallback_chunks]
    
    return matching


def select_context_parts(
    document: str,
    question: str,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    chunk_threshold: int = DEFAULT_CHUNK_THRESHOLD,
    max_chunks: int = DEFAULT_MAX_CHUNKS
) -> List[str]:
    """
    Pieces of the document to forward for a question.
    
    Returns [document] when it is no longer than chunk_threshold, otherwise
    the selected chunks in document order.
    """
    if len(document) <= chunk_threshold:
        return [document]
    
    chunks = chunk_document(document, max_chunk_size)
    selected = select_relevant_chunks(chunks, question, max_chunks=max_chunks)
    
    logger.info(
        f"Context selection - {len(chunks)} chunks, {len(selected)} selected, "
        f"{sum(len(c) for c in selected)} chars"
    )
    
    return selected


def select_relevant_context(
    document: str,
    question: str,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    chunk_threshold: int = DEFAULT_CHUNK_THRESHOLD,
    max_chunks: int = DEFAULT_MAX_CHUNKS
) -> str:
    """
    Reduce a long document to the parts relevant to a question.
    
    Documents no longer than chunk_threshold are returned unchanged.
    Otherwise the selected chunks are joined with a "---" separator line so
    the consumer can see where text was skipped.
    
    Args:
        document: Full document text
        question: User question
        max_chunk_size: Chunk size in characters
        chunk_threshold: Length above which chunking kicks in
        max_chunks: Maximum chunks forwarded
        
    Returns:
        Context string; never empty for a non-empty document
    """
    parts = select_context_parts(document, question, max_chunk_size, chunk_threshold, max_chunks)
    return CHUNK_SEPARATOR.join(parts)


def select_context(document: str, question: str) -> str:
    """select_relevant_context with the configured chat thresholds."""
    return select_relevant_context(
        document,
        question,
        max_chunk_size=settings.CHAT_MAX_CHUNK_SIZE,
        chunk_threshold=settings.CHAT_CHUNK_THRESHOLD,
        max_chunks=settings.CHAT_MAX_CHUNKS
    )
