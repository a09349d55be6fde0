"""
Tests for question-aware context selection.
"""

from docsum.rag.chunking import chunk_document
from docsum.rag.context import (
    CHUNK_SEPARATOR,
    question_terms,
    select_relevant_chunks,
    select_relevant_context,
    select_context_parts,
    select_context,
)

CHUNK_SIZE = 3000


def filler_chunk(label: str) -> str:
    """A chunk of exactly CHUNK_SIZE characters with no common question words."""
    head = f"Chapter {label} covers shipping zones. "
    return head + "x" * (CHUNK_SIZE - len(head))


def chunk_with(label: str, phrase: str) -> str:
    head = f"Chapter {label} {phrase} "
    return head + "x" * (CHUNK_SIZE - len(head))


def build_document(chunks):
    document = "".join(chunks)
    assert chunk_document(document, CHUNK_SIZE) == chunks
    return document


class TestQuestionTerms:
    """Tests for question term extraction."""
    
    def test_keeps_words_longer_than_three(self):
        """Only words longer than three letters count."""
        assert question_terms("What is the refund policy?") == ["what", "refund", "policy"]
    
    def test_empty_question(self):
        """An empty question has no terms."""
        assert question_terms("") == []


class TestSelectRelevantChunks:
    """Tests for chunk filtering."""
    
    def test_four_or_fewer_chunks_returned_unfiltered(self):
        """Up to four chunks pass through."""
        chunks = ["alpha", "beta", "gamma", "delta"]
        assert select_relevant_chunks(chunks, "unrelated question") == chunks
    
    def test_matching_is_case_insensitive_substring(self):
        """Terms match case-insensitively inside words."""
        chunks = ["one", "two", "Starting point", "four", "five"]
        assert select_relevant_chunks(chunks, "Where do we start?") == ["Starting point"]
    
    def test_caps_matches_at_max_chunks(self):
        """At most four matching chunks."""
        chunks = [f"refund {i}" for i in range(6)]
        assert select_relevant_chunks(chunks, "refund rules") == chunks[:4]
    
    def test_falls_back_to_first_two_chunks(self):
        """Without a match the first two chunks are used."""
        chunks = ["one", "two", "three", "four", "five"]
        assert select_relevant_chunks(chunks, "Anything about refunds?") == ["one", "two"]


class TestSelectRelevantContext:
    """Tests for building the chat context."""
    
    def test_short_document_returned_unchanged(self):
        """Short documents are used whole."""
        document = "Short document. " * 100
        assert len(document) <= 3500
        assert select_relevant_context(document, "anything") == document
    
    def test_only_matching_chunk_returned(self):
        """Only the matching chunk is sent."""
        chunks = [filler_chunk(str(i)) for i in range(6)]
        chunks[3] = chunk_with("3", "explains the refund window.")
        document = build_document(chunks)
        
        context = select_relevant_context(document, "What is the refund policy?")
        
        assert context == chunks[3]
        assert CHUNK_SEPARATOR not in context
    
    def test_multiple_matches_joined_with_separator(self):
        """Matching chunks are joined with the separator."""
        chunks = [filler_chunk(str(i)) for i in range(6)]
        chunks[1] = chunk_with("1", "lists refund exceptions.")
        chunks[4] = chunk_with("4", "gives the refund address.")
        document = build_document(chunks)
        
        context = select_relevant_context(document, "refund details")
        
        assert context == chunks[1] + "\n---\n" + chunks[4]
    
    def test_no_match_falls_back_to_first_two_chunks(self):
        """Without a match the first two chunks are sent."""
        chunks = [filler_chunk(str(i)) for i in range(6)]
        document = build_document(chunks)
        
        context = select_relevant_context(document, "Who signed the lease?")
        
        assert context == CHUNK_SEPARATOR.join(chunks[:2])
    
    def test_long_document_with_few_chunks_keeps_everything(self):
        """Long documents of four chunks or fewer are kept whole."""
        document = "y" * 10000
        context = select_relevant_context(document, "question")
        assert context == CHUNK_SEPARATOR.join(chunk_document(document, 3000))
    
    def test_custom_thresholds(self):
        """Thresholds can be overridden."""
        document = "abcdefghij" * 10
        parts = select_context_parts(document, "zzzz", max_chunk_size=10, chunk_threshold=50, max_chunks=4)
        assert parts == [document[:10], document[10:20]]
    
    def test_never_empty_for_non_empty_document(self):
        """Context is never empty for a non-empty document."""
        for length in (1, 3500, 3501, 9000, 20000):
            document = "q" * length
            assert select_relevant_context(document, "nothing matches here") != ""


def test_select_context_uses_configured_thresholds():
    """The configured thresholds are applied."""
    document = "".join(filler_chunk(str(i)) for i in range(3)) + filler_chunk("refund")
    
    assert select_context(document, "Where is the refund?") == select_relevant_context(
        document, "Where is the refund?"
    )
