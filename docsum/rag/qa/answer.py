import time
from typing import Dict, List, Optional, Tuple

from docsum.core.config import settings
from docsum.core.errors import RemoteServiceError
from docsum.core.logging import setup_logger
from docsum.llm.remote import remote_answer
from docsum.llm.router import is_llm_enabled
from docsum.rag.context import select_context_parts, question_terms, CHUNK_SEPARATOR
from docsum.tools.summarizer.tokenizer import split_sentences
from docsum.utils.graceful_response import graceful_fallback, graceful_notice, success_message

logger = setup_logger()

NO_ANSWER_MESSAGE = "Sorry, I couldn't generate an answer."
MAX_EXTRACTIVE_SENTENCES = 3


def build_extractive_answer(question: str, parts: List[str]) -> Optional[str]:
    """
    Answer by quoting context sentences that mention a question term.
    
    Args:
        question: The question text
        parts: Selected document chunks (or the whole document)
        
    Returns:
        Up to 3 matching sentences in document order, or None when nothing matches
    """
    terms = question_terms(question)
    if not terms:
        return None
    
    matches = []
    for part in parts:
        for sentence in split_sentences(part):
            lowered = sentence.lower()
            if any(term in lowered for term in terms):
                matches.append(sentence)
                if len(matches) >= MAX_EXTRACTIVE_SENTENCES:
                    return " ".join(matches)
    
    return " ".join(matches) if matches else None


def answer_question(
    document: str,
    question: str,
    history: Optional[List[Dict[str, str]]] = None
) -> Tuple[str, Dict]:
    """
    Answer a question about a document.
    
    The document is narrowed to question-relevant chunks when it is long,
    then sent to the LLM. Without an LLM, or when the call fails, the answer
    is built from matching context sentences.
    
    Args:
        document: Full document text
        question: The user's question
        history: Prior chat turns as {"role", "content"} dicts
    
    Returns:
        Tuple of (answer, telemetry_dict)
    
    Raises:
        ValueError: If the question or document is empty
    """
    start_time = time.time()
    
    question = (question or "").strip()
    if not question:
        raise ValueError("Missing question")
    if not document or not document.strip():
        raise ValueError("Missing document text")
    
    parts = select_context_parts(
        document,
        question,
        max_chunk_size=settings.CHAT_MAX_CHUNK_SIZE,
        chunk_threshold=settings.CHAT_CHUNK_THRESHOLD,
        max_chunks=settings.CHAT_MAX_CHUNKS
    )
    context = CHUNK_SEPARATOR.join(parts)
    chunked = len(document) > settings.CHAT_CHUNK_THRESHOLD
    
    telemetry = {
        "mode_used": None,
        "provider": None,
        "document_chars": len(document),
        "context_chars": len(context),
        "chunked": chunked,
        "chunks_selected": len(parts) if chunked else None,
        "history_used": 0,
        "latency_ms_llm": 0,
        "latency_ms_total": 0
    }
    
    logger.info(
        f"Answering question - document={len(document)} chars, "
        f"context={len(context)} chars, chunked={chunked}"
    )
    
    fallback_reason = "llm_disabled"
    if is_llm_enabled():
        llm_start = time.time()
        try:
            result = remote_answer(question, context, history)
            telemetry["latency_ms_llm"] = int((time.time() - llm_start) * 1000)
            telemetry.update({
                "mode_used": "llm",
                "provider": result["provider"],
                "history_used": min(len(history or []), settings.CHAT_HISTORY_LIMIT)
            })
            telemetry.update(graceful_notice("chat_context_reduced") if chunked else success_message("chat"))
            telemetry["latency_ms_total"] = int((time.time() - start_time) * 1000)
            logger.info(f"Answer generated using {result['provider']} in {telemetry['latency_ms_llm']}ms")
            return result["answer"], telemetry
        except RemoteServiceError as e:
            telemetry["latency_ms_llm"] = int((time.time() - llm_start) * 1000)
            logger.error(f"LLM answer failed: {str(e)}, falling back to extractive answer")
            fallback_reason = str(e)
    
    answer = build_extractive_answer(question, parts)
    telemetry["mode_used"] = "extractive"
    
    if answer:
        telemetry.update(graceful_fallback("chat_local_fallback", reason=fallback_reason))
    else:
        answer = NO_ANSWER_MESSAGE
        telemetry.update(graceful_fallback("chat_no_answer", reason=fallback_reason))
    
    telemetry["latency_ms_total"] = int((time.time() - start_time) * 1000)
    return answer, telemetry
