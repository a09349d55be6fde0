from typing import Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from docsum.core.config import settings
from docsum.core.logging import setup_logger
from docsum.rag.context import select_context_parts, CHUNK_SEPARATOR
from docsum.rag.qa.answer import answer_question

router = APIRouter()
logger = setup_logger()


class ChatItem(BaseModel):
    """A previous chat turn."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Request model for document chat."""
    document: str = Field(..., min_length=1, description="Document text to ask about")
    question: str = Field(..., min_length=1, description="Question to answer")
    history: list[ChatItem] = Field(default_factory=list, description="Previous chat turns")


class ChatMeta(BaseModel):
    """Model for chat telemetry metadata."""
    mode_used: str | None = None
    provider: str | None = None
    document_chars: int = 0
    context_chars: int = 0
    chunked: bool = False
    chunks_selected: int | None = None
    history_used: int = 0
    latency_ms_llm: int = 0
    latency_ms_total: int = 0
    graceful_message: str | None = None
    degradation_level: str | None = None
    user_action_hint: str | None = None
    fallback_reason: str | None = None


class ChatResponse(BaseModel):
    answer: str
    meta: ChatMeta | None = None


class ContextRequest(BaseModel):
    """Request model for question-aware context selection."""
    document: str = Field(..., min_length=1, description="Full document text")
    question: str = Field(..., min_length=1, description="Question used to pick relevant chunks")
    max_chunk_size: int = Field(default_factory=lambda: settings.CHAT_MAX_CHUNK_SIZE, ge=1)
    chunk_threshold: int = Field(default_factory=lambda: settings.CHAT_CHUNK_THRESHOLD, ge=0)
    max_chunks: int = Field(default_factory=lambda: settings.CHAT_MAX_CHUNKS, ge=1)


class ContextResponse(BaseModel):
    context: str
    chunked: bool
    chunks_selected: int


@router.post("/chat", response_model=ChatResponse)
def chat_endpoint(request: ChatRequest):
    """
    Answer a question grounded in the supplied document.
    
    Long documents are narrowed to question-relevant chunks first. Without an
    LLM provider (or when it fails) the answer quotes matching sentences.
    
    Raises:
        HTTPException 400: If the question or document is blank
    """
    logger.info(f"Chat endpoint called - document={len(request.document)} chars, history={len(request.history)}")
    
    try:
        answer, telemetry = answer_question(
            request.document,
            request.question,
            [item.model_dump() for item in request.history]
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    
    return ChatResponse(answer=answer, meta=ChatMeta(**telemetry))


@router.post("/chat/context", response_model=ContextResponse)
def context_endpoint(request: ContextRequest):
    """Return the part of the document that would be sent to the answering step."""
    parts = select_context_parts(
        request.document,
        request.question,
        max_chunk_size=request.max_chunk_size,
        chunk_threshold=request.chunk_threshold,
        max_chunks=request.max_chunks
    )
    
    return ContextResponse(
        context=CHUNK_SEPARATOR.join(parts),
        chunked=len(request.document) > request.chunk_threshold,
        chunks_selected=len(parts)
    )
