import shutil
import tempfile
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, HTTPException, UploadFile, File, Form
from pydantic import BaseModel, Field, model_validator

from docsum.core.config import settings
from docsum.core.errors import (
    SummarizationError,
    InputTooShortError,
    UnsupportedInputError,
    NoTextExtractedError,
)
from docsum.core.logging import setup_logger
from docsum.ingestion import TextInput, UrlInput, FileInput, resolve_input, dispatch_file
from docsum.tools.summarizer import (
    SummaryParameters,
    summarize_document,
    extract_keywords,
)
from docsum.utils.graceful_response import graceful_failure

router = APIRouter()
logger = setup_logger()

SummaryType = Literal["paragraph", "bullets", "tldr"]
Tone = Literal["neutral", "formal", "casual", "friendly"]
Mode = Literal["auto", "extractive", "hybrid"]


class SummarizeRequest(BaseModel):
    """Request model for text or URL summarization."""
    text: str | None = Field(None, description="Text to summarize (a pasted http(s) URL is fetched)")
    url: str | None = Field(None, description="Web page to fetch and summarize")
    type: SummaryType = Field("paragraph", description="Summary shape: paragraph, bullets, or tldr")
    tone: Tone = Field("neutral", description="Tone: neutral, formal, casual, or friendly")
    length_percent: int = Field(50, ge=0, le=100, description="Requested summary length in percent")
    mode: Mode = Field("auto", description="Summarization mode: auto, extractive, or hybrid")
    
    @model_validator(mode="after")
    def check_source(self):
        """Exactly one of text or url must be given."""
        if bool(self.text) == bool(self.url):
            raise ValueError("Provide exactly one of 'text' or 'url'")
        return self


class SummarizeMeta(BaseModel):
    """Model for summarization telemetry metadata."""
    mode_requested: str | None = None
    mode_used: str | None = None
    provider: str | None = None
    sentence_budget: int | None = None
    input_chars: int = 0
    latency_ms_llm: int = 0
    latency_ms_total: int = 0
    graceful_message: str | None = None
    degradation_level: str | None = None
    user_action_hint: str | None = None
    fallback_reason: str | None = None
    failed_provider: str | None = None


class SummarizeResponse(BaseModel):
    """Response model for summarization."""
    summary: str
    keywords: list[str]
    meta: SummarizeMeta | None = None


class KeywordsRequest(BaseModel):
    """Request model for keyword extraction."""
    text: str = Field(..., min_length=1, description="Text to extract keywords from")
    top_k: int = Field(8, ge=1, le=50, description="Maximum number of keywords")


class KeywordsResponse(BaseModel):
    keywords: list[str]


class ExtractResponse(BaseModel):
    """Response model for file text extraction."""
    text: str
    format: str
    chars: int


def _summarize(text: str, params: SummaryParameters, mode: str) -> SummarizeResponse:
    """Run the summarizer and map core errors to HTTP 422 with the fallback text."""
    try:
        summary, telemetry = summarize_document(text, params, mode=mode)
    except SummarizationError as e:
        context = "summarize_too_short" if isinstance(e, InputTooShortError) else "summarize_no_content"
        graceful = graceful_failure(context, error=str(e))
        raise HTTPException(
            status_code=422,
            detail={**graceful, "message": e.user_message, "error_type": type(e).__name__}
        )
    
    return SummarizeResponse(
        summary=summary.text,
        keywords=list(summary.keywords),
        meta=SummarizeMeta(**telemetry)
    )


def _input_error(e: UnsupportedInputError) -> HTTPException:
    """HTTP 400 for inputs that could not be turned into text."""
    context = "ingest_empty" if isinstance(e, NoTextExtractedError) else "ingest_unsupported"
    graceful = graceful_failure(context, error=str(e))
    return HTTPException(status_code=400, detail={**graceful, "message": str(e)})


def _save_upload(file: UploadFile) -> Path:
    """Copy an upload to a temp file, enforcing the size limit."""
    suffix = Path(file.filename or "").suffix
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as buffer:
        shutil.copyfileobj(file.file, buffer)
        temp_path = Path(buffer.name)
    
    if temp_path.stat().st_size > settings.MAX_UPLOAD_BYTES:
        temp_path.unlink()
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.MAX_UPLOAD_BYTES} bytes"
        )
    return temp_path


@router.post("/summarize", response_model=SummarizeResponse)
def summarize_endpoint(request: SummarizeRequest):
    """
    Summarize pasted text or a web page.
    
    Returns:
        Summary text, keywords and telemetry metadata
        
    Raises:
        HTTPException 400: If the URL cannot be fetched or yields no text
        HTTPException 422: If the text is too short or has no usable sentences
    """
    logger.info(
        f"Summarize endpoint called - type={request.type}, tone={request.tone}, "
        f"length={request.length_percent}, mode={request.mode}"
    )
    
    source = UrlInput(url=request.url) if request.url else TextInput(text=request.text)
    try:
        text = resolve_input(source)
    except UnsupportedInputError as e:
        logger.error(f"Input extraction failed: {str(e)}")
        raise _input_error(e)
    
    params = SummaryParameters(type=request.type, tone=request.tone, length_percent=request.length_percent)
    return _summarize(text, params, request.mode)


@router.post("/summarize/file", response_model=SummarizeResponse)
def summarize_file_endpoint(
    file: UploadFile = File(...),
    type: SummaryType = Form("paragraph"),
    tone: Tone = Form("neutral"),
    length_percent: int = Form(50, ge=0, le=100),
    mode: Mode = Form("auto")
):
    """
    Summarize an uploaded PDF, DOCX or TXT file.
    
    Raises:
        HTTPException 400: If the file type is unsupported or no text can be extracted
        HTTPException 413: If the file exceeds MAX_UPLOAD_BYTES
        HTTPException 422: If the text is too short or has no usable sentences
    """
    logger.info(f"Receiving file upload: {file.filename} (type: {file.content_type})")
    
    temp_path = _save_upload(file)
    try:
        text = resolve_input(FileInput(
            path=str(temp_path),
            file_name=file.filename,
            content_type=file.content_type
        ))
    except UnsupportedInputError as e:
        logger.error(f"File extraction failed: {str(e)}")
        raise _input_error(e)
    finally:
        temp_path.unlink(missing_ok=True)
    
    params = SummaryParameters(type=type, tone=tone, length_percent=length_percent)
    return _summarize(text, params, mode)


@router.post("/keywords", response_model=KeywordsResponse)
def keywords_endpoint(request: KeywordsRequest):
    """Most frequent content words of a text (may be empty)."""
    return KeywordsResponse(keywords=extract_keywords(request.text, request.top_k))


@router.post("/extract", response_model=ExtractResponse)
def extract_endpoint(file: UploadFile = File(...)):
    """
    Extract plain text from an uploaded file without summarizing it.
    
    Raises:
        HTTPException 400: If the file type is unsupported or no text can be extracted
    """
    temp_path = _save_upload(file)
    try:
        parsed = dispatch_file(str(temp_path), file.filename, file.content_type)
    except UnsupportedInputError as e:
        logger.error(f"File extraction failed: {str(e)}")
        raise _input_error(e)
    finally:
        temp_path.unlink(missing_ok=True)
    
    return ExtractResponse(text=parsed.text, format=parsed.format, chars=len(parsed.text))
