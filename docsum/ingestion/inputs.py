"""
Input resolution: pasted text, URL or uploaded file -> plain text.

The summarizer and chat services only ever see the resolved string.
"""

from dataclasses import dataclass
from typing import Optional, Union

from docsum.core.errors import UnsupportedInputError, NoTextExtractedError
from docsum.core.logging import setup_logger
from .dispatcher import dispatch_file
from .parser_url import fetch_url_text, is_url

logger = setup_logger()


@dataclass(frozen=True)
class TextInput:
    text: str


@dataclass(frozen=True)
class UrlInput:
    url: str


@dataclass(frozen=True)
class FileInput:
    path: str
    file_name: Optional[str] = None
    content_type: Optional[str] = None


Input = Union[TextInput, UrlInput, FileInput]


def resolve_input(source: Input) -> str:
    """
    Resolve an input to plain text.
    
    Pasted text that is itself an http(s) URL is fetched as a URL.
    
    Raises:
        UnsupportedInputError: If nothing could be extracted
    """
    if isinstance(source, TextInput):
        if is_url(source.text):
            return resolve_input(UrlInput(url=source.text.strip()))
        text = source.text
    elif isinstance(source, UrlInput):
        text = fetch_url_text(source.url).text
    elif isinstance(source, FileInput):
        text = dispatch_file(source.path, source.file_name, source.content_type).text
    else:
        raise UnsupportedInputError(f"Unsupported input: {type(source).__name__}")
    
    if not text or not text.strip():
        raise NoTextExtractedError("could not extract text to summarize")
    
    logger.info(f"Resolved {type(source).__name__} to {len(text)} chars")
    return text
