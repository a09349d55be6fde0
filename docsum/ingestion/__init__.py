"""
Text extraction for pasted text, URLs and uploaded files.
Supports: PDF, DOCX, TXT, http(s) pages
"""

from .dispatcher import dispatch_file, detect_file_type, get_supported_formats, ParsedDocument
from .inputs import TextInput, UrlInput, FileInput, resolve_input
from .parser_url import fetch_url_text

__all__ = [
    "dispatch_file",
    "detect_file_type",
    "get_supported_formats",
    "ParsedDocument",
    "TextInput",
    "UrlInput",
    "FileInput",
    "resolve_input",
    "fetch_url_text"
]
