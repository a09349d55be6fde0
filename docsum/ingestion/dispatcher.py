"""
Ingestion dispatcher - routes files to the appropriate text extractor.
"""

import mimetypes
from pathlib import Path
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field
from docsum.core.errors import UnsupportedInputError, NoTextExtractedError
from docsum.core.logging import setup_logger

logger = setup_logger()


@dataclass
class ParsedDocument:
    """
    Unified document representation after parsing.
    All parsers must return this structure.
    """
    text: str
    format: str = "unknown"  # pdf, docx, txt, url
    metadata: Dict[str, Any] = field(default_factory=dict)


# File extension to format mapping
EXTENSION_MAP = {
    '.pdf': 'pdf',
    '.txt': 'txt',
    '.text': 'txt',
    '.docx': 'docx'
}

# MIME type to format mapping (fallback)
MIME_MAP = {
    'application/pdf': 'pdf',
    'text/plain': 'txt',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': 'docx'
}


def detect_file_type(file_name: str, content_type: Optional[str] = None) -> str:
    """
    Detect file format by extension, then by MIME type.
    
    Args:
        file_name: Original file name
        content_type: MIME type reported by the client (optional)
        
    Returns:
        Format string: "pdf", "docx" or "txt"
        
    Raises:
        UnsupportedInputError: If the type is not supported
    """
    extension = Path(file_name or "").suffix.lower()
    
    if extension in EXTENSION_MAP:
        detected_format = EXTENSION_MAP[extension]
        logger.info(f"File type detected by extension: {detected_format} ({extension})")
        return detected_format
    
    mime_type = content_type or mimetypes.guess_type(file_name or "")[0]
    if mime_type and mime_type in MIME_MAP:
        detected_format = MIME_MAP[mime_type]
        logger.info(f"File type detected by MIME: {detected_format} ({mime_type})")
        return detected_format
    
    raise UnsupportedInputError(
        f"unsupported file type: {extension or 'no extension'} "
        f"(MIME: {mime_type}). Supported formats: PDF, DOCX, TXT"
    )


def dispatch_file(
    file_path: str,
    file_name: Optional[str] = None,
    content_type: Optional[str] = None
) -> ParsedDocument:
    """
    Extract text from a file using the parser for its detected type.
    
    Args:
        file_path: Path to the file on disk
        file_name: Original name (defaults to the path's name)
        content_type: Client-reported MIME type (optional)
        
    Returns:
        ParsedDocument with the extracted text
        
    Raises:
        UnsupportedInputError: If the type is unsupported or nothing could be extracted
    """
    path = Path(file_path)
    if not path.exists():
        raise UnsupportedInputError(f"File not found: {file_path}")
    
    file_name = file_name or path.name
    file_format = detect_file_type(file_name, content_type)
    
    logger.info(f"Dispatching file to {file_format.upper()} parser: {file_name}")
    
    try:
        if file_format == 'pdf':
            from .parser_pdf import parse_pdf
            result = parse_pdf(file_path)
        elif file_format == 'docx':
            from .parser_docx import parse_docx
            result = parse_docx(file_path)
        else:
            from .parser_txt import parse_txt
            result = parse_txt(file_path)
    except UnsupportedInputError:
        raise
    except Exception as e:
        logger.error(f"Parser error for {file_name}: {str(e)}")
        raise UnsupportedInputError(f"Failed to parse file {file_name}: {str(e)}") from e
    
    if not result.text.strip():
        raise NoTextExtractedError(f"could not extract text from {file_name}")
    
    result.metadata.update({
        "file_name": file_name,
        "file_size_bytes": path.stat().st_size
    })
    
    logger.info(f"Parsing complete - Format: {result.format}, Content Length: {len(result.text)} chars")
    
    return result


def get_supported_formats() -> List[str]:
    """Supported format names, sorted."""
    return sorted(set(EXTENSION_MAP.values()))
