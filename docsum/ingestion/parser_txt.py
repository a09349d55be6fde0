"""
Plain text parser - reads TXT files.
"""

from pathlib import Path
from docsum.core.logging import setup_logger
from .dispatcher import ParsedDocument

logger = setup_logger()


def parse_txt(file_path: str) -> ParsedDocument:
    """
    Parse plain text file.
    
    Args:
        file_path: Path to TXT file
        
    Returns:
        ParsedDocument with text content
    """
    path = Path(file_path)
    logger.info(f"Parsing TXT: {path.name}")
    
    # Read file with UTF-8 encoding (fallback to latin-1 if needed)
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        logger.warning(f"UTF-8 decode failed, trying latin-1 for {path.name}")
        text = path.read_text(encoding='latin-1')
    
    return ParsedDocument(
        text=text,
        format="txt",
        metadata={"line_count": len(text.splitlines())}
    )
