"""
DOCX parser - extracts paragraph text from Word documents.
Requires: python-docx
"""

from pathlib import Path
from docx import Document
from docsum.core.logging import setup_logger
from .dispatcher import ParsedDocument

logger = setup_logger()


def parse_docx(file_path: str) -> ParsedDocument:
    """
    Parse DOCX file using python-docx.
    
    Args:
        file_path: Path to DOCX file
        
    Returns:
        ParsedDocument with non-empty paragraphs joined by blank lines
    """
    logger.info(f"Parsing DOCX: {Path(file_path).name}")
    
    doc = Document(file_path)
    
    paragraphs = []
    heading_count = 0
    for paragraph in doc.paragraphs:
        text = paragraph.text.strip()
        if not text:
            continue
        if paragraph.style is not None and paragraph.style.name.startswith('Heading'):
            heading_count += 1
        paragraphs.append(text)
    
    metadata = {
        "paragraph_count": len(paragraphs),
        "heading_count": heading_count
    }
    
    props = doc.core_properties
    if props.title:
        metadata["title"] = props.title
    if props.author:
        metadata["author"] = props.author
    
    logger.info(f"DOCX parsed - {len(paragraphs)} paragraphs, {heading_count} headings")
    
    return ParsedDocument(
        text="\n\n".join(paragraphs),
        format="docx",
        metadata=metadata
    )
