"""
PDF parser - page-by-page text extraction with pdfplumber.
"""

import pdfplumber
from pathlib import Path
from docsum.core.logging import setup_logger
from .dispatcher import ParsedDocument

logger = setup_logger()


def parse_pdf(file_path: str) -> ParsedDocument:
    """
    Extract text from a PDF file page by page.
    
    Args:
        file_path: Path to the PDF file
    
    Returns:
        ParsedDocument with pages joined by blank lines
    """
    pdf_path = Path(file_path)
    logger.info(f"Parsing PDF: {pdf_path.name}")
    
    pages = []
    with pdfplumber.open(pdf_path) as pdf:
        total_pages = len(pdf.pages)
        
        for page_num, page in enumerate(pdf.pages, start=1):
            text = page.extract_text()
            
            if text and text.strip():
                pages.append(text.strip())
            else:
                logger.warning(f"No text found on page {page_num}")
    
    logger.info(f"Extracted text from {len(pages)} of {total_pages} pages")
    
    return ParsedDocument(
        text="\n\n".join(pages),
        format="pdf",
        metadata={"page_count": total_pages, "pages_with_text": len(pages)}
    )
