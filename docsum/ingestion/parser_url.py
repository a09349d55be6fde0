"""
Web page text extraction with requests + BeautifulSoup.
"""

import re
from typing import Optional

import requests
from bs4 import BeautifulSoup

from docsum.core.config import settings
from docsum.core.errors import UnsupportedInputError, NoTextExtractedError
from docsum.core.logging import setup_logger
from .dispatcher import ParsedDocument

logger = setup_logger()

USER_AGENT = "Mozilla/5.0 (compatible; docsum/1.0)"

# Elements that never hold article text
NON_CONTENT_TAGS = ["script", "style", "noscript", "nav", "header", "footer", "aside", "form"]

_WHITESPACE_RE = re.compile(r"[ \t\r\f\v]+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n+")


def is_url(value: str) -> bool:
    return value.strip().lower().startswith(("http://", "https://"))


def html_to_text(html: str) -> str:
    """
    Strip markup and boilerplate elements, keeping paragraph breaks.
    """
    soup = BeautifulSoup(html, "html.parser")
    
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    
    root = soup.find("article") or soup.find("main") or soup.body or soup
    text = root.get_text(separator="\n")
    
    text = _WHITESPACE_RE.sub(" ", text)
    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(lines)
    
    return _BLANK_LINES_RE.sub("\n\n", text).strip()


def fetch_url_text(url: str, timeout: Optional[float] = None) -> ParsedDocument:
    """
    Download a web page and extract its readable text.
    
    Args:
        url: http(s) URL
        timeout: Request timeout in seconds (defaults to URL_FETCH_TIMEOUT_SECONDS)
        
    Returns:
        ParsedDocument with the page text
        
    Raises:
        UnsupportedInputError: If the URL is invalid, unreachable or has no text
    """
    if not is_url(url):
        raise UnsupportedInputError(f"Not an http(s) URL: {url}")
    
    logger.info(f"Fetching URL: {url}")
    
    try:
        response = requests.get(
            url,
            timeout=timeout or settings.URL_FETCH_TIMEOUT_SECONDS,
            headers={"User-Agent": USER_AGENT}
        )
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"URL fetch failed for {url}: {str(e)}")
        raise UnsupportedInputError(f"Could not fetch URL {url}: {str(e)}") from e
    
    text = html_to_text(response.text)
    if not text:
        raise NoTextExtractedError(f"could not extract text from {url}")
    
    logger.info(f"URL parsed - {len(text)} chars")
    
    return ParsedDocument(
        text=text,
        format="url",
        metadata={
            "url": url,
            "status_code": response.status_code,
            "content_type": response.headers.get("Content-Type")
        }
    )
