from typing import List

DEFAULT_MAX_CHUNK_SIZE = 3000


def chunk_document(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> List[str]:
    """
    Partition text into consecutive, non-overlapping chunks.
    
    Concatenating the result reproduces the input exactly; only the last
    chunk may be shorter than max_chunk_size.
    
    Args:
        text: The text to chunk
        max_chunk_size: Maximum size of each chunk in characters
    
    Returns:
        List of chunk strings in document order
        
    Raises:
        ValueError: If max_chunk_size is smaller than 1
    """
    if max_chunk_size < 1:
        raise ValueError(f"max_chunk_size must be at least 1, got {max_chunk_size}")
    
    chunks = []
    start = 0
    text_length = len(text)
    
    while start < text_length:
        end = start + max_chunk_size
        chunks.append(text[start:end])
        start = end
    
    return chunks
