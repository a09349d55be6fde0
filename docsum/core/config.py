import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables."""
    
    def __init__(self):
        self.APP_NAME = os.environ.get("APP_NAME", "Document Summarizer")
        self.ENV = os.environ.get("ENV", "development")
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
        
        # Summarization
        self.SUMMARY_MIN_CHARS = int(os.environ.get("SUMMARY_MIN_CHARS", "50"))
        self.KEYWORD_TOP_K = int(os.environ.get("KEYWORD_TOP_K", "8"))
        
        # Document chat context selection
        self.CHAT_CHUNK_THRESHOLD = int(os.environ.get("CHAT_CHUNK_THRESHOLD", "3500"))
        self.CHAT_MAX_CHUNK_SIZE = int(os.environ.get("CHAT_MAX_CHUNK_SIZE", "3000"))
        self.CHAT_MAX_CHUNKS = int(os.environ.get("CHAT_MAX_CHUNKS", "4"))
        self.CHAT_HISTORY_LIMIT = int(os.environ.get("CHAT_HISTORY_LIMIT", "5"))
        self.CHAT_CONTEXT_CHAR_LIMIT = int(os.environ.get("CHAT_CONTEXT_CHAR_LIMIT", "10000"))
        
        # Ingestion
        self.URL_FETCH_TIMEOUT_SECONDS = float(os.environ.get("URL_FETCH_TIMEOUT_SECONDS", "10"))
        self.MAX_UPLOAD_BYTES = int(os.environ.get("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))
    
    def __repr__(self):
        return (
            f"Settings(APP_NAME={self.APP_NAME}, ENV={self.ENV}, "
            f"LOG_LEVEL={self.LOG_LEVEL}, "
            f"CHAT_CHUNK_THRESHOLD={self.CHAT_CHUNK_THRESHOLD}, "
            f"CHAT_MAX_CHUNK_SIZE={self.CHAT_MAX_CHUNK_SIZE})"
        )


settings = Settings()
