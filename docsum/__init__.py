"""Document summarization and document-chat backend."""

__version__ = "1.0.0"
