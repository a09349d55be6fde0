"""
Error taxonomy shared across the summarizer, chat, ingestion and LLM layers.

Core errors (InputTooShortError, NoExtractableContentError) are raised by the
local extractive engine and carry a fixed user-facing message so callers can
show a non-empty fallback text instead of an empty summary.
"""


class SummarizationError(ValueError):
    """Base class for outcomes where the local summarizer cannot produce a summary."""

    user_message = "Unable to generate a meaningful summary from the provided text."

    def __init__(self, message: str = None):
        super().__init__(message or self.user_message)


class InputTooShortError(SummarizationError):
    """Trimmed input is below the minimum summarizable length."""

    user_message = "The provided text is too short for meaningful summarization."


class NoExtractableContentError(SummarizationError):
    """Sentence splitting left no usable sentences."""

    user_message = "Unable to generate a meaningful summary from the provided text."


class UnsupportedInputError(ValueError):
    """Raised by file/URL extraction when an input cannot be turned into text."""


class NoTextExtractedError(UnsupportedInputError):
    """A supported input yielded no readable text."""


class RemoteServiceError(RuntimeError):
    """
    Raised when a remote LLM call fails or no provider is usable.

    Attributes:
        provider: Provider that failed (or "none")
        status_code: HTTP status reported by the provider, when known
    """

    def __init__(self, message: str, provider: str = "none", status_code: int = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
