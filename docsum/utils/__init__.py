"""
Shared helpers for user-facing response metadata.
"""

from .graceful_response import (
    success_message,
    graceful_notice,
    graceful_fallback,
    graceful_failure,
    DegradationLevel
)

__all__ = [
    "success_message",
    "graceful_notice",
    "graceful_fallback",
    "graceful_failure",
    "DegradationLevel"
]
