"""Thinking Service exceptions."""
from typing import Any


class ThinkingServiceError(Exception):
    """Base exception for thinking service errors."""
    pass


class ProcessingFailure(ThinkingServiceError):
    """Analysis for a step could not be produced.

    Carries the best-known step number so the HTTP layer can echo it
    back in the error body.
    """

    def __init__(self, message: str, thought_number: Any = 1):
        super().__init__(message)
        self.message = message
        self.thought_number = thought_number
