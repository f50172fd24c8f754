"""Shared domain models for the Solace coaching platform."""
from .thinking import (
    DEFAULT_THOUGHT_NUMBER,
    DEFAULT_TOTAL_THOUGHTS,
    EmotionTag,
    SupportProtocol,
    StepRole,
    ThinkingRequest,
    ThinkingResponse,
    ErrorResponse,
)

__all__ = [
    "DEFAULT_THOUGHT_NUMBER",
    "DEFAULT_TOTAL_THOUGHTS",
    "EmotionTag",
    "SupportProtocol",
    "StepRole",
    "ThinkingRequest",
    "ThinkingResponse",
    "ErrorResponse",
]
