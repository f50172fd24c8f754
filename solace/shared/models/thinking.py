"""Sequential thinking domain models.

This file defines the request/response envelopes exchanged with the
thinking endpoint and the enums used by crisis screening.
Nothing here is persisted: every value lives for a single request.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

DEFAULT_THOUGHT_NUMBER = 1
DEFAULT_TOTAL_THOUGHTS = 3


def _text_or_default(value: Any, default: str) -> Any:
    # JSON null means "not supplied"
    return default if value is None else value


class EmotionTag(Enum):
    """Grief-related emotional states recognised during safety assessment."""
    ANGER = "anger"
    SADNESS = "sadness"
    NUMBNESS = "numbness"
    GUILT = "guilt"


class SupportProtocol(Enum):
    """Recommendation emitted at the end of the safety assessment."""
    CRISIS_PROTOCOL = "CRISIS PROTOCOL"
    STANDARD_GRIEF_SUPPORT = "STANDARD GRIEF SUPPORT"


class StepRole(Enum):
    """Which analysis generator a step number resolved to."""
    SAFETY_ASSESSMENT = "safety_assessment"
    FRAMEWORK_SELECTION = "framework_selection"
    RESPONSE_PLANNING = "response_planning"
    GENERAL_ANALYSIS = "general_analysis"


@dataclass(frozen=True)
class ThinkingRequest:
    """One call of the sequential thinking protocol.

    The caller resends step number and context on every call; no state is
    kept between requests. Values are not range-checked: thought_number may
    be zero, negative or larger than total_thoughts.
    """
    thought: str = ""
    next_thought_needed: bool = True   # Accepted for compatibility, never read
    thought_number: int = DEFAULT_THOUGHT_NUMBER
    total_thoughts: int = DEFAULT_TOTAL_THOUGHTS
    context: Mapping[str, Any] = field(default_factory=dict)
    user_message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ThinkingRequest":
        """Build a request from a decoded JSON object, defaulting absent keys.

        Args:
            data: Decoded request body

        Raises:
            TypeError: If data is not a mapping
        """
        if not isinstance(data, Mapping):
            raise TypeError(
                f"Request body must be a JSON object, got {type(data).__name__}"
            )

        defaults = cls()
        return cls(
            thought=_text_or_default(data.get("thought"), defaults.thought),
            next_thought_needed=data.get("next_thought_needed", defaults.next_thought_needed),
            thought_number=data.get("thought_number", defaults.thought_number),
            total_thoughts=data.get("total_thoughts", defaults.total_thoughts),
            context=data.get("context", {}),
            user_message=_text_or_default(data.get("user_message"), defaults.user_message),
        )


@dataclass(frozen=True)
class ThinkingResponse:
    """Envelope wrapping a generated analysis with step metadata."""
    thought_number: int
    total_thoughts: int
    next_thought_needed: bool
    analysis: str
    reasoning_step: str
    timestamp: str
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "success": self.success,
            "thought_number": self.thought_number,
            "total_thoughts": self.total_thoughts,
            "next_thought_needed": self.next_thought_needed,
            "analysis": self.analysis,
            "reasoning_step": self.reasoning_step,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ErrorResponse:
    """Body returned when analysis generation fails."""
    error: str
    thought_number: Any = 1
    success: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error,
            "thought_number": self.thought_number,
        }
