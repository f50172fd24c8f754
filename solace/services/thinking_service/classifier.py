"""Crisis classifier for the step 1 safety assessment.

Deterministic keyword screening over lower-cased text using plain
substring containment. There is no tokenization or stemming, so
"hopelessness" matches "hopeless" and "nomad" matches "mad". Callers rely
on this exact behaviour; do not switch to word-boundary matching here.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from solace.shared.models import EmotionTag, SupportProtocol
from .config import CRISIS_INDICATORS, EMOTION_KEYWORDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of screening one piece of text.

    Immutable - results cannot be modified after creation.
    """
    has_crisis_indicators: bool
    emotions: Tuple[EmotionTag, ...] = field(default_factory=tuple)
    matched_indicators: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def protocol(self) -> SupportProtocol:
        """Recommendation keyed off the crisis outcome."""
        if self.has_crisis_indicators:
            return SupportProtocol.CRISIS_PROTOCOL
        return SupportProtocol.STANDARD_GRIEF_SUPPORT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_crisis_indicators": self.has_crisis_indicators,
            "emotions": [e.value for e in self.emotions],
            "matched_indicators": list(self.matched_indicators),
            "protocol": self.protocol.value,
        }


def select_screening_text(user_message: Optional[str], thought: Optional[str]) -> str:
    """Pick the text to screen: the user's own words win over the thought."""
    return user_message or thought or ""


class CrisisClassifier:
    """Keyword-based crisis and emotion screening.

    Stateless apart from the keyword catalogs it was built with, so a
    single instance can be shared across concurrent requests.
    """

    def __init__(
        self,
        crisis_indicators: Iterable[str] = CRISIS_INDICATORS,
        emotion_keywords: Mapping[EmotionTag, Iterable[str]] = EMOTION_KEYWORDS,
    ):
        """Initialize classifier with keyword catalogs.

        Args:
            crisis_indicators: Phrases that trigger the crisis branch
            emotion_keywords: Keyword set per emotion tag, in emission order
        """
        self._crisis_indicators = tuple(crisis_indicators)
        self._emotion_keywords = tuple(
            (tag, tuple(keywords)) for tag, keywords in emotion_keywords.items()
        )

    def classify(self, text: Optional[str]) -> ClassificationResult:
        """Screen text for crisis indicators and grief emotions.

        Args:
            text: Raw text; None is treated as empty

        Returns:
            ClassificationResult with crisis flag and matched emotion tags
        """
        normalized = (text or "").lower()

        matched = tuple(
            phrase for phrase in self._crisis_indicators if phrase in normalized
        )
        emotions = tuple(
            tag
            for tag, keywords in self._emotion_keywords
            if any(keyword in normalized for keyword in keywords)
        )

        if matched:
            logger.critical(
                "CRISIS_INDICATORS_DETECTED",
                extra={
                    "indicator_count": len(matched),
                    "action": "CRISIS_PROTOCOL_RECOMMENDED",
                }
            )

        return ClassificationResult(
            has_crisis_indicators=bool(matched),
            emotions=emotions,
            matched_indicators=matched,
        )
