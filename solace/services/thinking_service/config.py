"""Thinking Service configuration and static clinical catalogs.

All catalogs are built once at import and are read-only for the life of
the process. Changing a keyword or framework text means shipping a release.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from solace.shared.models import EmotionTag


@dataclass(frozen=True)
class ServiceConfig:
    """Service metadata reported by the info endpoints."""

    service_name: str = "sequential-thinking-service"
    service_label: str = "AI Coaching Platform"
    status_text: str = "Clean Sequential Thinking MCP Server Running"
    version: str = "1.0.0"


@dataclass(frozen=True)
class TherapeuticFramework:
    """An evidence-based grief framework offered at step 2."""
    name: str
    best_for: str
    techniques: str
    focus: str


# Phrases that switch the safety assessment onto the crisis branch.
# Matched as lower-case substrings: "hopelessness" matches "hopeless".
CRISIS_INDICATORS: Tuple[str, ...] = (
    "suicide",
    "kill myself",
    "end it all",
    "hurt myself",
    "not worth living",
    "better off dead",
    "want to die",
    "no point",
    "give up",
    "hopeless",
)

# Emotion keyword sets; iteration order is the order lines are emitted in.
EMOTION_KEYWORDS: Mapping[EmotionTag, Tuple[str, ...]] = MappingProxyType({
    EmotionTag.ANGER: ("angry", "mad"),
    EmotionTag.SADNESS: ("sad", "depressed"),
    EmotionTag.NUMBNESS: ("numb", "empty"),
    EmotionTag.GUILT: ("guilt", "blame"),
})

EMOTION_DESCRIPTIONS: Mapping[EmotionTag, str] = MappingProxyType({
    EmotionTag.ANGER: "Anger phase of grief identified",
    EmotionTag.SADNESS: "Sadness/depression indicators present",
    EmotionTag.NUMBNESS: "Emotional numbness detected",
    EmotionTag.GUILT: "Guilt/self-blame patterns identified",
})

CRISIS_HOTLINE = "988 Suicide Lifeline"

THERAPEUTIC_FRAMEWORKS: Tuple[TherapeuticFramework, ...] = (
    TherapeuticFramework(
        name="TRAUMA-INFORMED GRIEF THERAPY",
        best_for="Sudden, unexpected loss",
        techniques="Grounding, safety, gradual exposure",
        focus="Stabilization before processing",
    ),
    TherapeuticFramework(
        name="CONTINUING BONDS MODEL",
        best_for="Maintaining connection with deceased",
        techniques="Memory work, rituals, meaning-making",
        focus="Healthy ongoing relationship",
    ),
    TherapeuticFramework(
        name="COGNITIVE BEHAVIORAL THERAPY (CBT)",
        best_for="Complicated grief, negative thought patterns",
        techniques="Thought challenging, behavioral activation",
        focus="Changing unhelpful thinking patterns",
    ),
    TherapeuticFramework(
        name="ACCEPTANCE AND COMMITMENT THERAPY (ACT)",
        best_for="Values-based living despite loss",
        techniques="Mindfulness, values clarification",
        focus="Psychological flexibility",
    ),
)

PRIMARY_FRAMEWORK = "Trauma-Informed Grief Therapy"
SECONDARY_FRAMEWORK = "Continuing Bonds Model"
FRAMEWORK_RATIONALE = "Provides safety foundation while honoring connection"

CULTURAL_CONSIDERATIONS: Tuple[str, ...] = (
    "Respect cultural grief expressions",
    "Consider spiritual/religious beliefs",
    "Adapt techniques to cultural context",
)

# Five-part response strategy for step 3: (heading, bullets)
RESPONSE_STRATEGY: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("EMPATHETIC VALIDATION", (
        "Acknowledge the depth of their pain",
        "Normalize grief responses",
        "Validate their unique experience",
    )),
    ("PSYCHOEDUCATION", (
        "Explain grief as natural process",
        "Describe common grief reactions",
        "Provide hope for healing",
    )),
    ("PRACTICAL COPING STRATEGIES", (
        "Grounding techniques for overwhelming emotions",
        "Self-care recommendations",
        "Gradual re-engagement activities",
    )),
    ("MEANING-MAKING OPPORTUNITIES", (
        "Honor the relationship with deceased",
        "Explore legacy and memories",
        "Consider ways to maintain connection",
    )),
    ("RESOURCE PROVISION", (
        "Grief support groups",
        "Professional counseling options",
        "Crisis resources if needed",
    )),
)

TONE_AND_APPROACH: Tuple[str, ...] = (
    "Warm, compassionate, non-judgmental",
    "Patient and allowing for their pace",
    "Hopeful while acknowledging pain",
    "Professional yet personal",
)

FOLLOW_UP_PLAN: Tuple[str, ...] = (
    "Check in within 24-48 hours",
    "Monitor progress and adjust approach",
    "Provide ongoing support and resources",
)

STEP_DESCRIPTIONS: Mapping[int, str] = MappingProxyType({
    1: "Safety Assessment & Crisis Screening",
    2: "Therapeutic Framework Selection",
    3: "Personalized Response Planning",
    4: "Additional Analysis & Refinement",
})

SECTION_RULE = "=" * 40
