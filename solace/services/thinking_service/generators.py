"""Step analysis generators.

One pure text producer per step role. Steps 2 and 3 do not depend on
their inputs, so their text is rendered once at import and returned as is.
"""
from typing import Any, List, Mapping, Optional

from .classifier import CrisisClassifier, select_screening_text
from .config import (
    CRISIS_HOTLINE,
    CULTURAL_CONSIDERATIONS,
    EMOTION_DESCRIPTIONS,
    FOLLOW_UP_PLAN,
    FRAMEWORK_RATIONALE,
    PRIMARY_FRAMEWORK,
    RESPONSE_STRATEGY,
    SECONDARY_FRAMEWORK,
    SECTION_RULE,
    THERAPEUTIC_FRAMEWORKS,
    TONE_AND_APPROACH,
)

_default_classifier = CrisisClassifier()


def _header(title: str) -> List[str]:
    return [title, SECTION_RULE, ""]


def _bullets(items, indent: str = "") -> List[str]:
    return [f"{indent}- {item}" for item in items]


def generate_safety_assessment(
    thought: Optional[str],
    user_message: Optional[str],
    classifier: Optional[CrisisClassifier] = None,
) -> str:
    """Step 1: crisis screening plus emotional state analysis.

    Screens ``user_message`` when present, otherwise ``thought``.

    Args:
        thought: Current thought text
        user_message: The user's original message
        classifier: Classifier to use (module default if omitted)

    Returns:
        Assessment text ending in the recommendation line
    """
    classifier = classifier or _default_classifier
    result = classifier.classify(select_screening_text(user_message, thought))

    lines = _header("STEP 1: SAFETY ASSESSMENT")
    lines.append("Crisis Screening:")
    if result.has_crisis_indicators:
        lines.append("🚨 CRISIS INDICATORS DETECTED")
        lines += _bullets((
            "Immediate safety assessment required",
            "Crisis intervention protocols activated",
            "Professional support may be needed",
        ))
        lines += ["", "Immediate Actions:"]
        lines += _bullets((
            f"Provide crisis resources ({CRISIS_HOTLINE})",
            "Validate feelings while ensuring safety",
            "Encourage professional help",
            "Follow up within 24 hours",
        ))
    else:
        lines.append("✅ No immediate crisis indicators detected")
        lines += _bullets((
            "Safe to proceed with standard grief coaching",
            "Continue with empathetic support",
            "Monitor for changes in risk level",
        ))
    lines.append("")

    lines.append("Emotional State Analysis:")
    lines += _bullets(EMOTION_DESCRIPTIONS[tag] for tag in result.emotions)

    lines += ["", f"Recommendation: {result.protocol.value}"]
    return "\n".join(lines)


def _render_framework_selection() -> str:
    lines = _header("STEP 2: THERAPEUTIC FRAMEWORK SELECTION")
    lines += ["Available Evidence-Based Frameworks:", ""]

    for index, framework in enumerate(THERAPEUTIC_FRAMEWORKS, start=1):
        lines.append(f"{index}. {framework.name}")
        lines += _bullets((
            f"Best for: {framework.best_for}",
            f"Techniques: {framework.techniques}",
            f"Focus: {framework.focus}",
        ), indent="   ")
        lines.append("")

    lines += [
        "RECOMMENDED APPROACH:",
        f"Primary: {PRIMARY_FRAMEWORK}",
        f"Secondary: {SECONDARY_FRAMEWORK}",
        f"Rationale: {FRAMEWORK_RATIONALE}",
        "",
        "Cultural Considerations:",
    ]
    lines += _bullets(CULTURAL_CONSIDERATIONS)
    lines.append("")
    return "\n".join(lines)


def _render_response_planning() -> str:
    lines = _header("STEP 3: PERSONALIZED RESPONSE PLANNING")
    lines += ["Response Strategy:", ""]

    for index, (heading, items) in enumerate(RESPONSE_STRATEGY, start=1):
        lines.append(f"{index}. {heading}")
        lines += _bullets(items, indent="   ")
        lines.append("")

    lines.append("Tone and Approach:")
    lines += _bullets(TONE_AND_APPROACH)
    lines += ["", "Follow-up Plan:"]
    lines += _bullets(FOLLOW_UP_PLAN)
    lines.append("")
    return "\n".join(lines)


FRAMEWORK_SELECTION_TEXT = _render_framework_selection()
RESPONSE_PLANNING_TEXT = _render_response_planning()


def generate_framework_selection(thought: Any, context: Mapping[str, Any]) -> str:
    """Step 2: the fixed four-framework catalog.

    ``thought`` and ``context`` are accepted for a uniform signature and
    reserved for personalised selection; the output ignores them.
    """
    return FRAMEWORK_SELECTION_TEXT


def generate_response_planning(thought: Any, context: Mapping[str, Any]) -> str:
    """Step 3: the fixed five-part response plan. Inputs are ignored."""
    return RESPONSE_PLANNING_TEXT


def generate_general_analysis(thought: Any, thought_number: Any) -> str:
    """Any other step: echo the thought under a generic heading.

    A missing (None) thought echoes as empty text.
    """
    if thought is None:
        thought = ""
    lines = _header(f"STEP {thought_number}: ADDITIONAL ANALYSIS")
    lines += [
        f"Continuing analysis: {thought}",
        "",
        "This step provides additional depth to the grief coaching analysis,",
        "ensuring comprehensive understanding and appropriate response.",
    ]
    return "\n".join(lines)
