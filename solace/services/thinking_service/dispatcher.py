"""Step dispatcher - maps a step number to its analysis generator.

The mapping is a lookup table of pure functions with an explicit default
entry, so every step number resolves to some generator. There is no state
machine: the caller drives the sequence and "next step" is derived from
the request, never enforced.
"""
import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from solace.shared.models import StepRole, ThinkingRequest, ThinkingResponse
from .classifier import CrisisClassifier
from .config import STEP_DESCRIPTIONS
from .errors import ProcessingFailure
from .generators import (
    generate_framework_selection,
    generate_general_analysis,
    generate_response_planning,
    generate_safety_assessment,
)

logger = logging.getLogger(__name__)

StepGenerator = Callable[[ThinkingRequest], str]
Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render an instant as ISO-8601 UTC with millisecond precision.

    Example:
        >>> format_timestamp(datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        '2026-01-02T03:04:05.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _is_step_key(value: Any) -> bool:
    # bool is an int subclass; True must not select step 1
    return not isinstance(value, bool)


def describe_step(step_number: Any) -> str:
    """Human-readable label for a step number.

    Steps 1-4 have fixed labels; anything else is "Analysis Step {n}".
    """
    if _is_step_key(step_number):
        description = STEP_DESCRIPTIONS.get(step_number)
        if description is not None:
            return description
    return f"Analysis Step {step_number}"


def best_known_thought_number(payload: Any) -> Any:
    """Step number to report in an error body: the request's, else 1."""
    if isinstance(payload, Mapping):
        return payload.get("thought_number") or 1
    return 1


class StepDispatcher:
    """Selects the generator for a step and assembles the response envelope.

    Safe to share between concurrent requests: it holds only the
    classifier and an immutable dispatch table.
    """

    def __init__(
        self,
        classifier: Optional[CrisisClassifier] = None,
        clock: Optional[Clock] = None,
    ):
        """Initialize dispatcher.

        Args:
            classifier: Crisis classifier used by the safety assessment
            clock: Returns the current instant; UTC wall clock by default
        """
        self.classifier = classifier or CrisisClassifier()
        self._clock = clock or _utc_now

        self._table: Mapping[int, Tuple[StepRole, StepGenerator]] = MappingProxyType({
            1: (
                StepRole.SAFETY_ASSESSMENT,
                lambda req: generate_safety_assessment(
                    req.thought, req.user_message, self.classifier
                ),
            ),
            2: (
                StepRole.FRAMEWORK_SELECTION,
                lambda req: generate_framework_selection(req.thought, req.context),
            ),
            3: (
                StepRole.RESPONSE_PLANNING,
                lambda req: generate_response_planning(req.thought, req.context),
            ),
        })
        self._default: Tuple[StepRole, StepGenerator] = (
            StepRole.GENERAL_ANALYSIS,
            lambda req: generate_general_analysis(req.thought, req.thought_number),
        )

    def resolve(self, thought_number: Any) -> Tuple[StepRole, StepGenerator]:
        """Return (role, generator) for a step number.

        Raises:
            TypeError: If thought_number is unhashable
        """
        if _is_step_key(thought_number):
            return self._table.get(thought_number, self._default)
        return self._default

    def dispatch(self, request: ThinkingRequest) -> ThinkingResponse:
        """Produce the analysis envelope for one thinking step.

        Args:
            request: Decoded request with defaults applied

        Returns:
            ThinkingResponse for the step

        Raises:
            ProcessingFailure: If anything goes wrong while building the
                analysis or the envelope. Nothing partial is returned.
        """
        try:
            role, generator = self.resolve(request.thought_number)
            analysis = generator(request)
            response = ThinkingResponse(
                thought_number=request.thought_number,
                total_thoughts=request.total_thoughts,
                next_thought_needed=request.thought_number < request.total_thoughts,
                analysis=analysis,
                reasoning_step=f"Step {request.thought_number}: {describe_step(request.thought_number)}",
                timestamp=format_timestamp(self._clock()),
            )
        except Exception as e:
            raise ProcessingFailure(
                str(e),
                thought_number=request.thought_number or 1,
            ) from e

        logger.info(
            "THINKING_STEP_DISPATCHED",
            extra={
                "thought_number": response.thought_number,
                "total_thoughts": response.total_thoughts,
                "step_role": role.value,
                "next_thought_needed": response.next_thought_needed,
                "analysis_length": len(analysis),
            }
        )
        return response

    def dispatch_payload(self, payload: Any) -> ThinkingResponse:
        """Apply request defaults to a decoded JSON body, then dispatch.

        Raises:
            ProcessingFailure: If the body is not a JSON object or
                dispatch fails
        """
        try:
            request = ThinkingRequest.from_dict(payload)
        except TypeError as e:
            raise ProcessingFailure(
                str(e),
                thought_number=best_known_thought_number(payload),
            ) from e
        return self.dispatch(request)
