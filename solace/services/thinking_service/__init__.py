"""Thinking Service: sequential thinking protocol for grief coaching.

Each call supplies a step number and free text; the service returns a
canned analysis for that step and whether another step is expected.

Components:
- classifier.py: CrisisClassifier keyword screening used at step 1
- generators.py: One text generator per step role
- dispatcher.py: StepDispatcher lookup table and response envelope
- config.py: Static keyword and framework catalogs
- handler.py: Flask HTTP endpoints (/, /health, /tools/sequentialthinking_tools)

Usage:
    # As HTTP service
    POST /tools/sequentialthinking_tools {"thought": "...", "thought_number": 1}

    # Direct import
    from solace.services.thinking_service.dispatcher import StepDispatcher
    dispatcher = StepDispatcher()
    response = dispatcher.dispatch_payload({"thought_number": 2})
"""

from .classifier import CrisisClassifier, ClassificationResult
from .dispatcher import StepDispatcher, describe_step
from .errors import ThinkingServiceError, ProcessingFailure
from .config import ServiceConfig, CRISIS_INDICATORS, EMOTION_KEYWORDS

__all__ = [
    "CrisisClassifier",
    "ClassificationResult",
    "StepDispatcher",
    "describe_step",
    "ThinkingServiceError",
    "ProcessingFailure",
    "ServiceConfig",
    "CRISIS_INDICATORS",
    "EMOTION_KEYWORDS",
]
