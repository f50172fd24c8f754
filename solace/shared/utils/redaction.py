"""Redaction helpers: user text never reaches application logs verbatim.

Grief disclosures are sensitive. Log a fingerprint and a length instead of
the message so an operator can correlate requests without reading them.
"""
import hashlib
from typing import Any, Dict, Optional


def hash_text_for_audit(text: Optional[str]) -> str:
    """Hash message text for log correlation without exposing content.

    Args:
        text: Raw message text (None is treated as empty)

    Returns:
        SHA-256 hex digest of the text
    """
    return hashlib.sha256((text or "").encode()).hexdigest()


def redacted_text_fields(prefix: str, text: Any) -> Dict[str, Any]:
    """Build logging ``extra`` fields describing a text value.

    Non-string values are reported by type only.

    Example:
        >>> redacted_text_fields("thought", "hello")["thought_length"]
        5
    """
    if not isinstance(text, str):
        return {f"{prefix}_type": type(text).__name__}
    return {
        f"{prefix}_hash": hash_text_for_audit(text),
        f"{prefix}_length": len(text),
    }
