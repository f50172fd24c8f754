"""Shared utilities for the Solace coaching platform."""
from .redaction import hash_text_for_audit, redacted_text_fields

__all__ = ["hash_text_for_audit", "redacted_text_fields"]
