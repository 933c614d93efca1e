"""Item identity, navigation direction, and reference validation."""

from __future__ import annotations

from .types import Direction, InvalidIndexError, identity_token
from .validation import ReferenceValidator

__all__ = ["Direction", "InvalidIndexError", "ReferenceValidator", "identity_token"]
