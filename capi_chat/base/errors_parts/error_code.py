"""
Normalized wire-layer error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the converter and completion
validation. Values are lowercase snake_case and are considered a stable public
contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"


__all__ = ["ErrorCode"]
