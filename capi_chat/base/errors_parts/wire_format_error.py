"""
Structured wire-format error exception type.

Raised when a producer hands the converter something it cannot render (an
unknown content part variant) or when a completion record is explicitly
validated and found inconsistent.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class WireFormatError(Exception):
    """Represents a structured wire-format error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        role: Role of the message being converted, when known.
        part_type: Name of the offending content part type, when known.
    """

    code: ErrorCode
    message: str
    role: Optional[str] = None
    part_type: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining role, part type, code, and message."""
        return f"{self.role or '-'}:{self.part_type or '-'} {self.code.value}: {self.message}"


__all__ = ["WireFormatError"]
