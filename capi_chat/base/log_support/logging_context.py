"""Structured logging context object for wire conversion events.

:class:`LogContext` carries the fields shared by a burst of related events
(request id, choice index, role) and merges an ``extra`` mapping, pruning
``None`` values for clean structured output.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for wire-layer logging events."""

    request_id: Optional[str] = None
    choice_index: Optional[int] = None
    role: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
