"""
Finish reasons of a generated choice.

Values are wire-stable strings compared by equality elsewhere; never rename
them. Server reasons follow the chat completions API. Client reasons are
synthesized locally: ``CLIENT_TRIMMED`` when the consumer asked processing to
stop, and ``CLIENT_ITERATION_DONE`` / ``CLIENT_DONE`` when the stream ended
without a finish signal for the choice. The last two denote the same
server-side defect under two historical labels and stay distinct members.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class FinishedCompletionReason(str, Enum):
    """Enumerated outcome of a generated choice."""

    STOP = "stop"
    LENGTH = "length"
    FUNCTION_CALL = "function_call"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    # stream could not be completed and the server terminated the response
    SERVER_ERROR = "error"
    CLIENT_TRIMMED = "client-trimmed"
    CLIENT_ITERATION_DONE = "Iteration Done"
    CLIENT_DONE = "DONE"

    @property
    def is_server_reason(self) -> bool:
        return self in _SERVER_REASONS

    @property
    def is_missing_signal(self) -> bool:
        """True for the client sentinels meaning no finish reason ever arrived."""
        return self in (FinishedCompletionReason.CLIENT_ITERATION_DONE, FinishedCompletionReason.CLIENT_DONE)

    @classmethod
    def from_wire(cls, value: Optional[str]) -> Optional["FinishedCompletionReason"]:
        """Map a wire token to a member; ``None`` or unknown tokens yield ``None``."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_SERVER_REASONS = frozenset(
    (
        FinishedCompletionReason.STOP,
        FinishedCompletionReason.LENGTH,
        FinishedCompletionReason.FUNCTION_CALL,
        FinishedCompletionReason.TOOL_CALLS,
        FinishedCompletionReason.CONTENT_FILTER,
        FinishedCompletionReason.SERVER_ERROR,
    )
)


__all__ = ["FinishedCompletionReason"]
