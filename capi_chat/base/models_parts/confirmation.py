"""Confirmation record attached to a message by the chat extension layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class CopilotConfirmation:
    """A user confirmation and its opaque payload.

    Attributes:
        state: Confirmation state as reported by the client (e.g. ``"accepted"``).
        confirmation: Opaque payload echoed back to the service verbatim.
    """

    state: str
    confirmation: Any

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire shape ``{"state": ..., "confirmation": ...}``."""
        return {"state": self.state, "confirmation": self.confirmation}


__all__ = ["CopilotConfirmation"]
