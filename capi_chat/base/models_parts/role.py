"""
Chat role enumeration.

Values are the literal role strings of the completion wire format.
"""
from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Author role of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


__all__ = ["Role"]
