"""
Tool call DTOs.

A tool call names a function and carries its arguments as an opaque JSON
string; arguments are never parsed at this layer because streamed calls may
arrive as partial fragments.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ToolCallFunction(BaseModel):
    """Function descriptor of a tool call."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: str


class ToolCall(BaseModel):
    """A single tool call emitted by the model.

    Attributes:
        index: Position of the call within the choice.
        id: Server-assigned call identifier, when known.
        function: Function name and raw argument string, when known.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    id: Optional[str] = None
    function: Optional[ToolCallFunction] = None


__all__ = ["ToolCall", "ToolCallFunction"]
