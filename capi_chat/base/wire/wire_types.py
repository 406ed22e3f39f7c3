"""
Wire message shapes (JSON exchanged with the completion transport).

Field names are wire-exact. Optional keys are absent rather than ``null``
when not supplied, hence ``total=False`` on the message type.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, TypedDict, Union


class CacheControl(TypedDict):
    type: Literal["ephemeral"]


class ConfirmationPayload(TypedDict):
    state: str
    confirmation: Any


class WireFunction(TypedDict):
    name: str
    arguments: str


class WireToolCall(TypedDict, total=False):
    id: str
    type: Literal["function"]
    function: WireFunction


WireContentPart = Dict[str, Any]
WireContent = Union[str, List[WireContentPart]]


class CapiChatMessage(TypedDict, total=False):
    """Chat message in the completion service's wire format."""

    role: str
    content: WireContent
    name: str
    tool_calls: List[WireToolCall]
    tool_call_id: str
    copilot_references: List[Dict[str, Any]]
    copilot_confirmations: List[ConfirmationPayload]
    copilot_cache_control: CacheControl


EPHEMERAL_CACHE_CONTROL: CacheControl = {"type": "ephemeral"}


__all__ = [
    "CacheControl",
    "ConfirmationPayload",
    "WireFunction",
    "WireToolCall",
    "WireContentPart",
    "WireContent",
    "CapiChatMessage",
    "EPHEMERAL_CACHE_CONTROL",
]
