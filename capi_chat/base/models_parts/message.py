"""
Message DTO handed to the wire converter.

Defines the frozen `Message` dataclass. Content is either a legacy plain
string (equivalent to a single `TextPart`) or an ordered tuple of content
parts. Extension fields supplied by the chat extension layer
(``copilot_references`` and ``copilot_confirmations``) are explicit optional
attributes: ``None`` means the producer did not supply them and the wire
message omits them entirely.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .confirmation import CopilotConfirmation
from .content_part import CacheBreakpointPart, ContentPart, TextPart
from .role import Role
from .tool_call import ToolCall


@dataclass(frozen=True)
class Message:
    """A provider-neutral chat message.

    Attributes:
        role: Author role; plain strings are coerced to :class:`Role`.
        content: Plain string or ordered parts (lists are frozen to tuples).
        name: Optional author name forwarded to the provider.
        tool_calls: Tool calls requested by an assistant message.
        tool_call_id: Identifier of the call a tool message answers.
        copilot_references: Capability references, copied verbatim.
        copilot_confirmations: Confirmation records, copied verbatim.
    """

    role: Role
    content: Union[str, Tuple[ContentPart, ...]]
    name: Optional[str] = None
    tool_calls: Optional[Tuple[ToolCall, ...]] = None
    tool_call_id: Optional[str] = None
    copilot_references: Optional[Tuple[Dict[str, Any], ...]] = None
    copilot_confirmations: Optional[Tuple[CopilotConfirmation, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))
        if not isinstance(self.content, str):
            object.__setattr__(self, "content", tuple(self.content))
        for attr in ("tool_calls", "copilot_references", "copilot_confirmations"):
            value = getattr(self, attr)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, attr, tuple(value))

    def parts(self) -> Tuple[ContentPart, ...]:
        """Return content as parts; a string becomes a single `TextPart`."""
        if isinstance(self.content, str):
            return (TextPart(self.content),)
        return self.content

    def has_cache_breakpoint(self) -> bool:
        """Return True if any content part is a cache breakpoint marker."""
        return any(isinstance(p, CacheBreakpointPart) for p in self.parts())

    def text(self) -> str:
        """Join the text spans in order; non-text parts contribute nothing."""
        return "".join(p.text for p in self.parts() if isinstance(p, TextPart))


__all__ = [
    "Message",
]
