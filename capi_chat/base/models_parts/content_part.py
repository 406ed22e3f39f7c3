"""
Content part variants for chat messages.

A message's content is an ordered sequence of parts. Each variant is a small
frozen dataclass carrying a literal ``type`` tag; together they form the
closed :data:`ContentPart` union that the wire renderer dispatches on. Part
order is significant and is preserved by every transformation in the package.

Variants:
    - :class:`TextPart` - a span of plain text.
    - :class:`CacheBreakpointPart` - marks where the provider may apply prompt
      caching; it carries no text.
    - :class:`ImagePart` - an image reference (URL or data URI).
    - :class:`OpaquePart` - a provider-specific part emitted verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Literal, Optional, Union


ContentPartType = Literal[
    "text",
    "cache-breakpoint",
    "image",
    "opaque",
]

ImageDetail = Literal["low", "high", "auto"]


@dataclass(frozen=True)
class TextPart:
    """A span of plain text.

    Attributes:
        text: The text content, kept exactly as produced (no trimming).
    """

    text: str
    type: Literal["text"] = field(default="text", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        return asdict(self)


@dataclass(frozen=True)
class CacheBreakpointPart:
    """Marker signaling a prompt caching boundary.

    Its presence, not its content, drives the ``copilot_cache_control``
    annotation on the converted message.
    """

    cache_type: Literal["ephemeral"] = "ephemeral"
    type: Literal["cache-breakpoint"] = field(default="cache-breakpoint", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        return asdict(self)


@dataclass(frozen=True)
class ImagePart:
    """An image referenced by URL or data URI.

    Attributes:
        url: Image location (``https://`` or ``data:`` URI).
        detail: Optional fidelity hint understood by the provider.
    """

    url: str
    detail: Optional[ImageDetail] = None
    type: Literal["image"] = field(default="image", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        return asdict(self)


@dataclass(frozen=True)
class OpaquePart:
    """A provider-specific part passed through to the wire untouched."""

    value: Any
    type: Literal["opaque"] = field(default="opaque", init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        return {"type": self.type, "value": self.value}


ContentPart = Union[TextPart, CacheBreakpointPart, ImagePart, OpaquePart]

CONTENT_PART_CLASSES = (TextPart, CacheBreakpointPart, ImagePart, OpaquePart)


__all__ = [
    "ContentPart",
    "ContentPartType",
    "ImageDetail",
    "TextPart",
    "CacheBreakpointPart",
    "ImagePart",
    "OpaquePart",
    "CONTENT_PART_CLASSES",
]
