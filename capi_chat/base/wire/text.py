"""Text helpers for wire messages.

All helpers are pure: they never mutate their input.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence, Union

from .wire_types import CapiChatMessage, WireContent, WireContentPart

# ECMAScript WhiteSpace and LineTerminator code points
_JS_WHITESPACE = (
    "\u0009\u000b\u000c\u0020\u00a0\ufeff"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000"
    "\u000a\u000d\u2028\u2029"
)


def trim_end(text: str) -> str:
    """Strip trailing whitespace exactly as JavaScript ``trimEnd()`` does."""
    return text.rstrip(_JS_WHITESPACE)


def normalize_trailing_whitespace(message: CapiChatMessage) -> CapiChatMessage:
    """Return a copy of ``message`` with trailing whitespace stripped.

    Whitespace is the ECMAScript set (see :func:`trim_end`). String content is
    right-stripped as a whole. For list content every part whose ``type`` is
    ``"text"`` is right-stripped independently; other parts are kept as they
    are. Internal whitespace is never touched, so applying
    the function twice equals applying it once.
    """
    out: CapiChatMessage = dict(message)  # type: ignore[assignment]
    content = message.get("content")
    if isinstance(content, str):
        out["content"] = trim_end(content)
    elif content is not None:
        out["content"] = [_strip_text_part(p) for p in content]
    return out


def _strip_text_part(part: WireContentPart) -> WireContentPart:
    if isinstance(part, Mapping) and part.get("type") == "text" and isinstance(part.get("text"), str):
        return {**part, "text": trim_end(part["text"])}
    return part


def get_capi_text_part(content: Union[WireContent, WireContentPart, Sequence[Any]]) -> str:
    """Flatten wire content into plain text.

    Accepts string content, a single part, or a list of parts. Parts without
    a ``text`` field contribute an empty string.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, Mapping):
        text = content.get("text")
        return text if isinstance(text, str) else ""
    return "".join(get_capi_text_part(p) for p in content)


__all__ = ["normalize_trailing_whitespace", "get_capi_text_part", "trim_end"]
