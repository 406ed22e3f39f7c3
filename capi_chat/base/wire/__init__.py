"""Wire conversion package: rendering, normalization, and the converter."""

from .converter import raw_message_to_capi, to_wire
from .rendering import render_content_part, render_message
from .text import get_capi_text_part, normalize_trailing_whitespace, trim_end
from .wire_types import (
    EPHEMERAL_CACHE_CONTROL,
    CacheControl,
    CapiChatMessage,
    ConfirmationPayload,
    WireContent,
    WireContentPart,
    WireToolCall,
)

__all__ = [
    "to_wire",
    "raw_message_to_capi",
    "render_message",
    "render_content_part",
    "normalize_trailing_whitespace",
    "get_capi_text_part",
    "trim_end",
    "EPHEMERAL_CACHE_CONTROL",
    "CacheControl",
    "CapiChatMessage",
    "ConfirmationPayload",
    "WireContent",
    "WireContentPart",
    "WireToolCall",
]
