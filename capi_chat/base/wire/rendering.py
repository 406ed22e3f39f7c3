"""OpenAI-mode rendering of messages.

Maps a :class:`~capi_chat.base.models.Message` onto the chat completions
message shape before any service-specific extensions are applied:

* ``user`` messages keep list content. Text parts become ``{"type": "text"}``
  parts, images become ``{"type": "image_url"}`` parts, opaque parts are
  emitted verbatim, and cache breakpoints are dropped (the format has no
  inline marker; the converter annotates the message instead).
* every other role gets string content: the text spans joined in order.

Parts outside the closed variant set are producer defects and raise
:class:`~capi_chat.base.errors.WireFormatError`.
"""
from __future__ import annotations

import copy
import logging
from typing import List, Optional

from ..errors import ErrorCode, WireFormatError
from ..logging import LogContext, get_logger, log_event
from ..models import (
    CacheBreakpointPart,
    ContentPart,
    ImagePart,
    Message,
    OpaquePart,
    Role,
    TextPart,
    ToolCall,
)
from ..models_parts.content_part import CONTENT_PART_CLASSES
from .wire_types import CapiChatMessage, WireContentPart, WireToolCall

logger = get_logger(__name__)


def _unsupported(part: object, role: Role) -> WireFormatError:
    part_type = getattr(part, "type", type(part).__name__)
    log_event(
        logger,
        "wire.render.unsupported_part",
        LogContext(role=role.value),
        level=logging.ERROR,
        part_type=str(part_type),
    )
    return WireFormatError(
        code=ErrorCode.UNSUPPORTED,
        message=f"cannot render content part of type {part_type!r}",
        role=role.value,
        part_type=str(part_type),
    )


def render_content_part(part: ContentPart, role: Role = Role.USER) -> Optional[WireContentPart]:
    """Render one part for list content; ``None`` means the part is omitted."""
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if isinstance(part, ImagePart):
        image_url = {"url": part.url}
        if part.detail is not None:
            image_url["detail"] = part.detail
        return {"type": "image_url", "image_url": image_url}
    if isinstance(part, OpaquePart):
        return copy.deepcopy(part.value)
    if isinstance(part, CacheBreakpointPart):
        return None
    raise _unsupported(part, role)


def _string_content(message: Message) -> str:
    for part in message.parts():
        if not isinstance(part, CONTENT_PART_CLASSES):
            raise _unsupported(part, message.role)
    return message.text()


def _render_tool_call(call: ToolCall) -> WireToolCall:
    out: WireToolCall = {"type": "function"}
    if call.id is not None:
        out["id"] = call.id
    if call.function is not None:
        out["function"] = {"name": call.function.name, "arguments": call.function.arguments}
    return out


def render_message(message: Message) -> CapiChatMessage:
    """Render ``message`` in OpenAI mode (no service extensions)."""
    out: CapiChatMessage = {"role": message.role.value}
    if message.role is Role.USER:
        parts: List[WireContentPart] = []
        for part in message.parts():
            rendered = render_content_part(part, message.role)
            if rendered is not None:
                parts.append(rendered)
        out["content"] = parts
    else:
        out["content"] = _string_content(message)
    if message.name is not None:
        out["name"] = message.name
    if message.role is Role.ASSISTANT and message.tool_calls:
        out["tool_calls"] = [_render_tool_call(c) for c in message.tool_calls]
    if message.role is Role.TOOL and message.tool_call_id is not None:
        out["tool_call_id"] = message.tool_call_id
    return out


__all__ = ["render_content_part", "render_message"]
