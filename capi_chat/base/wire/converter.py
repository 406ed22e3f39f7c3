"""Message to wire converter.

:func:`to_wire` turns provider-neutral messages into the completion service's
wire messages:

1. render the message in OpenAI mode (:func:`render_message`);
2. copy ``copilot_references`` and ``copilot_confirmations`` when the message
   carries them (absent fields stay absent, never ``null``);
3. strip trailing whitespace from string content or from each text part;
4. attach ``copilot_cache_control = {"type": "ephemeral"}`` when the message
   contains at least one cache breakpoint part.

A sequence is converted element-wise through the single-message path, so
``to_wire([m]) == [to_wire(m)]`` for every message ``m``. Conversion keeps no
state and performs no I/O beyond debug logging.
"""
from __future__ import annotations

import copy
import logging
from typing import List, Sequence, Union, overload

from ..logging import LogContext, get_logger, log_event
from ..models import Message
from .rendering import render_message
from .text import normalize_trailing_whitespace
from .wire_types import EPHEMERAL_CACHE_CONTROL, CapiChatMessage

logger = get_logger(__name__)


def _message_to_wire(message: Message) -> CapiChatMessage:
    out = render_message(message)
    if message.copilot_references is not None:
        out["copilot_references"] = [copy.deepcopy(r) for r in message.copilot_references]
    if message.copilot_confirmations is not None:
        out["copilot_confirmations"] = [c.to_dict() for c in message.copilot_confirmations]
    out = normalize_trailing_whitespace(out)
    cached = message.has_cache_breakpoint()
    if cached:
        out["copilot_cache_control"] = dict(EPHEMERAL_CACHE_CONTROL)  # type: ignore[typeddict-item]
    log_event(
        logger,
        "wire.convert",
        LogContext(role=message.role.value),
        level=logging.DEBUG,
        parts=len(message.parts()),
        cache_control=cached,
    )
    return out


@overload
def to_wire(message: Message) -> CapiChatMessage: ...


@overload
def to_wire(message: Sequence[Message]) -> List[CapiChatMessage]: ...


def to_wire(message: Union[Message, Sequence[Message]]) -> Union[CapiChatMessage, List[CapiChatMessage]]:
    """Convert one message, or an ordered sequence of messages, to wire form."""
    if isinstance(message, Message):
        return _message_to_wire(message)
    return [_message_to_wire(m) for m in message]


raw_message_to_capi = to_wire


__all__ = ["to_wire", "raw_message_to_capi"]
