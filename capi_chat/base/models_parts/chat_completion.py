"""
ChatCompletion record: the aggregate result of one generated choice.

Records are assembled once per received choice by the response decoding
layer and are immutable thereafter. Two rules tie the fields together:

* ``block_finished=True`` implies ``finish_reason`` is set (by the server, or
  synthesized by the client).
* ``error``, when present, makes the choice unusable regardless of
  ``finish_reason``; consumers check it independently.

Violations are reported as data by :func:`completion_violations`; only
:meth:`ChatCompletion.validate` turns them into an exception.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from ..errors import ErrorCode, WireFormatError
from .api_error import ApiErrorResponse
from .filter_reason import FilterReason
from .finish_reason import FinishedCompletionReason
from .message import Message
from .request_id import RequestId
from .usage import Usage


@dataclass(frozen=True)
class ChatCompletion:
    """One generated choice.

    Attributes:
        message: The generated message.
        choice_index: Index of the choice within the response.
        request_id: Identifiers of the originating request.
        tokens: Flat sequence of generated tokens.
        usage: Token accounting, when the transport reported it.
        block_finished: Whether the block completion was determined finished.
        finish_reason: Server-assigned or client-synthesized finish reason.
        filter_reason: Why the content was filtered, if it was.
        telemetry_data: Opaque telemetry context supplied by the caller.
        error: Error encountered while producing the response.
    """

    message: Message
    choice_index: int
    request_id: RequestId
    tokens: Tuple[str, ...]
    usage: Optional[Usage]
    block_finished: bool
    finish_reason: Optional[FinishedCompletionReason]
    filter_reason: Optional[FilterReason] = None
    telemetry_data: Mapping[str, Any] = field(default_factory=dict)
    error: Optional[ApiErrorResponse] = None

    def __post_init__(self) -> None:
        if not isinstance(self.tokens, tuple):
            object.__setattr__(self, "tokens", tuple(self.tokens))

    @property
    def is_usable(self) -> bool:
        """False whenever an error is attached."""
        return self.error is None

    @property
    def was_filtered(self) -> bool:
        return self.filter_reason is not None or self.finish_reason is FinishedCompletionReason.CONTENT_FILTER

    def text(self) -> str:
        return "".join(self.tokens)

    def validate(self) -> "ChatCompletion":
        """Return ``self`` or raise ``WireFormatError`` listing the violations."""
        if problems := completion_violations(self):
            raise WireFormatError(
                code=ErrorCode.VALIDATION,
                message="; ".join(problems),
                role=self.message.role.value,
            )
        return self


def completion_violations(completion: ChatCompletion) -> List[str]:
    """Return the invariant violations of ``completion`` (empty when consistent)."""
    problems: List[str] = []
    if completion.block_finished and completion.finish_reason is None:
        problems.append("block finished without a finish reason")
    if completion.choice_index < 0:
        problems.append(f"negative choice index {completion.choice_index}")
    return problems


def find_violations(completions: Sequence[ChatCompletion]) -> List[Tuple[int, List[str]]]:
    """Return ``(choice_index, violations)`` for every inconsistent completion."""
    return [(c.choice_index, v) for c in completions if (v := completion_violations(c))]


__all__ = [
    "ChatCompletion",
    "completion_violations",
    "find_violations",
]
