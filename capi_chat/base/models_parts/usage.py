"""
Token usage DTOs received from the completion transport.

Usage arrives fully formed from the transport; this module only models and
classifies it. The pydantic models validate non-negative integer counts but
do not enforce ``prompt_tokens + completion_tokens == total_tokens``: internal
consistency is the producer's responsibility.

:func:`is_usage` is the cheap structural predicate callers use on raw payloads
before deciding whether to build a :class:`Usage`. It never raises.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt


_REQUIRED_NUMERIC_FIELDS = ("prompt_tokens", "completion_tokens", "total_tokens")


class PromptTokensDetails(BaseModel):
    """Breakdown of prompt tokens."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    cached_tokens: NonNegativeInt


class CompletionTokensDetails(BaseModel):
    """Breakdown of completion tokens.

    Only reasoning or prediction capable responses carry this object.

    Attributes:
        reasoning_tokens: Tokens generated by the model for reasoning.
        accepted_prediction_tokens: Predicted Output tokens that appeared in
            the completion.
        rejected_prediction_tokens: Predicted Output tokens that did not
            appear in the completion; still billed as completion tokens.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    reasoning_tokens: NonNegativeInt
    accepted_prediction_tokens: NonNegativeInt
    rejected_prediction_tokens: NonNegativeInt


class Usage(BaseModel):
    """Usage statistics for one completion request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    prompt_tokens: NonNegativeInt
    completion_tokens: NonNegativeInt
    total_tokens: NonNegativeInt
    prompt_tokens_details: PromptTokensDetails
    completion_tokens_details: Optional[CompletionTokensDetails] = None

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Usage":
        """Validate a wire ``usage`` object (raises ``pydantic.ValidationError``)."""
        return cls.model_validate(payload)

    def to_wire(self) -> Dict[str, Any]:
        """Return the wire shape, omitting absent completion details."""
        return self.model_dump(exclude_none=True)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_usage(obj: Any) -> bool:
    """Return True if ``obj`` exposes the three required token counts as numbers.

    Works on mappings (decoded JSON) and on attribute-style objects (SDK
    responses, :class:`Usage`). Detail objects are not required. ``None`` and
    any value missing or mistyping a required field yield False.
    """
    if obj is None:
        return False
    if isinstance(obj, Mapping):
        return all(_is_number(obj.get(k)) for k in _REQUIRED_NUMERIC_FIELDS)
    return all(_is_number(getattr(obj, k, None)) for k in _REQUIRED_NUMERIC_FIELDS)


__all__ = [
    "Usage",
    "PromptTokensDetails",
    "CompletionTokensDetails",
    "is_usage",
]
