"""
Content filtering reasons.

``COPYRIGHT`` is carried on the wire as ``"snippy"``; the token intentionally
differs from the member name.
"""
from __future__ import annotations

from enum import Enum


class FilterReason(str, Enum):
    """Why a response (or its prompt) was filtered."""

    HATE = "hate"
    SELF_HARM = "self_harm"
    SEXUAL = "sexual"
    VIOLENCE = "violence"
    COPYRIGHT = "snippy"
    # prompt was filtered, no category provided
    PROMPT = "prompt"


__all__ = ["FilterReason"]
