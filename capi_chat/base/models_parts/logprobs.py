"""
Log-probability DTOs.

Two wire shapes exist:

* Chat choices carry :class:`ChoiceLogProbs`: one record per generated token
  with its top-k alternatives.
* Legacy completion chunks carry :class:`ApiLogprobs`, a column-oriented
  layout of parallel arrays, wrapped by :class:`ApiJsonData`.
"""
from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class TokenLogProb(BaseModel):
    """Log-probability of a single token."""

    model_config = ConfigDict(frozen=True)

    token: str
    logprob: float
    bytes: Optional[List[int]] = None


class ChoiceLogProbsContent(TokenLogProb):
    """A generated token together with its most likely alternatives."""

    top_logprobs: List[TokenLogProb] = []


class ChoiceLogProbs(BaseModel):
    """Per-token log-probabilities covering every generated token, in order."""

    model_config = ConfigDict(frozen=True)

    content: List[ChoiceLogProbsContent] = []

    def tokens(self) -> Tuple[str, ...]:
        return tuple(c.token for c in self.content)

    def total_logprob(self) -> float:
        """Sum of token log-probabilities (log of the sequence probability)."""
        return math.fsum(c.logprob for c in self.content)


class ApiLogprobs(BaseModel):
    """Column-oriented logprobs of legacy completion chunks."""

    model_config = ConfigDict(frozen=True)

    text_offset: List[int]
    token_logprobs: List[float]
    top_logprobs: Optional[List[Dict[str, float]]] = None
    tokens: List[str]


class ApiJsonData(BaseModel):
    """Decoded legacy completion payload.

    Joining ``tokens`` reproduces ``text``. ``logprobs`` is only present when
    requested.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    tokens: Tuple[str, ...]
    logprobs: Optional[ApiLogprobs] = None


__all__ = [
    "TokenLogProb",
    "ChoiceLogProbsContent",
    "ChoiceLogProbs",
    "ApiLogprobs",
    "ApiJsonData",
]
