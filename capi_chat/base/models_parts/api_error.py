"""Error payload reported by the service for a completion."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ApiErrorResponse(BaseModel):
    """Service error attached to a completion choice.

    Attributes:
        code: Numeric error code from the service.
        message: Human-readable error message.
        metadata: Optional opaque diagnostic mapping.
    """

    model_config = ConfigDict(frozen=True)

    code: int
    message: str
    metadata: Optional[Dict[str, Any]] = None


__all__ = ["ApiErrorResponse"]
