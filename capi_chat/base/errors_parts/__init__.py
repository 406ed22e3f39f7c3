"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `capi_chat.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .wire_format_error import WireFormatError

__all__ = ["ErrorCode", "WireFormatError"]
