"""Wire-layer error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``capi_chat.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.wire_format_error import WireFormatError

__all__ = ["ErrorCode", "WireFormatError"]
