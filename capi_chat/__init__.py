"""capi_chat package

Provider-neutral chat completion data model and its conversion to the
completion service's wire format.

Purpose:
    Define the shapes of a chat completion exchange (messages with typed
    content parts, usage, log-probabilities, finish and filter reasons,
    completion records) and the pure converter from messages to wire
    messages. Fetching completions, telemetry, and request-id generation live
    in the transport layer, outside this package.

Public API (re-exported):
    - Version: ``__version__``
    - Converter: :func:`to_wire` (alias :func:`raw_message_to_capi`)
    - Models: :class:`Message`, content parts, :class:`Usage`,
      :func:`is_usage`, :class:`FinishedCompletionReason`,
      :class:`FilterReason`, :class:`ChatCompletion`
    - Exceptions: :class:`WireFormatError`, :class:`ErrorCode`
"""

from .base import *  # noqa: F401,F403
from .base import __all__ as _base_all

__version__ = "0.1.0"

__all__ = ["__version__", *_base_all]
