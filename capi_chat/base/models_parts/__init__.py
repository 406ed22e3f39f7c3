"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`capi_chat.base.models_parts` if needed, while `capi_chat.base.models` remains
the primary stable import path.
"""

from .api_error import ApiErrorResponse
from .chat_completion import ChatCompletion, completion_violations, find_violations
from .confirmation import CopilotConfirmation
from .content_part import (
    CacheBreakpointPart,
    ContentPart,
    ContentPartType,
    ImagePart,
    OpaquePart,
    TextPart,
)
from .filter_reason import FilterReason
from .finish_reason import FinishedCompletionReason
from .logprobs import ApiJsonData, ApiLogprobs, ChoiceLogProbs, ChoiceLogProbsContent, TokenLogProb
from .message import Message
from .request_id import RequestId
from .role import Role
from .tool_call import ToolCall, ToolCallFunction
from .usage import CompletionTokensDetails, PromptTokensDetails, Usage, is_usage

__all__ = [
    "ApiErrorResponse",
    "ChatCompletion",
    "completion_violations",
    "find_violations",
    "CopilotConfirmation",
    "CacheBreakpointPart",
    "ContentPart",
    "ContentPartType",
    "ImagePart",
    "OpaquePart",
    "TextPart",
    "FilterReason",
    "FinishedCompletionReason",
    "ApiJsonData",
    "ApiLogprobs",
    "ChoiceLogProbs",
    "ChoiceLogProbsContent",
    "TokenLogProb",
    "Message",
    "RequestId",
    "Role",
    "ToolCall",
    "ToolCallFunction",
    "CompletionTokensDetails",
    "PromptTokensDetails",
    "Usage",
    "is_usage",
]
