"""
Provider-neutral chat data model public surface.

This module re-exports the one-concept-per-file implementations under
``capi_chat.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.api_error import ApiErrorResponse
from .models_parts.chat_completion import ChatCompletion, completion_violations, find_violations
from .models_parts.confirmation import CopilotConfirmation
from .models_parts.content_part import (
    CacheBreakpointPart,
    ContentPart,
    ContentPartType,
    ImagePart,
    OpaquePart,
    TextPart,
)
from .models_parts.filter_reason import FilterReason
from .models_parts.finish_reason import FinishedCompletionReason
from .models_parts.logprobs import (
    ApiJsonData,
    ApiLogprobs,
    ChoiceLogProbs,
    ChoiceLogProbsContent,
    TokenLogProb,
)
from .models_parts.message import Message
from .models_parts.request_id import RequestId
from .models_parts.role import Role
from .models_parts.tool_call import ToolCall, ToolCallFunction
from .models_parts.usage import CompletionTokensDetails, PromptTokensDetails, Usage, is_usage

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
