"""
capi_chat base package.

Exports the chat data model, the wire converter, and the error taxonomy:
- Models: content parts, messages, usage, log-probabilities, outcomes, and
  completion records
- Wire: OpenAI-mode rendering plus service extensions
- Errors: normalized error codes and ``WireFormatError``
"""

from .errors import ErrorCode, WireFormatError
from .models import (
    ApiErrorResponse,
    ApiJsonData,
    ApiLogprobs,
    CacheBreakpointPart,
    ChatCompletion,
    ChoiceLogProbs,
    ChoiceLogProbsContent,
    CompletionTokensDetails,
    ContentPart,
    ContentPartType,
    CopilotConfirmation,
    FilterReason,
    FinishedCompletionReason,
    ImagePart,
    Message,
    OpaquePart,
    PromptTokensDetails,
    RequestId,
    Role,
    TextPart,
    TokenLogProb,
    ToolCall,
    ToolCallFunction,
    Usage,
    completion_violations,
    find_violations,
    is_usage,
)
from .wire import (
    CapiChatMessage,
    get_capi_text_part,
    normalize_trailing_whitespace,
    raw_message_to_capi,
    render_message,
    to_wire,
)

__all__ = [
    # Errors
    "ErrorCode",
    "WireFormatError",
    # Models
    "ApiErrorResponse",
    "ApiJsonData",
    "ApiLogprobs",
    "CacheBreakpointPart",
    "ChatCompletion",
    "ChoiceLogProbs",
    "ChoiceLogProbsContent",
    "CompletionTokensDetails",
    "ContentPart",
    "ContentPartType",
    "CopilotConfirmation",
    "FilterReason",
    "FinishedCompletionReason",
    "ImagePart",
    "Message",
    "OpaquePart",
    "PromptTokensDetails",
    "RequestId",
    "Role",
    "TextPart",
    "TokenLogProb",
    "ToolCall",
    "ToolCallFunction",
    "Usage",
    "completion_violations",
    "find_violations",
    "is_usage",
    # Wire
    "CapiChatMessage",
    "get_capi_text_part",
    "normalize_trailing_whitespace",
    "raw_message_to_capi",
    "render_message",
    "to_wire",
]
