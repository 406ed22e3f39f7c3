"""Tests for `ChatCompletion` records, their invariants, and logprob DTOs."""
from __future__ import annotations

import math

import pytest

from capi_chat.base.errors import ErrorCode, WireFormatError
from capi_chat.base.models import (
    ApiErrorResponse,
    ApiJsonData,
    ChatCompletion,
    ChoiceLogProbs,
    FilterReason,
    FinishedCompletionReason,
    Message,
    RequestId,
    Usage,
    completion_violations,
    find_violations,
)


def _completion(**overrides) -> ChatCompletion:
    fields = dict(
        message=Message(role="assistant", content="Hello world"),
        choice_index=0,
        request_id=RequestId(header_request_id="hdr-1", completion_id="cmpl-1"),
        tokens=["Hello", " world"],
        usage=Usage.from_wire(
            {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5, "prompt_tokens_details": {"cached_tokens": 0}}
        ),
        block_finished=True,
        finish_reason=FinishedCompletionReason.STOP,
    )
    fields.update(overrides)
    return ChatCompletion(**fields)


def test_consistent_completion_has_no_violations():
    completion = _completion()
    assert completion_violations(completion) == []
    assert completion.validate() is completion
    assert completion.tokens == ("Hello", " world")
    assert completion.text() == "Hello world"


def test_finished_without_reason_is_flagged():
    completion = _completion(finish_reason=None)
    assert completion_violations(completion) == ["block finished without a finish reason"]
    with pytest.raises(WireFormatError) as err:
        completion.validate()
    assert err.value.code is ErrorCode.VALIDATION


def test_unfinished_without_reason_is_allowed():
    assert completion_violations(_completion(block_finished=False, finish_reason=None)) == []


def test_client_synthesized_reason_satisfies_invariant():
    completion = _completion(finish_reason=FinishedCompletionReason.CLIENT_DONE, usage=None)
    assert completion_violations(completion) == []


def test_find_violations_reports_choice_indexes():
    completions = [_completion(), _completion(choice_index=1, finish_reason=None)]
    assert find_violations(completions) == [(1, ["block finished without a finish reason"])]


def test_error_makes_choice_unusable_regardless_of_reason():
    ok = _completion()
    failed = _completion(error=ApiErrorResponse(code=500, message="stream aborted", metadata={"retry": False}))
    assert ok.is_usable
    assert not failed.is_usable
    assert failed.finish_reason is FinishedCompletionReason.STOP
    assert completion_violations(failed) == []


def test_filtered_completion():
    completion = _completion(
        finish_reason=FinishedCompletionReason.CONTENT_FILTER,
        filter_reason=FilterReason.COPYRIGHT,
    )
    assert completion.was_filtered
    assert completion.filter_reason == "snippy"
    assert not _completion().was_filtered


def test_completion_is_immutable():
    completion = _completion()
    with pytest.raises(AttributeError):
        completion.block_finished = False  # type: ignore[misc]


def test_choice_logprobs_from_wire():
    payload = {
        "content": [
            {
                "token": "Hello",
                "logprob": -0.1,
                "bytes": [72, 101, 108, 108, 111],
                "top_logprobs": [
                    {"token": "Hello", "logprob": -0.1, "bytes": [72, 101, 108, 108, 111]},
                    {"token": "Hi", "logprob": -2.5, "bytes": [72, 105]},
                ],
            },
            {"token": " world", "logprob": -0.4, "bytes": None, "top_logprobs": []},
        ]
    }
    logprobs = ChoiceLogProbs.model_validate(payload)
    assert logprobs.tokens() == ("Hello", " world")
    assert math.isclose(logprobs.total_logprob(), -0.5)
    assert logprobs.content[0].top_logprobs[1].token == "Hi"
    assert bytes(logprobs.content[0].bytes).decode("utf-8") == "Hello"


def test_legacy_json_data_tokens_join_to_text():
    data = ApiJsonData.model_validate(
        {
            "text": "foo bar",
            "tokens": ["foo", " bar"],
            "logprobs": {
                "text_offset": [0, 3],
                "token_logprobs": [-0.2, -0.3],
                "tokens": ["foo", " bar"],
            },
        }
    )
    assert "".join(data.tokens) == data.text
    assert data.logprobs.top_logprobs is None
