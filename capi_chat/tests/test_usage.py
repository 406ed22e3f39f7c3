"""Tests for `Usage` DTOs and the `is_usage` predicate."""
from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from capi_chat.base.models import Usage, is_usage


WIRE_USAGE = {
    "prompt_tokens": 10,
    "completion_tokens": 5,
    "total_tokens": 15,
    "prompt_tokens_details": {"cached_tokens": 4},
}


def test_is_usage_accepts_minimal_record():
    assert is_usage({"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3})


@pytest.mark.parametrize(
    "value",
    [
        None,
        {},
        {"prompt_tokens": 1},
        {"prompt_tokens": 1, "completion_tokens": 2},
        {"prompt_tokens": "1", "completion_tokens": 2, "total_tokens": 3},
        {"prompt_tokens": 1, "completion_tokens": None, "total_tokens": 3},
        {"prompt_tokens": True, "completion_tokens": 2, "total_tokens": 3},
        "usage",
        42,
        [1, 2, 3],
    ],
)
def test_is_usage_rejects_missing_or_mistyped_fields(value):
    assert is_usage(value) is False


def test_is_usage_accepts_attribute_objects_and_floats():
    assert is_usage(SimpleNamespace(prompt_tokens=1, completion_tokens=2.0, total_tokens=3))
    assert is_usage(Usage.from_wire(WIRE_USAGE))


def test_is_usage_does_not_check_consistency():
    assert is_usage({"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 99})


def test_usage_from_wire_without_completion_details():
    usage = Usage.from_wire(WIRE_USAGE)
    assert usage.prompt_tokens_details.cached_tokens == 4
    assert usage.completion_tokens_details is None
    assert "completion_tokens_details" not in usage.to_wire()
    assert usage.to_wire() == WIRE_USAGE


def test_usage_from_wire_with_completion_details():
    payload = dict(
        WIRE_USAGE,
        completion_tokens_details={
            "reasoning_tokens": 3,
            "accepted_prediction_tokens": 1,
            "rejected_prediction_tokens": 0,
        },
    )
    usage = Usage.from_wire(payload)
    assert usage.completion_tokens_details.reasoning_tokens == 3
    assert usage.to_wire()["completion_tokens_details"]["rejected_prediction_tokens"] == 0


def test_usage_does_not_enforce_total():
    usage = Usage.from_wire(dict(WIRE_USAGE, total_tokens=1))
    assert usage.total_tokens == 1


def test_usage_rejects_negative_counts_and_missing_prompt_details():
    with pytest.raises(ValidationError):
        Usage.from_wire(dict(WIRE_USAGE, prompt_tokens=-1))
    with pytest.raises(ValidationError):
        Usage.from_wire({"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3})


def test_usage_is_immutable():
    usage = Usage.from_wire(WIRE_USAGE)
    with pytest.raises(ValidationError):
        usage.prompt_tokens = 3
