"""Pytest configuration for the capi_chat test suite.

Isolates environment-driven settings and the shared logger between tests so
env toggles and handler swaps in one test never leak into another.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from capi_chat.base.models import CacheBreakpointPart, Message, Role, TextPart
from capi_chat.config import reset_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear settings env vars and the config file cache around each test."""

    for name in ("CAPI_CHAT_CONFIG_FILE", "CAPI_CHAT_LOG_LEVEL", "CAPI_CHAT_LOG_JSON", "CAPI_CHAT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def restore_base_logger() -> Iterator[logging.Logger]:
    """Snapshot and restore the shared logger's level and handlers."""

    base = logging.getLogger("capi_chat")
    level, handlers = base.level, list(base.handlers)
    yield base
    for h in base.handlers:
        if h not in handlers:
            h.close()
    base.handlers[:] = handlers
    base.setLevel(level)


@pytest.fixture()
def cached_user_message() -> Message:
    """User message with a cache breakpoint between two padded text spans."""

    return Message(
        role=Role.USER,
        content=[TextPart("Hello "), CacheBreakpointPart(), TextPart("world ")],
    )
