"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass

import pytest

from capi_chat.base.logging import (
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    setup_logging,
)
from capi_chat.base.errors import WireFormatError
from capi_chat.base.log_support import JsonFormatter
from capi_chat.base.models import Message, TextPart, CacheBreakpointPart
from capi_chat.base.wire import to_wire
from capi_chat.config import get_settings


def _capture(base: logging.Logger, json_mode: bool = True) -> io.StringIO:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter("%(message)s"))
    setattr(handler, "_capi_chat_console_handler", True)
    handler.setLevel(logging.DEBUG)
    base.handlers[:] = [handler]
    return stream


def test_env_level_applies_to_base_logger(monkeypatch, restore_base_logger):
    monkeypatch.setenv("CAPI_CHAT_LOG_LEVEL", "ERROR")
    get_logger(name="capi_chat.test", level=logging.DEBUG)
    assert restore_base_logger.level == logging.ERROR


def test_log_event_payload_and_context(restore_base_logger):
    stream = _capture(restore_base_logger)
    restore_base_logger.setLevel(logging.INFO)
    logger = get_logger("capi_chat.test.events")
    log_event(logger, "wire.test", LogContext(request_id="r1", role="user"), skipped=None, parts=3)
    data = json.loads(stream.getvalue().strip())
    assert data["event"] == "wire.test"
    assert data["request_id"] == "r1"
    assert data["parts"] == 3
    assert "skipped" not in data
    assert "msg" not in data


def test_log_event_respects_level(restore_base_logger):
    stream = _capture(restore_base_logger)
    restore_base_logger.setLevel(logging.INFO)
    log_event(get_logger("capi_chat.test.quiet"), "hidden", level=logging.DEBUG)
    assert stream.getvalue() == ""


def test_converter_emits_debug_event(restore_base_logger):
    stream = _capture(restore_base_logger)
    configure_logger(level="DEBUG")
    to_wire(Message(role="user", content=[TextPart("a"), CacheBreakpointPart()]))
    events = [json.loads(line) for line in stream.getvalue().splitlines() if line]
    convert = [e for e in events if e.get("event") == "wire.convert"]
    assert convert and convert[-1]["cache_control"] is True
    assert convert[-1]["role"] == "user"
    assert convert[-1]["parts"] == 2


@dataclass(frozen=True)
class _AudioPart:
    url: str
    type: str = "audio"


def test_unsupported_part_event_carries_role(restore_base_logger):
    stream = _capture(restore_base_logger)
    configure_logger(level="DEBUG")
    with pytest.raises(WireFormatError):
        to_wire(Message(role="user", content=[TextPart("a"), _AudioPart("https://a")]))
    events = [json.loads(line) for line in stream.getvalue().splitlines() if line]
    failed = [e for e in events if e.get("event") == "wire.render.unsupported_part"]
    assert failed and failed[-1]["role"] == "user"
    assert failed[-1]["part_type"] == "audio"
    assert failed[-1]["level"] == "ERROR"

def test_child_logger_uses_parent_handler_without_duplicates(restore_base_logger):
    logger = get_logger(name="capi_chat.test.child", json_mode=False)
    stream = _capture(restore_base_logger, json_mode=False)
    restore_base_logger.setLevel(logging.INFO)
    logger.info("alpha")
    assert [ln for ln in stream.getvalue().splitlines() if ln] == ["alpha"]


def test_configure_logger_file_handler(tmp_path, restore_base_logger):
    path = tmp_path / "logs" / "wire.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    log_event(logger, "wire.file")
    for h in logger.handlers:
        h.flush()
    assert json.loads(path.read_text(encoding="utf-8").splitlines()[-1])["event"] == "wire.file"

    configure_logger(file_path=None)
    assert not [h for h in logger.handlers if getattr(h, "_capi_chat_file_handler", False)]


def test_setup_logging_from_settings(restore_base_logger):
    logger = setup_logging(get_settings({"log_level": "warning", "log_json": False}))
    assert logger.level == logging.WARNING
    assert not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)


def test_json_formatter_hoists_json_message() -> None:
    record = logging.LogRecord(
        name="capi_chat.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "wire.convert", "role": "user"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["role"] == "user"
    assert payload["level"] == "INFO"
    assert "msg" not in payload
