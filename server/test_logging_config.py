"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging

from logging_config import JSONFormatter, TokenRedactionFilter


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


def test_redacts_configured_token():
    record = _record("calling GitHub with %s", "s3cret-value")
    TokenRedactionFilter(token="s3cret-value").filter(record)
    assert record.getMessage() == "calling GitHub with ***"


def test_redacts_github_token_shapes():
    record = _record("token ghp_" + "a" * 36 + " leaked")
    TokenRedactionFilter().filter(record)
    assert record.getMessage() == "token *** leaked"


def test_leaves_clean_messages_untouched():
    record = _record("Analyzed %s/%s", "octo", "demo")
    assert TokenRedactionFilter(token="").filter(record) is True
    assert record.args == ("octo", "demo")


def test_json_formatter_emits_one_object():
    line = JSONFormatter().format(_record("hello %s", "world"))
    entry = json.loads(line)
    assert entry["severity"] == "INFO"
    assert entry["message"] == "hello world"
    assert entry["logger"] == "test"
