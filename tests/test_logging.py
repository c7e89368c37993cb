"""Tests for logging configuration and secret masking."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from littleorigins.logging import (
    REDACTED,
    SERVICE_NAME,
    add_service,
    configure_logging,
    redact_secrets,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("httpx", "httpcore", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(logging.NOTSET)


class TestProcessors:
    def test_masks_credentials(self):
        event = {"event": "call", "Authorization": "Bearer sess_123", "secret_key": "sk_live_x"}
        out = redact_secrets(None, "info", event)
        assert out["Authorization"] == REDACTED
        assert out["secret_key"] == REDACTED
        assert out["event"] == "call"

    def test_keeps_empty_and_unrelated_fields(self):
        out = redact_secrets(None, "info", {"token": "", "user_id": "user_test"})
        assert out == {"token": "", "user_id": "user_test"}

    def test_service_added_once(self):
        assert add_service(None, "info", {})["service"] == SERVICE_NAME
        assert add_service(None, "info", {"service": "worker"})["service"] == "worker"


class TestConfigureLogging:
    def test_json_stdlib_records(self, capsys: pytest.CaptureFixture[str]):
        configure_logging("INFO", "json")
        logging.getLogger("uvicorn.error").info("started")
        logging.getLogger("littleorigins.test").warning("slow request")

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        assert [line["event"] for line in lines] == ["started", "slow request"]
        assert lines[0]["logger"] == "uvicorn.error"
        assert all(line["service"] == SERVICE_NAME for line in lines)

    def test_structlog_events_masked(self, capsys: pytest.CaptureFixture[str]):
        configure_logging("INFO", "json")
        structlog.get_logger().info("identity lookup", token="sess_secret")

        line = json.loads(capsys.readouterr().out.strip())
        assert line["token"] == REDACTED
        assert "sess_secret" not in json.dumps(line)

    def test_noisy_libraries_quieted(self):
        configure_logging("INFO")
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_debug_keeps_library_output(self):
        configure_logging("debug")
        assert logging.getLogger("httpx").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.INFO
