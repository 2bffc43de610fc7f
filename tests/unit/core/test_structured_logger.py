"""Unit tests for StructuredLogger."""
import json
import logging

from trading_bot_manager.core.logging import get_logger


def test_emits_json_with_context(tmp_path):
    log_file = tmp_path / "logs" / "manager.log"
    logger = get_logger("tests.structured", log_file=log_file)

    logger.log_container_event("started", "alpha", "trading-bot-alpha-core", "abc123")

    entry = json.loads(log_file.read_text().splitlines()[-1])
    assert entry["level"] == "INFO"
    assert entry["message"] == "Container started"
    assert entry["logger"] == "tests.structured"
    assert entry["context"]["container_id"] == "abc123"
    assert entry["timestamp"].endswith("Z")


def test_error_details(tmp_path):
    log_file = tmp_path / "manager.log"
    logger = get_logger("tests.structured.error", log_file=log_file)

    logger.error("run_core failed", {"returncode": 125}, error=RuntimeError("conflict"))

    entry = json.loads(log_file.read_text().splitlines()[-1])
    assert entry["error"] == {"type": "RuntimeError", "message": "conflict"}


def test_invocation_logged_at_debug(tmp_path):
    log_file = tmp_path / "manager.log"
    logger = get_logger("tests.structured.debug", log_file=log_file)

    logger.log_invocation("kill", ["docker", "kill", "x"], 1)
    assert log_file.read_text() == ""

    logger.set_level("DEBUG")
    logger.log_invocation("kill", ["docker", "kill", "x"], 1)

    entry = json.loads(log_file.read_text().splitlines()[-1])
    assert entry["context"]["command"] == "docker kill x"
    assert logger.logger.level == logging.DEBUG
