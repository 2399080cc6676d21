"""Tests for structured logging helpers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from steelkilt.core.logging import bind_context, clear_context, configure_logging, get_logger


if TYPE_CHECKING:
    from collections.abc import Generator


class TestContext:
    """Tests for bound logging context."""

    def test_bind_and_clear(self) -> None:
        """Test that bound values appear in the context until cleared."""
        bind_context(combat_id="arena-3")
        assert structlog.contextvars.get_contextvars() == {"combat_id": "arena-3"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestGetLogger:
    """Tests for get_logger."""

    def test_logs_structured_events(self) -> None:
        """Test that keyword arguments become event fields."""
        with capture_logs() as logs:
            get_logger("test").info("Exchange resolved", hit=True, damage=7)

        assert logs == [
            {"event": "Exchange resolved", "hit": True, "damage": 7, "log_level": "info"}
        ]


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    """Undo configure_logging after the test."""
    yield
    structlog.reset_defaults()


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.strip().splitlines() if line]


@pytest.mark.usefixtures("restore_structlog")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that JSON mode renders one JSON object per line on stderr."""
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("Round started", round=2)

        captured = capsys.readouterr()
        payload = _json_lines(captured.err)[-1]
        assert captured.out == ""
        assert payload["event"] == "Round started"
        assert payload["round"] == 2
        assert payload["engine"] == "steelkilt"
        assert payload["level"] == "info"
        assert "dice_seed" not in payload

    def test_defaults_come_from_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that STEELKILT_LOG_LEVEL and STEELKILT_JSON_LOGS drive the setup."""
        monkeypatch.setenv("STEELKILT_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("STEELKILT_JSON_LOGS", "true")

        configure_logging()
        logger = get_logger("test")
        logger.info("Exchange resolved", hit=True)
        logger.warning("Maneuver refused")
        logger.error("Arena broken")

        payloads = _json_lines(capsys.readouterr().err)
        assert [p["event"] for p in payloads] == ["Arena broken"]

    def test_seed_tagged_on_every_line(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that a seeded run records its seed for replay."""
        monkeypatch.setenv("STEELKILT_DICE_SEED", "77")

        configure_logging(json_format=True)
        get_logger("test").info("Exchange resolved")

        assert _json_lines(capsys.readouterr().err)[-1]["dice_seed"] == 77

    def test_arguments_override_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that explicit arguments win over the environment."""
        monkeypatch.setenv("STEELKILT_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("STEELKILT_JSON_LOGS", "true")

        configure_logging(level="DEBUG", json_format=False)
        get_logger("test").debug("Rolled d10", face=7)

        err = capsys.readouterr().err
        assert "Rolled d10" in err
        assert not err.lstrip().startswith("{")

    def test_engine_loggers_follow_configuration(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that module loggers created at import pick up the level."""
        from steelkilt.engine.dice import DiceRoller

        monkeypatch.setenv("STEELKILT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("STEELKILT_JSON_LOGS", "true")
        configure_logging()

        face = DiceRoller(seed=4).d10()

        events = _json_lines(capsys.readouterr().err)
        assert {"event": "Rolled d10", "face": face}.items() <= events[-1].items()
