"""Tests for packaging_common/utils/logging_config.py."""

from unittest.mock import patch

import pytest

from packaging_common.enums import LogType
from packaging_common.host import InMemoryTaskHost
from packaging_common.utils.logging_config import configure_logging, get_logger, log, log_error


def _raised(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as e:
        return e


class TestLog:
    """Tests for severity dispatch."""

    @pytest.mark.parametrize("log_type", list(LogType))
    def test_dispatches_to_host(self, log_type):
        """Should pass the message and severity to the host."""
        host = InMemoryTaskHost()

        log("message", log_type, host)

        assert host.messages == [(log_type, "message")]

    @pytest.mark.parametrize(
        "log_type,method",
        [(LogType.DEBUG, "debug"), (LogType.WARNING, "warning"), (LogType.ERROR, "error")],
    )
    def test_dispatches_to_structlog(self, log_type, method):
        """Should use the matching structlog method without a host."""
        with patch("packaging_common.utils.logging_config.log_") as mock_log:
            log("message", log_type)

        getattr(mock_log, method).assert_called_once_with("message")


class TestLogError:
    """Tests for logging errors instead of raising."""

    def test_message_and_stack(self):
        """Should log the message at the level and the stack at debug."""
        host = InMemoryTaskHost()
        error = _raised(ValueError("bad feed"))

        log_error(error, LogType.WARNING, host)

        assert host.messages[0] == (LogType.WARNING, "bad feed")
        assert host.messages[1][0] == LogType.DEBUG
        assert "Traceback" in host.messages[1][1]
        assert "ValueError: bad feed" in host.messages[1][1]

    def test_unraised_exception_has_no_stack(self):
        """Should log only the message for an exception that was never raised."""
        host = InMemoryTaskHost()

        log_error(RuntimeError("boom"), LogType.ERROR, host)

        assert host.messages == [(LogType.ERROR, "boom")]

    def test_empty_message(self):
        """Should skip an empty message but still log the stack."""
        host = InMemoryTaskHost()

        log_error(_raised(KeyError()), LogType.ERROR, host)

        assert [log_type for log_type, _ in host.messages] == [LogType.DEBUG]

    def test_non_exception_value(self):
        """Should log non-exceptions as 'Error: <value>'."""
        host = InMemoryTaskHost()

        log_error("disk full", LogType.WARNING, host)

        assert host.messages == [(LogType.WARNING, "Error: disk full")]

    def test_defaults_to_debug(self):
        """Should log at debug when no level is given."""
        host = InMemoryTaskHost()

        log_error(42, host=host)

        assert host.messages == [(LogType.DEBUG, "Error: 42")]

    def test_never_raises_without_host(self):
        """Should not raise when logging to structlog."""
        log_error(_raised(ValueError("x")))
        log_error(None)


class TestConfigureLogging:
    """Tests for structlog configuration."""

    @pytest.mark.parametrize("json_output", [True, False])
    def test_configure_and_log(self, json_output, capsys):
        """Should configure structlog and emit events at or above the level."""
        configure_logging("info", json_output=json_output)
        logger = get_logger("tests")

        logger.info("config_saved", path="/tmp/.npmrc")
        logger.debug("hidden_event")

        output = capsys.readouterr().out
        assert "config_saved" in output
        assert "hidden_event" not in output
