"""
Tests for logging_manager module.

Tests TodayLogger file output, the NullLogger/safe_logger null-safety
helpers and CLI error handling.
"""
import logging
import pytest
import click
from unittest.mock import MagicMock

from today.core.cli import setup_logger
from today.core.exceptions import EntryIOError
from today.core.logging_manager import (
    NullLogger,
    TodayLogger,
    handle_cli_error,
    safe_logger,
)


@pytest.fixture
def logger(tmp_path):
    """TodayLogger writing into a temporary directory."""
    instance = TodayLogger(tmp_path / "logs", "test_component")
    yield instance
    instance.close()


class TestTodayLogger:
    """Tests for TodayLogger."""

    def test_creates_log_files(self, logger):
        """Component and error logs are created in log_dir."""
        assert (logger.log_dir / "test_component.log").exists()
        assert (logger.log_dir / "errors.log").exists()

    def test_log_operation_written_as_json(self, logger):
        """Operation details are serialized to the component log."""
        logger.log_operation("forward_entry", {"path": "entries/2024-01-02.md"})

        text = (logger.log_dir / "test_component.log").read_text(encoding="utf-8")
        assert "OPERATION - forward_entry" in text
        assert '"path": "entries/2024-01-02.md"' in text

    def test_log_error_goes_to_error_log(self, logger):
        """Errors and their context land in errors.log."""
        logger.log_error(ValueError("broken"), {"operation": "test"})

        text = (logger.log_dir / "errors.log").read_text(encoding="utf-8")
        assert "ValueError: broken" in text
        assert "operation=test" in text

    def test_log_cli_error_message(self, logger):
        """CLI message is a single line naming the exception type."""
        message = logger.log_cli_error(ValueError("bad input"))
        assert message == "❌ ValueError: bad input"

    def test_log_cli_error_with_traceback(self, logger):
        """show_traceback appends the traceback."""
        try:
            raise ValueError("bad input")
        except ValueError as e:
            message = logger.log_cli_error(e, show_traceback=True)
        assert message.startswith("❌ ValueError: bad input\n\n")
        assert "Traceback" in message

    def test_does_not_propagate_to_root(self, logger):
        """Messages stay out of the root logger."""
        assert logger.main_logger.propagate is False
        assert logger.error_logger.propagate is False

    def test_reinit_resets_handlers(self, tmp_path, logger):
        """Creating a second logger for a component replaces handlers."""
        second = TodayLogger(tmp_path / "logs", "test_component")
        try:
            # component file + console on main, errors.log on error logger
            assert len(second.main_logger.handlers) == 2
            assert len(second.error_logger.handlers) == 1
        finally:
            second.close()

    def test_close_removes_handlers(self, tmp_path):
        instance = TodayLogger(tmp_path / "logs", "closing")
        instance.close()
        assert instance.main_logger.handlers == []
        assert instance.error_logger.handlers == []


class TestSetupLogger:
    """Tests for setup_logger helper."""

    def test_quiet_console_level(self, tmp_path):
        """Default console level only shows warnings."""
        instance = setup_logger(tmp_path / "logs", "quiet")
        try:
            assert instance.console_level == logging.WARNING
            assert (tmp_path / "logs").is_dir()
        finally:
            instance.close()

    def test_verbose_console_level(self, tmp_path):
        """Verbose mode shows everything."""
        instance = setup_logger(tmp_path / "logs", "loud", verbose=True)
        try:
            assert instance.console_level == logging.DEBUG
        finally:
            instance.close()


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        """All logging methods accept calls and do nothing."""
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")
        logger.log_warning("warning message", {"key": "value"})

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error should return formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "❌ ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        """safe_logger should return the same logger when not None."""
        mock_logger = MagicMock(spec=TodayLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        """safe_logger should return NullLogger when logger is None."""
        assert isinstance(safe_logger(None), NullLogger)

    def test_safe_logger_null_logger_is_singleton(self):
        """safe_logger should return the same NullLogger instance."""
        assert safe_logger(None) is safe_logger(None)

    def test_forwards_calls(self):
        """Calls reach the wrapped logger unchanged."""
        mock_logger = MagicMock(spec=TodayLogger)
        details = {"file": "2024-01-02.md"}

        safe_logger(mock_logger).log_operation("forward_entry", details)
        mock_logger.log_operation.assert_called_once_with("forward_entry", details)


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def _context(self, obj):
        ctx = click.Context(click.Command("today"))
        ctx.obj = obj
        return ctx

    def test_exits_with_code(self, capsys):
        """Error is printed to stderr and the process exits."""
        ctx = self._context({})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, EntryIOError("reading entry"), "forward")
        assert exc_info.value.code == 1
        assert "❌ EntryIOError: reading entry" in capsys.readouterr().err

    def test_logs_through_context_logger(self):
        """The logger in ctx.obj receives the error with context."""
        mock_logger = MagicMock(spec=TodayLogger)
        mock_logger.log_cli_error.return_value = "❌ boom"
        ctx = self._context({"logger": mock_logger, "verbose": True})
        error = EntryIOError("writing entry")

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, error, "forward", {"path": "x"}, exit_code=3)

        mock_logger.log_cli_error.assert_called_once_with(
            error, {"operation": "forward", "path": "x"}, show_traceback=True
        )

    def test_custom_exit_code(self):
        ctx = self._context(None)
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("x"), "op", exit_code=3)
        assert exc_info.value.code == 3
