"""Tests for logging configuration and stream copy logging."""

import io
import logging
from unittest.mock import Mock, patch

import pytest
import structlog
from structlog.testing import capture_logs

from fmf_basic.logging.config import (
    configure_logging,
    configure_logging_from_config,
    get_stream_logger,
    log_copy_summary,
)
from fmf_basic.utils.streams import copy, write_bytes


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_renderer_selected(self):
        """JSON mode should end the processor chain with a JSON renderer."""
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert structlog.get_config()["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_console_renderer_selected(self):
        """Console mode should end the processor chain with the console renderer."""
        configure_logging(format_json=False, include_timestamp=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_caller_information_added(self):
        """include_caller should add the callsite processor."""
        configure_logging(include_caller=True)

        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)

    def test_extra_processors_run_before_renderer(self):
        """Extra processors should be placed ahead of the final renderer."""
        def tag(logger, method_name, event_dict):
            return event_dict

        configure_logging(extra_processors=[tag])

        assert structlog.get_config()["processors"][-2] is tag

    def test_root_level_applied(self):
        """The stdlib root logger should receive the configured level."""
        with patch("fmf_basic.logging.config.logging.basicConfig") as mock_basic:
            configure_logging(level="error")

        assert mock_basic.call_args.kwargs["level"] == logging.ERROR

    def test_invalid_level_rejected(self):
        """Unknown level names should raise AttributeError."""
        with pytest.raises(AttributeError):
            configure_logging(level="VERBOSE")

    def test_configure_from_config(self):
        """The logging section of a merged config drives configure_logging."""
        config = {"logging": {"level": "ERROR", "format_json": True}}

        with patch("fmf_basic.logging.config.configure_logging") as mock_configure:
            configure_logging_from_config(config)

        mock_configure.assert_called_once_with(
            level="ERROR",
            format_json=True,
            include_timestamp=True,
            include_caller=False,
        )

    def test_configure_from_empty_config(self):
        """A config without a logging section falls back to defaults."""
        with patch("fmf_basic.logging.config.configure_logging") as mock_configure:
            configure_logging_from_config({})

        mock_configure.assert_called_once_with(
            level="WARNING",
            format_json=False,
            include_timestamp=True,
            include_caller=False,
        )


class TestCopyLogging:
    """Test debug events emitted by stream copies."""

    def test_copy_emits_summary(self):
        """A finished copy should log its byte and chunk counts."""
        with capture_logs() as logs:
            copy(io.BytesIO(b"z" * 1500), io.BytesIO())

        summaries = [entry for entry in logs if entry["event"] == "Stream copy complete"]
        assert len(summaries) == 1
        assert summaries[0]["bytes_copied"] == 1500
        assert summaries[0]["chunks"] == 2
        assert summaries[0]["subsystem"] == "streams"
        assert summaries[0]["log_level"] == "debug"

    def test_failed_copy_is_not_logged(self, failing_sink_factory):
        """Failures should propagate without a log entry."""
        with capture_logs() as logs:
            with pytest.raises(OSError):
                write_bytes(b"data", failing_sink_factory(fail_after_writes=0))

        assert logs == []

    def test_log_copy_summary_binds_context(self):
        """Extra context should be bound alongside the counts."""
        logger = Mock()
        bound = Mock()
        logger.bind.return_value = bound
        bound.bind.return_value = bound

        log_copy_summary(logger, bytes_copied=10, chunks=1, context={"source": "memory"})

        logger.bind.assert_called_once_with(bytes_copied=10, chunks=1)
        bound.bind.assert_called_once_with(context={"source": "memory"})
        bound.debug.assert_called_once_with("Stream copy complete")

    def test_stream_logger_is_bound(self):
        """Stream loggers should carry the streams subsystem."""
        with capture_logs() as logs:
            get_stream_logger(__name__).info("probe")

        assert logs[0]["subsystem"] == "streams"
