"""Tests for logging configuration."""

import re
import sys
from io import StringIO
from unittest.mock import patch

from ytnorm.logging import configure_logging, logger
from ytnorm.normalizer import normalize

from .conftest import CANONICAL


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_goes_to_stderr_at_info(self) -> None:
        """Without a sink, INFO and up reach stderr and DEBUG does not."""
        stderr = StringIO()
        with patch.object(sys, "stderr", stderr):
            configure_logging()
            logger.debug("timer armed")
            logger.warning("listener failed")

        output = stderr.getvalue()
        assert "timer armed" not in output
        assert "listener failed" in output

    def test_verbose_names_module_with_milliseconds(self) -> None:
        """Verbose lines carry HH:mm:ss.SSS and the emitting module."""
        sink = StringIO()
        configure_logging(verbose=True, sink=sink)
        normalize(f"{CANONICAL}&t=5")

        line = next(ln for ln in sink.getvalue().splitlines() if "Standard watch URL" in ln)
        assert re.match(r"\d\d:\d\d:\d\d\.\d{3} \| DEBUG", line)
        assert "ytnorm.normalizer" in line

    def test_sink_output_is_uncolored(self) -> None:
        """Explicit sinks get plain text."""
        sink = StringIO()
        configure_logging(sink=sink)
        logger.info("batch saved")
        assert "\x1b[" not in sink.getvalue()
        assert "INFO    | batch saved" in sink.getvalue()

    def test_reconfigure_replaces_handler(self) -> None:
        """A second call does not duplicate output."""
        first = StringIO()
        second = StringIO()
        configure_logging(sink=first)
        configure_logging(sink=second)
        logger.info("once")
        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1

    def test_returns_handler_id(self) -> None:
        """The returned id removes the handler."""
        sink = StringIO()
        handler_id = configure_logging(sink=sink)
        logger.remove(handler_id)
        logger.warning("dropped")
        assert sink.getvalue() == ""
