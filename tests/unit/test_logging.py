#!/usr/bin/env python3
"""Tests for logging setup."""

import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import structlog

from promptis.config import PromptisConfig
from promptis.logging import get_logger, setup_logging

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestSetupLogging:
    """Test structlog configuration."""

    def _configure(self, **settings):
        config = PromptisConfig(_env_file=None, **settings)
        with (
            patch("promptis.logging.logging.basicConfig") as mock_basic,
            patch("promptis.logging.structlog.configure") as mock_configure,
        ):
            setup_logging(config)
        return mock_basic, mock_configure

    def test_console_format(self):
        _, mock_configure = self._configure(PROMPTIS_LOG_FORMAT="console")

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert structlog.stdlib.add_log_level in processors

    def test_json_format(self):
        _, mock_configure = self._configure(PROMPTIS_LOG_FORMAT="json")

        kwargs = mock_configure.call_args.kwargs
        assert isinstance(kwargs["processors"][-1], structlog.processors.JSONRenderer)
        assert kwargs["wrapper_class"] is structlog.stdlib.BoundLogger

    def test_level_and_stream(self):
        mock_basic, _ = self._configure(PROMPTIS_LOG_LEVEL="debug")

        kwargs = mock_basic.call_args.kwargs
        assert kwargs["level"] == 10
        assert kwargs["stream"] is sys.stderr

    def test_uses_global_config_by_default(self, monkeypatch):
        monkeypatch.setenv("PROMPTIS_LOG_LEVEL", "ERROR")

        with (
            patch("promptis.logging.logging.basicConfig") as mock_basic,
            patch("promptis.logging.structlog.configure"),
        ):
            setup_logging()

        assert mock_basic.call_args.kwargs["level"] == 40


class TestGetLogger:
    """Test get_logger."""

    def test_does_not_configure_logging(self):
        with patch("promptis.logging.setup_logging") as mock_setup:
            get_logger("promptis.test")

        mock_setup.assert_not_called()


class TestImportSideEffects:
    """Importing promptis must leave the host's logging alone."""

    def test_import_leaves_logging_untouched(self):
        code = (
            "import logging, structlog, promptis\n"
            "print(len(logging.getLogger().handlers))\n"
            "print(structlog.is_configured())\n"
        )
        env = dict(os.environ, PROMPTIS_LOG_LEVEL="verbose")
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")])
        )

        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            cwd=PROJECT_ROOT,
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout.split() == ["0", "False"]
