"""Tests for dirlisting.logging_config — opt-in file logging."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from dirlisting.logging_config import setup_logger


class TestSetupLogger:

    def test_console_only_without_log_dir(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        logger = setup_logger("test.console_only", "console.log")
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_file_handler_with_log_dir(self, monkeypatch, tmp_path: Path):
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("LOG_DIR", str(log_dir))
        logger = setup_logger("test.with_file", "listing.log")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in (log_dir / "listing.log").read_text(encoding="utf-8")

    def test_configured_once(self, monkeypatch):
        monkeypatch.delenv("LOG_DIR", raising=False)
        first = setup_logger("test.once", "once.log")
        count = len(first.handlers)
        assert setup_logger("test.once", "once.log") is first
        assert len(first.handlers) == count

    def test_middleware_logs_under_package_logger(self):
        from dirlisting import middleware

        assert middleware.logger.name == "dirlisting.middleware"


class TestImportSideEffects:

    def test_import_creates_no_log_dir(self, tmp_path: Path):
        backend = Path(__file__).resolve().parents[1]
        env = {"LOG_DIR": str(tmp_path / "logs"), "PYTHONPATH": str(backend)}
        subprocess.run(
            [sys.executable, "-c", "import dirlisting, dirlisting.middleware"],
            check=True, env=env, cwd=tmp_path,
        )
        assert not (tmp_path / "logs").exists()
