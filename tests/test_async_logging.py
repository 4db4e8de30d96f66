"""
Test the queue based logging setup.

Verifies records reach the log file only through the queue listener and
that shutdown flushes and is safe to call twice.
"""

import logging
import logging.handlers

import pytest

from common.utils import async_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    async_logging.shutdown_async_logging()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestAsyncLogging:
    def test_records_written_to_file(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "cityoverview.log"
        async_logging.setup_async_logging(logging.DEBUG, str(log_file), console=False)

        logging.getLogger("ui.overview").info("Sorted overview by Gold")
        async_logging.shutdown_async_logging()

        content = log_file.read_text(encoding="utf-8")
        assert "Sorted overview by Gold" in content
        assert "ui.overview INFO" in content

    def test_level_filters_records(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "cityoverview.log"
        async_logging.setup_async_logging(logging.WARNING, str(log_file), console=False)

        logging.getLogger("test").info("hidden")
        logging.getLogger("test").warning("shown")
        async_logging.shutdown_async_logging()

        content = log_file.read_text(encoding="utf-8")
        assert "shown" in content
        assert "hidden" not in content

    def test_root_logger_uses_queue_handler(self, restore_root_logger):
        async_logging.setup_async_logging(logging.INFO, console=False)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.handlers.QueueHandler)

    def test_shutdown_is_idempotent(self, restore_root_logger):
        async_logging.setup_async_logging(logging.INFO, console=False)
        async_logging.shutdown_async_logging()
        async_logging.shutdown_async_logging()
        assert async_logging._queue_listener is None

    def test_rollover_permission_error_is_reported(self, tmp_path, monkeypatch, capsys):
        handler = async_logging.SafeRotatingFileHandler(str(tmp_path / "x.log"), maxBytes=10, backupCount=1)
        def locked(self):
            raise PermissionError("locked")

        monkeypatch.setattr(logging.handlers.RotatingFileHandler, "doRollover", locked)
        try:
            handler.doRollover()
        finally:
            handler.close()
        assert "Could not rotate log file" in capsys.readouterr().err
