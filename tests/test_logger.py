"""
Tests for logger.py - handler wiring.
"""

import logging

import pytest

from logger import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfigureLogging:

    def test_console_only_by_default(self):
        root = configure_logging("DEBUG")
        assert root.level == logging.DEBUG
        ours = [h for h in root.handlers if getattr(h, "_jobboard_handler", False)]
        assert len(ours) == 1
        assert isinstance(ours[0], logging.StreamHandler)

    def test_file_output(self, tmp_path):
        configure_logging("INFO", tmp_path / "logs")
        logging.getLogger("jobs").info("Posted job 1")

        log_files = list((tmp_path / "logs").glob("jobboard_*.log"))
        assert len(log_files) == 1
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Posted job 1" in log_files[0].read_text(encoding="utf-8")

    def test_reconfigure_does_not_duplicate_handlers(self, tmp_path):
        configure_logging("INFO", tmp_path)
        root = configure_logging("INFO", tmp_path)
        ours = [h for h in root.handlers if getattr(h, "_jobboard_handler", False)]
        assert len(ours) == 2

    def test_unknown_level_falls_back_to_info(self):
        assert configure_logging("chatty").level == logging.INFO
