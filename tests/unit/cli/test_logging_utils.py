"""Unit tests for CLI logging setup."""

import logging

import pytest

from present2pdf.logging_utils import NOISY_LOGGERS, configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy.items():
        logging.getLogger(name).setLevel(noisy_level)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigureLogging:
    def test_level_by_name(self):
        root = configure_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("chardet").level == logging.WARNING

    def test_unknown_level_name(self):
        assert configure_logging("chatty").level == logging.INFO

    def test_numeric_level(self):
        assert configure_logging(logging.ERROR).level == logging.ERROR
        assert logging.getLogger("PIL").level == logging.ERROR

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "run.log"
        root = configure_logging("INFO", log_file=str(log_file))
        assert len(root.handlers) == 2
        logging.getLogger("present2pdf.test").info("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unopenable_log_file(self, temp_dir, capsys):
        root = configure_logging("INFO", log_file=str(temp_dir / "missing" / "run.log"))
        assert len(root.handlers) == 1
        assert "cannot open log file" in capsys.readouterr().err

    def test_trace_format(self):
        root = configure_logging("INFO", trace_mode=True)
        assert "%(name)s" in root.handlers[0].formatter._fmt
