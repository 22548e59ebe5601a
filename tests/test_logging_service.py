import logging
import os
import sys

import pytest

from kit_api.core.logging_service import ColorFormatter, configure_logging

from .conftest import make_config


def make_record(level=logging.WARNING, msg="disk %s", args=("low",)):
    return logging.LogRecord("kit_api.store", level, __file__, 10, msg, args, None)


class TestColorFormatter:
    def test_plain_single_line(self):
        line = ColorFormatter(use_color=False).format(make_record())

        assert "\n" not in line
        assert "\x1b[" not in line
        assert "⚠️ WARNING" in line
        assert line.endswith("kit_api.store: disk low")

    def test_colored_on_terminal(self):
        line = ColorFormatter(use_color=True).format(make_record(level=logging.ERROR))

        assert line.startswith("\x1b[31;20m")
        assert line.endswith("\x1b[0m")
        assert "🛑" in line

    def test_includes_traceback(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        text = ColorFormatter(use_color=False).format(record)

        assert "ValueError: boom" in text


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_configure_logging_writes_file(tmp_path, restore_root_logger):
    config = make_config(tmp_path, LOG_LEVEL="WARNING")

    filename = configure_logging(config)

    assert os.path.dirname(filename) == str(tmp_path / "logs")
    assert os.path.exists(filename)
    console = [
        h for h in restore_root_logger.handlers
        if isinstance(h.formatter, ColorFormatter)
    ]
    assert len(console) == 1
    assert console[0].level == logging.WARNING
    assert logging.getLogger("werkzeug").level == logging.WARNING
