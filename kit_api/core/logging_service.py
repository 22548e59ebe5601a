# kit_api/core/logging_service.py
"""
Logging setup: colour console output plus a rotating log file.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from .interfaces import IConfigProvider


class ColorFormatter(logging.Formatter):
    """
    One line per record: time, level emoji, level, logger, message.
    ANSI colours only when stderr is a terminal.
    """

    _STYLES = {
        logging.DEBUG: ("\x1b[38;5;244m", "🐛"),  # gray
        logging.INFO: ("\x1b[32;20m", "ℹ️"),  # green
        logging.WARNING: ("\x1b[33;20m", "⚠️"),  # yellow
        logging.ERROR: ("\x1b[31;20m", "🛑"),  # red
        logging.CRITICAL: ("\x1b[31;1m", "💥"),  # red bold
    }
    _RESET = "\x1b[0m"

    def __init__(self, use_color: Optional[bool] = None):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        if use_color is None:
            use_color = sys.stderr.isatty()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color, emoji = self._STYLES.get(record.levelno, ("", ""))

        line = (
            f"{self.formatTime(record, self.datefmt)} {emoji} "
            f"{record.levelname:<8} {record.name}: {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        if not self.use_color:
            return line
        return f"{color}{line}{self._RESET}"


def configure_logging(config: IConfigProvider) -> str:
    """Install console and file handlers on the root logger; returns the log file path"""
    try:
        logs_dir = config.get("LOG_DIR")
        os.makedirs(logs_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        filename = os.path.join(logs_dir, f"api_{timestamp}.log")

        file_handler = RotatingFileHandler(
            filename=filename,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(levelname)-8s | [%(name)s] | %(module)s:%(lineno)d\n"
                "→ %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.get("LOG_LEVEL", "INFO"))
        console_handler.setFormatter(ColorFormatter())

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        for h in list(root_logger.handlers):
            root_logger.removeHandler(h)
        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        # Quiet verbose libraries
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    except OSError as e:
        raise RuntimeError(f"Failed to configure logging: {e}") from e

    logging.getLogger(__name__).info(
        f"🚀 Logging configured\n"
        f"   Environment: {config.get('ENV').upper()}\n"
        f"   Log File: {filename}"
    )
    return filename
