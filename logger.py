"""
Logging setup for the job board.

Console output always, plus a daily log file when LOG_DIR is configured.
Modules log through ``logging.getLogger(__name__)``; this only wires the
handlers onto the root logger once per process.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_HANDLER_MARK = "_jobboard_handler"


def _mark(handler):
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(level="INFO", log_dir=None):
    """
    Attach console (and optional file) handlers to the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files; None disables file output

    Returns:
        The root logger
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Drop handlers from an earlier call so app factories can be re-run
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    console_handler = _mark(logging.StreamHandler(sys.stdout))
    console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"jobboard_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = _mark(logging.FileHandler(log_file, encoding='utf-8'))
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

    return root
