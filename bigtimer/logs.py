"""Logging configuration.

curses owns the terminal while the timer runs, so records go to a file in the
config directory instead of stderr. Without ``BIGTIMER_LOG_LEVEL`` nothing is
written and no file is created.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .config import get_config_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV = "BIGTIMER_LOG_LEVEL"


def get_log_path() -> Path:
    return get_config_dir() / "bigtimer.log"


def setup_logging(path: Optional[Path] = None) -> None:
    level_name = os.getenv(LEVEL_ENV)
    if not level_name:
        logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)
        return

    level = getattr(logging, level_name.upper(), logging.WARNING)
    if path is None:
        path = get_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=level, handlers=[handler], force=True)
