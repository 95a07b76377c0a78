from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from taskhub.config import PROJECT_ROOT, Settings

LOG_FILE_NAME = "task_hub.log"


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(settings: Settings) -> Path:
    """Log to a rotating file under ``settings.log_dir`` and to the console.

    Returns the path of the log file.
    """
    log_file = PROJECT_ROOT / settings.log_dir / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = _build_formatter()
    handlers: list[logging.Handler] = [
        RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=settings.log_level.upper(), handlers=handlers)
    return log_file
