"""Adapters that put different log sinks behind a single ``log(message)`` call."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class AppLogger(Protocol):
    def log(self, message: str) -> None: ...


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class ExternalLogger:
    """Stand-in for a third-party logging client with its own method names."""

    def __init__(self, name: str = "taskhub.external") -> None:
        self._logger = logging.getLogger(name)

    def write(self, msg: str) -> None:
        self._logger.info("[External] %s", msg)

    def write_with_level(self, level: str, msg: str) -> None:
        self._logger.log(
            logging.getLevelName(level.upper()),
            "[External:%s] %s",
            level.upper(),
            msg,
        )

    def write_to_file(self, filename: str, msg: str) -> None:
        self._logger.info("[External:FILE:%s] %s", filename, msg)


class LoggerAdapter:
    def __init__(self, external: ExternalLogger | None = None) -> None:
        self._external = external or ExternalLogger()

    def log(self, message: str) -> None:
        self._external.write(message)

    def log_with_level(self, level: str, message: str) -> None:
        if level not in {"info", "warn", "warning", "error"}:
            raise ValueError(f"Unsupported log level: {level}")
        self._external.write_with_level("warning" if level == "warn" else level, message)

    def log_to_file(self, filename: str, message: str) -> None:
        self._external.write_to_file(filename, message)


class ConsoleLoggerAdapter:
    def __init__(self, name: str = "taskhub.console") -> None:
        self._logger = logging.getLogger(name)

    def log(self, message: str) -> None:
        self._logger.info("[Console] %s: %s", _timestamp(), message)


class FileLoggerAdapter:
    def __init__(self, path: str | Path = "app.log") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def set_log_file(self, path: str | Path) -> None:
        self._path = Path(path)

    def log(self, message: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(f"{_timestamp()}: {message}\n")
        except OSError:
            logger.exception("File logging to %s failed", self._path)
