"""Levelled console logging with an optional mirror to a log file."""

from __future__ import annotations

import enum
import sys
from typing import IO, Iterable, Optional, Sequence

_RESET = "\033[0m"


class LogLevel(enum.Enum):
    """Severity of a log message; the value is the tag printed in brackets."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    DEBUG = "DEBUG"

    @property
    def tag(self) -> str:
        return f"[{self.value}] "

    @property
    def color(self) -> str:
        return _COLORS[self]


_COLORS = {
    LogLevel.INFO: "\033[37m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[91m",
    LogLevel.DEBUG: "\033[94m",
}


class Logger:
    """Writes tagged messages to a console stream and, once opened, a log file."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream
        self._file: Optional[IO[str]] = None

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def logging_to_file(self) -> bool:
        return self._file is not None and not self._file.closed

    def init(self, log_file_path: str = "") -> None:
        """Start mirroring messages to ``log_file_path``, truncating it.

        An empty path leaves file logging off.
        """
        if not log_file_path:
            return
        self.shutdown()
        try:
            self._file = open(log_file_path, "w", encoding="utf-8")
        except OSError:
            self._file = None

    def shutdown(self) -> None:
        """Close the log file, if one is open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)

    def log(self, message: str, level: LogLevel) -> None:
        """Write one message at ``level`` to the console and the log file."""
        stream = self.stream
        isatty = getattr(stream, "isatty", None)
        if isatty is not None and isatty():
            stream.write(f"{level.color}{level.tag}{message}{_RESET}\n")
        else:
            stream.write(f"{level.tag}{message}\n")
        stream.flush()

        if self.logging_to_file:
            assert self._file is not None
            self._file.write(f"{level.tag}{message}\n")
            self._file.flush()


logger = Logger()


def _format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    rows = [list(map(float, row)) for row in matrix]
    columns: Iterable[Sequence[float]] = zip(*rows)
    body = ", ".join(
        "(" + ", ".join(f"{value:f}" for value in column) + ")" for column in columns
    )
    return f"mat4x4({body})"


def log_matrices(model, view, proj) -> None:
    """Log model, view and projection matrices column by column."""
    logger.info("Model:\n" + _format_matrix(model))
    logger.info("View:\n" + _format_matrix(view))
    logger.info("Proj:\n" + _format_matrix(proj))