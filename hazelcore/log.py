"""Engine ("HAZEL") and client ("APP") loggers writing to stdout and a file."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"

_TIME_FORMAT = "%H:%M:%S"

_LEVEL_NAMES = {
    TRACE: "trace",
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "critical",
}

_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33;1m",
    logging.ERROR: "\033[31;1m",
    logging.CRITICAL: "\033[1;41m",
}
_RESET = "\033[0m"

_loggers: dict[str, logging.Logger] = {}


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, colored: bool) -> None:
        super().__init__("[%(asctime)s] %(name)s: %(message)s", _TIME_FORMAT)
        self._colored = colored

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._colored:
            return text
        return f"{_COLORS.get(record.levelno, '')}{text}{_RESET}"


class _FileFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(asctime)s] [%(level)s] %(name)s: %(message)s", _TIME_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.level = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return super().format(record)


def init(log_file="Hazel.log") -> None:
    """Set up both loggers; the log file is truncated."""
    stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    colored = bool(isatty and isatty())

    console = logging.StreamHandler(stream)
    console.setFormatter(_ConsoleFormatter(colored))
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setFormatter(_FileFormatter())

    for name in (CORE_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.addHandler(console)
        logger.addHandler(file_handler)
        logger.setLevel(TRACE)
        logger.propagate = False
        _loggers[name] = logger


def _get(name: str) -> logging.Logger:
    try:
        return _loggers[name]
    except KeyError:
        raise RuntimeError("logging is not initialised; call init() first") from None


def core_logger() -> logging.Logger:
    """The engine's logger."""
    return _get(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The application's logger."""
    return _get(CLIENT_LOGGER_NAME)