import logging
import sys
from typing import Callable

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LEVELS = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _routing_filter(max_level: int) -> Callable[[logging.LogRecord], bool]:
    def _filter(record: logging.LogRecord) -> bool:
        return record.levelno <= max_level
    return _filter


def _build_logger() -> logging.Logger:
    # Parent of the retouch.* module loggers, so core DEBUG lines share these handlers.
    logger = logging.getLogger("retouch")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    fmt = logging.Formatter("[%(levelname)s] %(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(fmt)
    stdout_handler.addFilter(_routing_filter(logging.INFO))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(fmt)
    stderr_handler.setLevel(logging.WARNING)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger


_LOGGER = _build_logger()


def resolve_log_level(level: str) -> int:
    return LEVELS.get(str(level or "").strip().lower(), logging.INFO)


def set_log_level(level: str) -> None:
    """Set logger level based on config/CLI string; unknown names fall back to INFO."""
    _LOGGER.setLevel(resolve_log_level(level))


def is_trace_enabled() -> bool:
    return _LOGGER.isEnabledFor(TRACE_LEVEL)


def log_trace(message: str) -> None:
    _LOGGER.log(TRACE_LEVEL, message)


def log_debug(message: str) -> None:
    _LOGGER.debug(message)


def log_trace_block(title: str, body: str) -> None:
    """Log a multi-line block at TRACE level with consistent framing."""
    if not is_trace_enabled():
        return
    log_trace(f"{title} BEGIN")
    for line in (body or "").splitlines() or [""]:
        log_trace(line)
    log_trace(f"{title} END")
