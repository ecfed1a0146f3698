import logging
import sys
from typing import Optional


class _BelowLevelFilter(logging.Filter):
    """Let through only records strictly below a threshold level."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self._threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._threshold


def _stream_handler(stream, level: int, formatter: logging.Formatter) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream=stream)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_split_stream_logging(
    *,
    level: int = logging.INFO,
    stderr_level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Route log records to stdout or stderr by level.

    Records below ``stderr_level`` go to stdout, the rest to stderr, so that
    check reports written to stdout can be piped while problems stay visible.
    Handlers previously attached to the target logger are replaced.
    """

    target = logging.getLogger(logger_name)
    for handler in list(target.handlers):
        target.removeHandler(handler)
    target.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stderr_level = max(stderr_level, logging.DEBUG)

    stdout_handler = _stream_handler(sys.stdout, logging.DEBUG, formatter)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))
    target.addHandler(stdout_handler)
    target.addHandler(_stream_handler(sys.stderr, stderr_level, formatter))

    return target
