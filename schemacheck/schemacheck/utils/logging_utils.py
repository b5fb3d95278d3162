import logging
import sys
from typing import Optional, TextIO

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class _BelowLevelFilter(logging.Filter):
    def __init__(self, limit: int) -> None:
        super().__init__()
        self._limit = limit

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self._limit


def configure_cli_logging(
    level_name: str = "WARNING",
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> None:
    """Route checker logs to the terminal.

    Records below WARNING go to stdout, WARNING and above to stderr. Rejection
    reasons are logged at DEBUG by the validators, so ``level_name="DEBUG"``
    explains every False result.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'. Expected one of {LOG_LEVELS}")

    formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    out_handler = logging.StreamHandler(stream=stdout or sys.stdout)
    out_handler.addFilter(_BelowLevelFilter(logging.WARNING))
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(stream=stderr or sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(out_handler)
    root.addHandler(err_handler)
