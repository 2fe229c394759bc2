from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO, Union

# Simple, centralized logging setup for the explorer.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)


def configure_logging(
    level: Union[str, int] = "WARNING",
    *,
    json: bool = False,
    logfile: str | Path | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure the root logger with a console handler + optional file handler.

    Standard output carries the rendered map, so console records go to
    standard error unless another stream is given.

    Args:
        level: Logging level name or int (e.g., "DEBUG", logging.INFO).
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File path to append logs; None disables file output.
        stream: Console stream (default: sys.stderr).
    """
    fmt = JSON_FORMAT if json else DEFAULT_FORMAT
    formatter = logging.Formatter(fmt)

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setFormatter(formatter)
    handlers.append(console)

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in handlers:
        root.addHandler(handler)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)


# Usage: from infra.logger import configure_logging, get_logger; configure_logging("DEBUG"); log = get_logger(__name__); log.info("ready")
