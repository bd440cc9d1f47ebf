"""Logging configuration for the application.

``setup_logging`` attaches a console handler to the root logger and, when a
log file is configured, a combined file plus an error-only file next to it.
It is a no-op once the root logger has handlers, so creating the app
repeatedly in tests does not duplicate output.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def error_log_path(logfile: str) -> Path:
    """``logs/combined.log`` -> ``logs/combined.error.log``."""
    path = Path(logfile)
    return path.with_name(f"{path.stem}.error{path.suffix or '.log'}")


def _file_handler(path: Path, formatter: logging.Formatter, level: int) -> logging.Handler:
    path = path.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str = "INFO",
    logfile: str | None = None,
    error_logfile: str | None = None,
) -> None:
    """Configure the root logger.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
            Unknown names fall back to INFO.
        logfile: Optional path of a file that receives the same records as
            the console, resolved relative to the working directory.
        error_logfile: File that receives ERROR records only. Defaults to
            ``error_log_path(logfile)`` when ``logfile`` is set.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        root.addHandler(_file_handler(Path(logfile), formatter, logging.NOTSET))
        if error_logfile is None:
            error_logfile = str(error_log_path(logfile))

    if error_logfile:
        root.addHandler(_file_handler(Path(error_logfile), formatter, logging.ERROR))
