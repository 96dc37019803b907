import logging
import os
from datetime import datetime
from pathlib import Path

LOG_DIR_ENV = "LEFTRONIC_LOG_DIR"
ROOT_NAMESPACE = "leftronic"

_LOGGERS = {}

_FORMATTER = logging.Formatter(
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def get_logger(name: str) -> logging.Logger:
    """
    Create or retrieve a named logger.

    Parameters:
    - name: logger namespace (e.g. api.dispatcher, client)

    Records propagate to the host application's handlers. A per-run log file
    is added only when LEFTRONIC_LOG_DIR points at a directory.
    """
    cache_key = f"{ROOT_NAMESPACE}.{name}"
    if cache_key in _LOGGERS:
        return _LOGGERS[cache_key]

    logger = logging.getLogger(cache_key)

    # ------------------------------
    # File handler (one per run)
    # ------------------------------
    log_dir = os.getenv(LOG_DIR_ENV)
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        logfile = path / f"leftronic-{timestamp}.log"

        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(_FORMATTER)
        logger.addHandler(file_handler)

    _LOGGERS[cache_key] = logger

    return logger


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the package root logger.
    Meant for entry points (leftronic-send), never called on import.
    """
    root = logging.getLogger(ROOT_NAMESPACE)
    if not any(getattr(h, "_leftronic_console", False) for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(_FORMATTER)
        console._leftronic_console = True
        root.addHandler(console)
    root.setLevel(level)
    return root
