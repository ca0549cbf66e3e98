import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def setup_logging(level: Union[str, int] = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the citemark logger and return it.

    Records are handled by the package handler only and do not propagate
    to the root logger.

    Parameters
    ----------
    level:
        Level name (e.g., "INFO", "DEBUG") or numeric level. Unknown names
        fall back to INFO.
    log_file:
        Optional path for log output; parent directories are created.
        When not provided, logs go to stderr.
    """

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler: logging.Handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("citemark")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
