# utils/logging_setup.py
"""Run-level logging lifecycle.

The run owner (CLI, API server, pytest plugin) calls configure_logging() once,
passes the returned logger to the components it builds, and calls
shutdown_logging() when the run ends.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'storefront_harness'
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
_HANDLER_MARK = '_storefront_harness_handler'


def configure_logging(level: str = 'INFO', log_dir: Optional[str] = 'logs') -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if any(getattr(h, _HANDLER_MARK, False) for h in logger.handlers):
        return logger
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler()]
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(Path(log_dir) / f"test-log-{datetime.now():%Y%m%d}.txt", encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    logger.info("Logging configured")
    return logger


def shutdown_logging(logger: Optional[logging.Logger] = None) -> None:
    logger = logger or logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            handler.flush()
            handler.close()
            logger.removeHandler(handler)
