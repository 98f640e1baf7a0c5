# barbershop_booking/logger.py

import inspect
import logging
import sys

from loguru import logger

from barbershop_booking.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# stdlib loggers that would drown out booking events
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "passlib")


class StdlibBridge(logging.Handler):
    """Forwards uvicorn/sqlalchemy records to loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = settings.LOG_LEVEL, error_file: str = settings.LOG_FILE):
    logger.remove()
    logger.add(sys.stdout, level=level, format=CONSOLE_FORMAT)

    if error_file:
        logger.add(
            error_file,
            level="ERROR",
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="1 month",
            compression="zip",
        )

    logging.basicConfig(handlers=[StdlibBridge()], level=0, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["logger", "setup_logging"]
