import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from . import settings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024


def setup_logger(
    name: str = None, log_level: int | str = logging.INFO, log_dir: Path | None = None
) -> logging.Logger:
    """
    Configures `name` to log plain messages to stdout and timestamped records to
    `<log_dir>/app.log`. A logger that already has handlers only gets its level updated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir) if log_dir is not None else settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers = [
        (logging.StreamHandler(sys.stdout), logging.Formatter("%(message)s")),
        (
            RotatingFileHandler(
                log_dir / "app.log", maxBytes=MAX_LOG_BYTES, backupCount=3, encoding="utf-8"
            ),
            logging.Formatter(FILE_FORMAT),
        ),
    ]
    for handler, formatter in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
