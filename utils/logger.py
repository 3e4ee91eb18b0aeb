"""
Logging configuration with file rotation and automatic cleanup.
Rotates daily and keeps Config.LOG_RETENTION_DAYS worth of files.
"""
import os
import logging
from logging.handlers import TimedRotatingFileHandler
from datetime import datetime, timedelta
from pathlib import Path

from config import Config


ROOT_LOGGER_NAME = "coloring_book"
LOGS_DIR = Config.LOGS_DIR
os.makedirs(LOGS_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOGS_DIR, "coloring_book.log")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_RETENTION_DAYS = Config.LOG_RETENTION_DAYS


def cleanup_old_logs(directory: str, retention_days: int = LOG_RETENTION_DAYS) -> int:
    """Remove rotated log files older than retention_days. Returns how many were deleted."""
    log_dir = Path(directory)
    if not log_dir.exists():
        return 0

    cutoff = datetime.now() - timedelta(days=retention_days)
    prefix = f"{os.path.basename(LOG_FILE)}."
    deleted_count = 0

    for log_file in log_dir.glob(f"{prefix}*"):
        if not log_file.is_file():
            continue
        # Rotated files are suffixed with YYYY-MM-DD; anything else falls back to mtime
        try:
            file_date = datetime.strptime(log_file.name[len(prefix):], "%Y-%m-%d")
        except ValueError:
            file_date = datetime.fromtimestamp(log_file.stat().st_mtime)

        if file_date >= cutoff:
            continue
        try:
            log_file.unlink()
            deleted_count += 1
        except OSError as e:
            logging.getLogger(ROOT_LOGGER_NAME).error(f"Failed to delete log file {log_file.name}: {e}")

    return deleted_count


def setup_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Set up logger with file rotation and console output.

    Args:
        name: Logger name
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(level)

    file_handler = TimedRotatingFileHandler(
        LOG_FILE,
        when="midnight",
        interval=1,
        backupCount=LOG_RETENTION_DAYS,
        encoding="utf-8",
        utc=True
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", "%H:%M:%S")
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    deleted = cleanup_old_logs(LOGS_DIR, LOG_RETENTION_DAYS)
    if deleted:
        logger.info(f"Cleaned up {deleted} old log file(s)")

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (if None, returns the root application logger)

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


app_logger = setup_logger(ROOT_LOGGER_NAME, logging.INFO)
app_logger.info(f"Logging to {LOG_FILE} (retention: {LOG_RETENTION_DAYS} days)")
