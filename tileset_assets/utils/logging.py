"""Logging configuration for the inspect-tileset command."""
import logging
import sys
from pathlib import Path
from datetime import datetime

PACKAGE_LOGGER = 'tileset_assets'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def reset_logging() -> None:
    """Detach and close every handler installed on the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()


def setup_logging(log_dir: str, log_level: int = logging.INFO) -> Path:
    """Send tileset_assets log records to a log file and stderr.

    Handlers go on the package logger rather than the root logger, so host
    applications keep their own handlers. Calling this again replaces the
    handlers of the previous call and closes its log file.

    Args:
        log_dir: Directory for the timestamped log file
        log_level: Logging level (default: INFO)

    Returns:
        Path of the new log file
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    reset_logging()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_path / f'tileset_assets_{timestamp}.log'

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    for handler in (file_handler, console_handler):
        handler.setLevel(log_level)
        package_logger.addHandler(handler)

    package_logger.debug(f"Writing {logging.getLevelName(log_level)} log to {log_file}")
    return log_file
