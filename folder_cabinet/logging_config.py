"""Centralized logging configuration for folder-cabinet."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from folder_cabinet.settings import CabinetSettings


def setup_logging(
    settings: CabinetSettings | None = None, log_file_prefix: str = "folder_cabinet"
) -> logging.Logger:
    """
    Configure logging for the application.

    Sets up console logging and, when enabled in the settings, a rotating
    log file that keeps at most 4 previous files.
    Only configures if not already configured to avoid duplicate handlers.

    Args:
        settings: Logging settings, read from the environment when omitted
        log_file_prefix: Prefix for the log file name (default: "folder_cabinet")

    Returns:
        Logger instance for the calling module
    """
    root_logger = logging.getLogger()

    # Only configure if not already configured (avoid duplicate handlers)
    if root_logger.handlers:
        return logging.getLogger(__name__)

    if settings is None:
        settings = CabinetSettings()
    level = logging.getLevelNamesMapping()[settings.log_level]

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = settings.log_dir / f"{log_file_prefix}.log"

        # 5MB per file, 4 backups
        file_handler = RotatingFileHandler(
            log_file,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=4,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    return logging.getLogger(__name__)
