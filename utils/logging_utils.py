"""
Copyright (c) 2025 Binary Core LLC. All rights reserved.

This file is part of RadioLens, a proprietary product of Binary Core LLC.
Unauthorized copying, modification, or distribution of this file,
via any medium, is strictly prohibited.

RadioLens Logging Utilities
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from core import config


def setup_logging(settings: config.Settings = None) -> None:
    """
    Setup centralized logging with rotation for the entire application.
    Falls back to the module-level settings when none are given.
    """
    settings = settings or config.settings
    level = getattr(logging, settings.log_level.upper())

    Path(settings.log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Main log file with everything
    log_file = os.path.join(settings.log_dir, "radiolens.log")
    time_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file,
        when=settings.log_rotation_interval,
        interval=1,
        backupCount=settings.log_rotation_count,
        encoding="utf-8",
    )
    time_handler.setLevel(level)
    time_handler.setFormatter(formatter)
    root_logger.addHandler(time_handler)

    # Errors only, for monitoring
    error_log_file = os.path.join(settings.log_dir, "radiolens_errors.log")
    error_handler = logging.handlers.RotatingFileHandler(
        filename=error_log_file,
        maxBytes=settings.log_max_bytes,
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("radiolens").setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.
    """
    return logging.getLogger(name)
