"""
Centralized Logging Configuration for Cardstack

Provides consistent logging setup across the application with:
- Human-readable format for development
- Optional JSON-like line format for log shippers
- Optional file rotation when a log directory is configured
"""

import os
import logging
import logging.handlers
from typing import Optional

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(module)s", "message": "%(message)s"}'


def setup_logging(
    logger: logging.Logger,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure a logger with a console handler and, optionally, a rotating file.

    Args:
        logger: Logger to configure (usually ``app.logger``)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files; no file handler when omitted
        json_format: Use JSON format for structured logging

    Returns:
        The configured logger
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(JSON_FORMAT if json_format else CONSOLE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, 'cardstack.log'),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s", log_level, log_dir or '<console>')

    return logger
