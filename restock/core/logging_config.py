# restock/core/logging_config.py
"""
Centralized logging configuration for the restock bot.

Keeps the bot's stage-tagged lines visible while quieting the HTTP client
and scheduler libraries.
"""

import logging
import os
from typing import Optional


def configure_logging(log_level: Optional[str] = None):
    """
    Configure logging for the bot.

    Sets appropriate log levels for different modules:
    - Bot code: INFO (or whatever LOG_LEVEL says)
    - HTTP clients (httpx, httpcore): WARNING only
    - APScheduler: WARNING only
    """
    log_level = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP client loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Scheduler logs every job execution at INFO
    logging.getLogger("apscheduler").setLevel(logging.WARNING)

    logging.getLogger("restock").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured at level: {log_level}")
