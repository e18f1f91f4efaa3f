"""Logging configuration.

Everything logs under the ``slugcast`` logger. HTTP request lines go to its
``slugcast.web`` child so they can be silenced without hiding resolver and
store messages.
"""

import json
import logging
import sys
from typing import Optional


ROOT_LOGGER = "slugcast"
REQUEST_LOGGER = "slugcast.web"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    log_requests: bool = True,
) -> logging.Logger:
    """Configure the slugcast logger.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        json_format: Whether to emit JSON lines
        log_requests: Whether per-request lines are logged at INFO
        
    Returns:
        Configured logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric_level)
    for old_handler in logger.handlers:
        old_handler.close()
    logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Slower requests and server errors are logged at WARNING and stay visible
    request_logger = logging.getLogger(REQUEST_LOGGER)
    request_logger.setLevel(logging.NOTSET if log_requests else logging.WARNING)

    return logger
