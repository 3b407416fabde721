"""
logging_setup.py - Logging configuration

Hosts call setup_logging() once at startup; library modules only create
their loggers and never configure handlers themselves. The level defaults
to SeatMapConfig.log_level (SEATMAP_LOG_LEVEL).

Handlers installed here are tagged, so calling setup_logging() again swaps
them out instead of stacking duplicates next to the host's own handlers.
"""

import json
import logging
import sys
from typing import List, Optional

from seatmap.config import SeatMapConfig, get_config

__all__ = ['setup_logging', 'JSONFormatter', 'LOG_FORMAT']

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_TAG = "_seatmap_handler"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record):
        data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data)


def _installed_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]


def _tagged(handler: logging.Handler, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: bool = False,
    config: Optional[SeatMapConfig] = None,
) -> List[logging.Handler]:
    """
    Configure seat map logging on the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to the
            configured log_level
        log_file: Optional log file path
        json_format: Use JSON format for logs
        config: Configuration to read the level from (defaults to get_config())

    Returns:
        The handlers now installed by seat map
    """
    if level is None:
        level = (config or get_config()).log_level
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        logging.getLogger("seatmap").warning(f"Unknown log level {level!r}, using INFO")
        log_level = logging.INFO

    formatter = JSONFormatter() if json_format else logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()

    for handler in _installed_handlers(root_logger):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)
    root_logger.addHandler(_tagged(logging.StreamHandler(sys.stdout), formatter, log_level))
    if log_file:
        root_logger.addHandler(_tagged(logging.FileHandler(log_file), formatter, log_level))

    return _installed_handlers(root_logger)
