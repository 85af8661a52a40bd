import logging
import sys
from typing import Optional

from src.const import LOG_DATE_FORMAT, LOG_FORMAT
from .config import Config


class LoggingManager:
    """Manager for logging setup and logger retrieval."""

    _handler: Optional[logging.Handler] = None

    @classmethod
    def setup_logging(cls, level: str = "INFO", config: Optional[Config] = None) -> None:
        """Route log records to stderr; report text owns stdout.

        Calling this again replaces the handler installed by the previous call,
        so running several reports in one process does not duplicate records.

        Args:
            level: Logging level name; unknown names fall back to INFO
            config: Settings holding per-library log levels
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler.setLevel(numeric_level)

        root_logger = logging.getLogger()
        if cls._handler is not None:
            root_logger.removeHandler(cls._handler)
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(handler)
        cls._handler = handler

        # Quiet chatty libraries independently of the report level
        config = config or Config()
        for logger_name, library_level in config.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(getattr(logging, library_level.upper(), logging.WARNING))

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name, typically __name__

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
