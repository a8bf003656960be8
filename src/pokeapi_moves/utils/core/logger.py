"""
Logging utilities for pokeapi_moves.

Provides:
- Per-module loggers using standard Python logging
- Colored console output
- Optional rotating file handlers (enabled when a log directory is configured)
- JSON structured logging support
- A context manager for operation tracking
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Global configuration (defaults, can be overridden via configure_logging_system)
LOG_DIR: Optional[Path] = None
LOG_LEVEL = "INFO"
LOG_FORMAT_JSON = False
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB in bytes
BACKUP_COUNT = 5
CONSOLE_COLORS = True

_CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging_system(config) -> None:
    """Apply ClientConfig logging settings to this module and every existing logger.

    Args:
        config: ClientConfig instance with logging settings
    """
    global LOG_DIR, LOG_LEVEL, LOG_FORMAT_JSON, MAX_LOG_SIZE, BACKUP_COUNT, CONSOLE_COLORS

    LOG_DIR = Path(config.logging_log_dir) if config.logging_log_dir else None
    LOG_LEVEL = config.logging_level.upper()
    LOG_FORMAT_JSON = config.logging_format == "json"
    MAX_LOG_SIZE = config.logging_max_log_size_mb * 1024 * 1024
    BACKUP_COUNT = config.logging_backup_count
    CONSOLE_COLORS = config.logging_console_colors

    # Loggers created before configuration keep their old handlers otherwise
    for logger_name in list(logging.Logger.manager.loggerDict.keys()):
        if not logger_name.startswith("pokeapi_moves"):
            continue
        logger_obj = logging.getLogger(logger_name)
        if logger_obj.handlers:
            for handler in list(logger_obj.handlers):
                handler.close()
                logger_obj.removeHandler(handler)
            setup_logger(logger_name)


# Attributes present on every LogRecord; anything else came in through `extra`
_STANDARD_LOG_RECORD_FIELDS = frozenset(
    logging.makeLogRecord({}).__dict__.keys() | {"message", "asctime", "taskName"}
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string.

        Args:
            record (logging.LogRecord): The log record to format.

        Returns:
            str: The formatted log record as a JSON string.
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOG_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so file handlers never see the escape codes
        record_copy = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record_copy.levelname, self.RESET)
        record_copy.levelname = f"{log_color}{record_copy.levelname}{self.RESET}"
        return super().format(record_copy)


def _console_formatter() -> logging.Formatter:
    if LOG_FORMAT_JSON:
        return JSONFormatter()
    if CONSOLE_COLORS:
        return ColoredConsoleFormatter(fmt=_CONSOLE_FORMAT, datefmt="%H:%M:%S")
    return logging.Formatter(fmt=_CONSOLE_FORMAT, datefmt="%H:%M:%S")


def _log_file_path(log_dir: Path, name: str, log_file: Optional[str]) -> Path:
    """Resolve the log file for a logger, mirroring the module path under log_dir."""
    if log_file is not None:
        file_path = log_dir / log_file
    else:
        parts = name.split(".")
        file_path = log_dir.joinpath(*parts[:-1], f"{parts[-1]}.log")
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Set up a logger with a console handler and, if LOG_DIR is set, a file handler.

    Args:
        name (str): Logger name (typically __name__ from calling module)
        level (Optional[str], optional): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to None.
        log_file (Optional[str], optional): Log file name relative to LOG_DIR. Defaults to None.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    log_dir = LOG_DIR
    wants_file = log_dir is not None

    if has_console and (has_file or not wants_file):
        return logger

    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(log_level)

    if not has_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(_console_formatter())
        logger.addHandler(console_handler)

    if log_dir is not None and not has_file:
        file_handler = RotatingFileHandler(
            _log_file_path(log_dir, name, log_file),
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        if LOG_FORMAT_JSON:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(fmt=_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the specified module.

    Args:
        name (str): The name of the logger (typically __name__ from the calling module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return setup_logger(name)


class LogContext:
    """Context manager for tracking operations with automatic success/failure logging."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
    ):
        """Initialize log context.

        Args:
            logger (logging.Logger): Logger instance to use
            operation (str): Description of the operation
            level (int, optional): Log level for success messages. Defaults to logging.INFO.
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log completion or failure; exceptions are never suppressed."""
        duration_ms = None
        if self.start_time is not None:
            duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation}",
                extra={"duration_ms": duration_ms},
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
                extra={"duration_ms": duration_ms},
            )

        return False
