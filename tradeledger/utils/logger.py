"""
Centralized logging configuration for Trade Ledger.

Provides structured logging with multiple handlers (console, file, JSON),
log rotation, and a dedicated trade activity log.
"""

import logging
import logging.handlers
import json
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict, Any

from tradeledger.journal.statistics import format_profit_factor

ROOT_LOGGER_NAME = "tradeledger"


@dataclass
class LogConfig:
    """Logging configuration settings."""

    level: str = "INFO"
    log_dir: str = "logs"
    console_enabled: bool = True
    file_enabled: bool = True
    json_enabled: bool = False
    max_bytes: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5
    format_string: str = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "extra_data"):
            log_data["data"] = getattr(record, "extra_data")

        return json.dumps(log_data, default=str)


class LedgerFormatter(logging.Formatter):
    """Console formatter with color support for ledger logs."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
        "RESET": "\033[0m",
    }

    ACTION_COLORS = {
        "ADD": "\033[32m",        # Green
        "DELETE": "\033[31m",     # Red
        "UPDATE": "\033[33m",     # Yellow
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        # Color a copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"

        message = record.getMessage()
        for action, action_color in self.ACTION_COLORS.items():
            if f"| {action} " in message:
                message = message.replace(
                    f"| {action} ",
                    f"| {action_color}{action}{self.COLORS['RESET']} "
                )
        record.msg = message
        record.args = ()

        return super().format(record)


class LedgerLogger:
    """
    Centralized logger for Trade Ledger.

    Features:
    - Multiple output handlers (console, file, JSON)
    - Log rotation
    - Trade activity log (one JSON line per ledger mutation)
    - Statistics logging
    """

    _instance: Optional['LedgerLogger'] = None
    _loggers: Dict[str, logging.Logger] = {}

    def __new__(cls, config: Optional[LogConfig] = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config: Optional[LogConfig] = None):
        # An explicit, different config reconfigures the shared instance
        if self._initialized and (config is None or config == self.config):
            return

        self.config = config or LogConfig()
        if self.config.file_enabled:
            self._setup_log_directory()
        self._setup_root_logger()
        self._initialized = True

    def _setup_log_directory(self) -> None:
        """Create log directory if it doesn't exist."""
        log_path = Path(self.config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        (log_path / "trades").mkdir(exist_ok=True)
        (log_path / "errors").mkdir(exist_ok=True)

    def _setup_root_logger(self) -> None:
        """Configure the package root logger with handlers."""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(getattr(logging, self.config.level.upper(), logging.INFO))
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        # Console handler
        if self.config.console_enabled:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(LedgerFormatter(
                fmt=self.config.format_string,
                datefmt=self.config.date_format,
                use_colors=True
            ))
            root_logger.addHandler(console_handler)

        if not self.config.file_enabled:
            return

        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            Path(self.config.log_dir) / "ledger.log",
            maxBytes=self.config.max_bytes,
            backupCount=self.config.backup_count
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt=self.config.format_string,
            datefmt=self.config.date_format
        ))
        root_logger.addHandler(file_handler)

        # JSON handler for structured logging
        if self.config.json_enabled:
            json_handler = logging.handlers.RotatingFileHandler(
                Path(self.config.log_dir) / "ledger.json",
                maxBytes=self.config.max_bytes,
                backupCount=self.config.backup_count
            )
            json_handler.setLevel(logging.INFO)
            json_handler.setFormatter(JsonFormatter())
            root_logger.addHandler(json_handler)

        # Error file handler
        error_handler = logging.handlers.RotatingFileHandler(
            Path(self.config.log_dir) / "errors" / "errors.log",
            maxBytes=self.config.max_bytes,
            backupCount=self.config.backup_count
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt=self.config.date_format
        ))
        root_logger.addHandler(error_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create a named logger."""
        prefix = f"{ROOT_LOGGER_NAME}."
        full_name = name if name.startswith(prefix) else f"{prefix}{name}"

        if full_name not in self._loggers:
            self._loggers[full_name] = logging.getLogger(full_name)

        return self._loggers[full_name]

    def log_mutation(self, action: str, record) -> None:
        """Log a ledger mutation and append it to the monthly activity file."""
        activity_logger = self.get_logger("activity")

        activity_logger.info(
            f"TRADE | {action} {record.direction.value} {record.size:g} {record.symbol} "
            f"@ {record.entry:.4f} -> {record.exit:.4f} | "
            f"Result: {record.result:+.2f} | ID: {record.id}"
        )

        if not self.config.file_enabled:
            return

        activity_file = Path(self.config.log_dir) / "trades" / f"ledger_{datetime.now():%Y%m}.jsonl"
        with open(activity_file, "a") as f:
            f.write(json.dumps({
                "timestamp": datetime.now().isoformat(),
                "action": action,
                "trade": record.to_dict(),
            }) + "\n")

    def log_stats(self, stats) -> None:
        """Log ledger summary statistics."""
        stats_logger = self.get_logger("stats")

        stats_logger.info(
            f"STATS | Trades: {stats.total_trades} | "
            f"Win Rate: {stats.win_rate:.1f}% | "
            f"Avg Win: {stats.avg_win:.2f} | Avg Loss: {stats.avg_loss:.2f} | "
            f"Profit Factor: {format_profit_factor(stats.profit_factor)}"
        )


# Module-level functions for convenience
_ledger_logger: Optional[LedgerLogger] = None


def setup_logging(config: Optional[LogConfig] = None) -> LedgerLogger:
    """
    Initialize the global logging system.

    Calling again with a different config replaces the handlers of the
    existing instance.
    """
    global _ledger_logger
    _ledger_logger = LedgerLogger(config)
    return _ledger_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger, initializing if necessary."""
    return get_ledger_logger().get_logger(name)


def get_ledger_logger() -> LedgerLogger:
    """Get the global LedgerLogger instance."""
    global _ledger_logger
    if _ledger_logger is None:
        _ledger_logger = LedgerLogger()
    return _ledger_logger
