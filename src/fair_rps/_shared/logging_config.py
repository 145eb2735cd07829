# Area: Shared
"""
fair_rps._shared.logging_config - Structured logging setup
==========================================================

Configures dual logging: terminal (colored, stderr) + optional file (JSON).
Provides fatal error logging and termination functions.
Terminal logs go to stderr so they never interleave with the game's
prompts on stdout.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn, Optional, Union

if TYPE_CHECKING:
    from ..errors import FairRPSError

# Package logger
logger = logging.getLogger("fair_rps")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, *args, color: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        if not self.color:
            return super().format(record)
        original = record.levelname
        color = self.COLORS.get(original, self.RESET)
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        error_type = getattr(record, "error_type", None)
        if error_type:
            log_data["error_type"] = error_type
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def parse_level(level: Union[int, str]) -> int:
    """Accept a logging level as an int or a name like 'info'."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(
    log_file_path: Optional[str] = None,
    level: Union[int, str] = logging.WARNING,
    color: bool = True,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON-lines log file. No file handler when omitted.
    level : int or str
        Logging level. Defaults to WARNING.
    color : bool
        Colorize level names on the terminal.
    """
    level = parse_level(level)

    pkg_logger = logging.getLogger("fair_rps")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
        color=color,
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_fatal_error(error: "FairRPSError") -> None:
    """
    Log a fatal error in the structured format.

    Parameters
    ----------
    error : FairRPSError
        The error to log.
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"Fatal error: {error}",
        extra={"error_type": error.error_type},
    )


def log_and_terminate(error: "FairRPSError", exit_code: int = 1) -> NoReturn:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : FairRPSError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_fatal_error(error)
    logger.critical("Process terminated due to fatal error")
    sys.exit(exit_code)
