# Area: Shared
"""
Shared utilities used by the console and the CLI.

This package contains:
- Logging configuration
- Help table rendering
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_fatal_error,
)
from .table import HelpTableRenderer

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "log_fatal_error",
    "HelpTableRenderer",
]
