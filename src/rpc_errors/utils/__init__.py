"""Shared utility functions."""

from .error_handling import handle_filesystem_errors
from .formatting import sprintf
from .rich_logging import setup_logging

__all__ = [
    "handle_filesystem_errors",
    "sprintf",
    "setup_logging",
]
