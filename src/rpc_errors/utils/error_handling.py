"""Error handling helpers shared by the catalog loaders."""

import functools
import logging
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_filesystem_errors(
    operation: str,
    *,
    logger_instance: Optional[logging.Logger] = None,
) -> Callable:
    """
    Decorator that logs filesystem errors with operation context.

    The original exception is always re-raised unchanged; anything that is
    not an ``OSError`` passes through without being logged here.

    Args:
        operation: Description of the operation (e.g., "load error catalog")
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        Decorator function
    """
    log = logger_instance or logger

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except PermissionError as e:
                log.error(f"Permission denied during {operation}: {e}")
                raise
            except FileNotFoundError as e:
                log.error(f"File not found during {operation}: {e}")
                raise
            except OSError as e:
                log.error(f"OS error during {operation}: {e}")
                raise

        return wrapper

    return decorator
