"""Utility decorators for common functionality."""

import functools
import time
from typing import Callable, Any, Tuple, Type
from utils.logging import get_logger

logger = get_logger(__name__)


def timer(func: Callable) -> Callable:
    """Decorator to time function execution and log results."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            logger.debug(f"{func.__name__} took {time.perf_counter() - start:.4f} seconds")
    return wrapper


def retry(
    max_attempts: int = 3,
    delay: float = 1.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
):
    """Decorator to retry function on failure with logging.

    Only the listed ``exceptions`` trigger a retry; anything else propagates
    immediately. The last failure is re-raised once attempts are exhausted.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt < max_attempts - 1:
                        logger.warning(f"Attempt {attempt + 1} failed for {func.__name__}: {e}. Retrying in {delay}s...")
                        time.sleep(delay)
                    else:
                        logger.error(f"All {max_attempts} attempts failed for {func.__name__}")
                        raise
        return wrapper
    return decorator
