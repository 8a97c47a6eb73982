"""Timing utilities for performance monitoring."""
import time
from functools import wraps
from typing import Callable
from mgnrega.utils.logging import log_structured


def time_function(func: Callable) -> Callable:
    """Decorator to time function execution."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start

        log_structured(
            "debug",
            f"Function {func.__name__} executed",
            function=func.__name__,
            elapsed_seconds=round(elapsed, 4)
        )

        return result
    return wrapper


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, operation: str, quiet: bool = False):
        """
        Initialize timer.

        Args:
            operation: Name of the operation being timed
            quiet: Only measure, do not log on exit
        """
        self.operation = operation
        self.quiet = quiet
        self.start = None
        self.elapsed = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
        if not self.quiet:
            log_structured(
                "debug",
                f"Operation {self.operation} completed",
                operation=self.operation,
                elapsed_seconds=round(self.elapsed, 4)
            )
