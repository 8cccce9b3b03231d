"""
Utilities for compression size metrics and timing.
"""
import math
import time


def calculate_savings(original_size: int, compressed_size: int) -> int:
    """
    Percentage of bytes saved by compression, rounded half up.

    Args:
        original_size: Size of the uploaded image in bytes
        compressed_size: Size of the compressed image in bytes

    Returns:
        Whole-number percentage; negative when the output grew
    """
    if original_size <= 0:
        return 0
    return math.floor((1 - compressed_size / original_size) * 100 + 0.5)


class PerformanceTimer:
    """
    Context manager for measuring execution time.

    Example:
        with PerformanceTimer() as timer:
            # Code to measure
        execution_time = timer.execution_time
    """

    def __init__(self):
        self.start_time = None
        self.execution_time = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.execution_time = time.perf_counter() - self.start_time
        return False  # Don't suppress exceptions
