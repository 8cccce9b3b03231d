"""
Utility functions for the Tinify relay.
"""
from tinifier.utils.metrics import (
    calculate_savings,
    PerformanceTimer
)

__all__ = [
    'calculate_savings',
    'PerformanceTimer'
]
