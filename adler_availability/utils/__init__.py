"""
Utility modules.
"""

from .logger import get_logger, setup_logger, AvailabilityLogger

__all__ = [
    "get_logger",
    "setup_logger",
    "AvailabilityLogger",
]
