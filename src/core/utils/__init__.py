"""
Shared utilities for logging setup and operation logging.
"""

from src.core.utils.logging import log_operation, setup_logging

__all__ = [
    "log_operation",
    "setup_logging",
]
