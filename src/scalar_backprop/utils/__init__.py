"""
Miscellaneous utilities shared across scalar-backprop.
"""

from .logging import get_logger, logger
from .config import config

__all__ = ["logger", "get_logger", "config"]
