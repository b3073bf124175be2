"""
Package logger.

Library code only ever logs through `logger` (or a child from `get_logger`);
handlers and levels are left to the application.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("scalar_backprop")
logger.addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logger
    return logger.getChild(name)
