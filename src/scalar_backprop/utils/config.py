"""
Global configuration flags.
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SBConfig:
    debug: bool = False

    @classmethod
    def from_env(cls) -> "SBConfig":
        flag = os.getenv("SCALAR_BACKPROP_DEBUG", "")
        return cls(debug=flag.strip().lower() in _TRUTHY)


config = SBConfig.from_env()
