"""Utility modules for primekit."""

from primekit.utils.config import EngineConfig
from primekit.utils.log import setup_logger

__all__ = [
    "EngineConfig",
    "setup_logger",
]
