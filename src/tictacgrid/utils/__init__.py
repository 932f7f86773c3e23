"""
Utilities - configuration and factories.
"""

from tictacgrid.utils.config import Config, DEFAULT_CONFIG
from tictacgrid.utils.factory import create_engine, result_message

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "create_engine",
    "result_message",
]
