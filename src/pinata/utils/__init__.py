"""Shared utilities for pinata."""

from pinata.utils.config import PinataConfig, load_config
from pinata.utils.console import console, get_console
from pinata.utils.logging import setup_logging

__all__ = [
    "PinataConfig",
    "console",
    "get_console",
    "load_config",
    "setup_logging",
]
