"""Utility modules for dotconfig."""

from dotconfig.utils.logging_utils import setup_logging

__all__ = [
    "setup_logging",
]
