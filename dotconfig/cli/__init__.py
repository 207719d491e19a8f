"""Command-line interface."""

from dotconfig.cli.app import main
from dotconfig.cli.arguments import parse_arguments

__all__ = [
    "main",
    "parse_arguments",
]
