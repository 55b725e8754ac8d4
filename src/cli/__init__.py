"""Command-line interface (argparse glue around src.converter)."""

from .main import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
