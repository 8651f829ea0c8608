"""Command-line interface for ocenv."""

from ocenv.cli.app import build_parser, entrypoint, main

__all__ = [
    "build_parser",
    "entrypoint",
    "main",
]
