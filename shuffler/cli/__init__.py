"""Command-line interface for Shuffler."""

from shuffler.cli.parser import create_parser

__all__ = ["create_parser"]
