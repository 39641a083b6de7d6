"""Utility functions for Shuffler."""

from shuffler.utils.constants import Constants
from shuffler.utils.helpers import expand_file_path, format_time, write_file_safely
from shuffler.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "format_time",
    "setup_logger",
    "write_file_safely",
]
