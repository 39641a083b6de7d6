"""Shuffler - Leetspeak variant generator.

Expand words into every combination of a character substitution dictionary,
sequentially or with one worker thread per word.
"""

from shuffler.core import Config, count_expansions, expand, load_config
from shuffler.processing import run, run_parallel, run_pipeline
from shuffler.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "count_expansions",
    "expand",
    "load_config",
    "run",
    "run_parallel",
    "run_pipeline",
    "setup_logger",
]
