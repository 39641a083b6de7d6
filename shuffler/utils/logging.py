"""Loguru setup for Shuffler.

Console messages are routed through tqdm so they print above an active
progress bar instead of splitting it.
"""

from pathlib import Path
import sys

from loguru import logger
from tqdm import tqdm

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
PLAIN_FORMAT = "<level>{message}</level>"


def _level_for(verbose: bool, debug: bool) -> str:
    """Map the verbose and debug flags to a loguru level name.

    Args:
        verbose: INFO messages requested
        debug: DEBUG messages requested (wins over verbose)

    Returns:
        "DEBUG", "INFO" or "WARNING"
    """
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def _console_sink(message) -> None:
    """Write a formatted record to stderr without breaking tqdm bars."""
    tqdm.write(str(message), file=sys.stderr, end="")


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace loguru's handlers with a single console handler.

    Debug mode adds timestamps and the calling location to every line.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()
    logger.add(
        _console_sink,
        format=DETAILED_FORMAT if debug else PLAIN_FORMAT,
        level=_level_for(verbose, debug),
        colorize=True,
    )


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> None:
    """Mirror log messages into a UTF-8 file, keeping the console handler.

    Color markup is stripped in the file.

    Args:
        log_file: Path to log file; missing parent directories are created
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path,
        format=DETAILED_FORMAT if debug else PLAIN_FORMAT,
        level=_level_for(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
