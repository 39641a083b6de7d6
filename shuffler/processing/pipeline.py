"""Main processing pipeline orchestration."""

import sys
import time

from loguru import logger

from shuffler.core import Config, count_expansions
from shuffler.data import load_substitution_dictionary, load_word_list
from shuffler.processing.data_models import ShuffleResult
from shuffler.processing.strategies import run, run_parallel
from shuffler.utils import format_time, write_file_safely


def _load_words(config: Config, verbose: bool) -> list[str]:
    """Words given directly come first, then words from the include file."""
    words = list(config.words)
    words.extend(load_word_list(config.include, verbose))
    return words


def _load_dictionary(config: Config, verbose: bool) -> dict[str, list[str]]:
    """File entries first; inline substitutions override them per key."""
    dictionary = load_substitution_dictionary(config.dictionary, verbose)
    dictionary.update(config.substitutions)
    return dictionary


def _write_output(variants: list[str], output: str | None, verbose: bool) -> None:
    """Write variants one per line to the output file, or stdout."""

    def write_variants(f) -> None:
        for variant in variants:
            f.write(variant)
            f.write("\n")

    if output:
        write_file_safely(output, write_variants, "writing variants")
        if verbose:
            logger.info(f"  Wrote {len(variants)} variants to {output}")
    else:
        write_variants(sys.stdout)


def run_pipeline(config: Config) -> ShuffleResult:
    """Load words and substitutions, expand them, and write the variants.

    Args:
        config: Configuration object containing all settings

    Returns:
        ShuffleResult with the variants in input word order
    """
    start_time = time.time()
    verbose = config.verbose

    if verbose:
        logger.info("Loading words and substitutions...")
    words = _load_words(config, verbose)
    dictionary = _load_dictionary(config, verbose)

    if verbose:
        expected = sum(count_expansions(word, dictionary) for word in words)
        logger.info(f"Expanding {len(words)} words into {expected} variants...")

    if config.parallel:
        variants = run_parallel(words, dictionary, verbose, max_workers=config.jobs)
    else:
        variants = run(words, dictionary, verbose)

    _write_output(variants, config.output, verbose)

    elapsed_time = time.time() - start_time
    if verbose:
        logger.info(f"Total processing time: {format_time(elapsed_time)}")

    return ShuffleResult(variants=variants, word_count=len(words), elapsed_time=elapsed_time)
