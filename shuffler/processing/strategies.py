"""Sequential and concurrent expansion of word lists."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

from loguru import logger
from tqdm import tqdm

from shuffler.core import SubstitutionDictionary, WordExpansion, expand
from shuffler.processing.worker_context import WorkerContext, get_worker_context, init_worker


def expand_word_worker(index: int, word: str) -> WordExpansion:
    """Worker function for the thread pool.

    Args:
        index: Position of the word in the input list
        word: The word to expand

    Returns:
        Tuple of (index, word, variants) so results can be put back in order
    """
    context = get_worker_context()
    return index, word, expand(word, context.substitutions)


def run(
    words: Sequence[str],
    dictionary: SubstitutionDictionary | None = None,
    verbose: bool = False,
) -> list[str]:
    """Expand every word in order and concatenate the variants.

    Args:
        words: Words to expand
        dictionary: Character to substitution set mapping (None means identity)
        verbose: Show a progress bar

    Returns:
        Variants of all words, grouped by word in input order
    """
    if verbose:
        words_iter: Any = tqdm(words, desc="Expanding words", unit="word")
    else:
        words_iter = words

    variants: list[str] = []
    for word in words_iter:
        expansion = expand(word, dictionary)
        logger.debug(f"Expanded {word!r} into {len(expansion)} variants")
        variants.extend(expansion)

    return variants


def run_parallel(
    words: Sequence[str],
    dictionary: SubstitutionDictionary | None = None,
    verbose: bool = False,
    max_workers: int | None = None,
) -> list[str]:
    """Expand every word on its own worker thread.

    Results are collected as workers finish and reassembled by input
    position, so the output is identical to run() for the same inputs.
    The first exception raised by a worker propagates to the caller.

    Args:
        words: Words to expand
        dictionary: Character to substitution set mapping (None means identity)
        verbose: Show a progress bar
        max_workers: Upper bound on worker threads (None: one per word)

    Returns:
        Variants of all words, grouped by word in input order
    """
    if not words:
        return []

    workers = len(words) if max_workers is None else min(max_workers, len(words))
    if verbose:
        logger.info(f"  Using {workers} worker threads for {len(words)} words")

    context = WorkerContext.from_dictionary(dictionary)
    expansions: list[list[str] | None] = [None] * len(words)

    with ThreadPoolExecutor(
        max_workers=workers,
        initializer=init_worker,
        initargs=(context,),
    ) as executor:
        futures = [
            executor.submit(expand_word_worker, index, word) for index, word in enumerate(words)
        ]
        completed: Any = as_completed(futures)

        if verbose:
            completed = tqdm(completed, total=len(futures), desc="Expanding words", unit="word")

        for future in completed:
            index, word, variants = future.result()
            logger.debug(f"Expanded {word!r} into {len(variants)} variants")
            expansions[index] = variants

    return [variant for expansion in expansions if expansion for variant in expansion]
