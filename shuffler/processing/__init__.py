"""Word list processing for Shuffler."""

from shuffler.processing.data_models import ShuffleResult
from shuffler.processing.pipeline import run_pipeline
from shuffler.processing.strategies import expand_word_worker, run, run_parallel
from shuffler.processing.worker_context import WorkerContext, get_worker_context, init_worker

__all__ = [
    "ShuffleResult",
    "WorkerContext",
    "expand_word_worker",
    "get_worker_context",
    "init_worker",
    "run",
    "run_parallel",
    "run_pipeline",
]
