"""Worker context for expansion threads without global state."""

from collections.abc import Mapping
from dataclasses import dataclass
import threading
from types import MappingProxyType

from shuffler.core.types import SubstitutionDictionary


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for expansion workers.

    Every worker thread reads the same context; nothing in it can be
    modified, so no locking is needed.

    Attributes:
        substitutions: Read-only character to substitution set mapping
    """

    substitutions: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_dictionary(cls, dictionary: SubstitutionDictionary | None) -> "WorkerContext":
        """Create a WorkerContext from a substitution dictionary.

        Args:
            dictionary: Character to substitution set mapping (None means identity)

        Returns:
            New WorkerContext instance holding a frozen copy of the dictionary
        """
        frozen = {key: tuple(values) for key, values in (dictionary or {}).items()}
        return cls(substitutions=MappingProxyType(frozen))


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize a worker thread with context in thread-local storage.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Returns:
        WorkerContext for this worker

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
