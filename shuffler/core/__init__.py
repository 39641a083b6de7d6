"""Core domain logic for Shuffler."""

from .config import Config, load_config
from .expansion import count_expansions, expand, substitutions_for
from .types import SubstitutionDictionary, WordExpansion

__all__ = [
    "Config",
    "SubstitutionDictionary",
    "WordExpansion",
    "count_expansions",
    "expand",
    "load_config",
    "substitutions_for",
]
