"""Type aliases shared by the expansion engine and the execution strategies."""

from collections.abc import Mapping, Sequence

# Maps one character to the ordered characters it may be replaced by
SubstitutionDictionary = Mapping[str, Sequence[str]]

# (input position, source word, variants of that word)
WordExpansion = tuple[int, str, list[str]]
