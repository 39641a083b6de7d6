"""Leetspeak expansion of a single word.

A word is treated as one substitution position per code point. Each position
is replaced by every entry of its substitution set, and the variants are
enumerated in odometer order: the leftmost position changes slowest and the
rightmost position changes fastest.

Expansion does not validate its inputs. A character mapped to an empty
substitution set has no possible replacement, so the whole word expands to
no variants at all. Identical variants produced by overlapping entries are
kept.
"""

import itertools
import math

from shuffler.core.types import SubstitutionDictionary


def substitutions_for(char: str, dictionary: SubstitutionDictionary) -> list[str]:
    """Return the ordered replacements for a character.

    Characters missing from the dictionary are replaced only by themselves.
    """
    if char in dictionary:
        return list(dictionary[char])
    return [char]


def count_expansions(word: str, dictionary: SubstitutionDictionary | None = None) -> int:
    """Number of variants expand() produces for a word, without building them."""
    if not dictionary:
        return 1
    return math.prod(len(substitutions_for(char, dictionary)) for char in word)


def expand(word: str, dictionary: SubstitutionDictionary | None = None) -> list[str]:
    """Generate every substitution variant of a word.

    Args:
        word: Word to expand; an empty word yields a single empty string
        dictionary: Character to substitution set mapping (None means identity)

    Returns:
        Variants in odometer order, one per combination of choices
    """
    if dictionary is None:
        dictionary = {}

    positions = [substitutions_for(char, dictionary) for char in word]
    return ["".join(combo) for combo in itertools.product(*positions)]
