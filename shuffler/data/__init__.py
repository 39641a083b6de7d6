"""Data loading for Shuffler."""

from shuffler.data.dictionary import load_substitution_dictionary, load_word_list

__all__ = [
    "load_substitution_dictionary",
    "load_word_list",
]
