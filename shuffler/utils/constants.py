"""Constants shared across Shuffler modules."""


class Constants:
    """Namespace for file format markers and defaults."""

    # Substitution dictionary files: "a -> a@4"
    SUBSTITUTION_SEPARATOR = "->"

    # Lines starting with this marker are ignored in word and dictionary files
    COMMENT_MARKER = "#"

    # Characters that make a stripped word list line invalid
    INVALID_WORD_CHARS = ("\t",)
