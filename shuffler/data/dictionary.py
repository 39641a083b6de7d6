"""Word list and substitution dictionary loading."""

from loguru import logger

from shuffler.utils import Constants, expand_file_path


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load words from file, one per line, keeping their case."""
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    words = []
    invalid_count = 0

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(Constants.COMMENT_MARKER):
                    continue
                if any(c in line for c in Constants.INVALID_WORD_CHARS):
                    invalid_count += 1
                    continue
                words.append(line)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"  Loaded {len(words)} words from {filepath}")
        if invalid_count > 0:
            logger.info(f"  Skipped {invalid_count} words with invalid characters")

    return words


def _parse_substitution_line(line: str, filepath: str) -> tuple[str, list[str]] | None:
    """Parse "a -> a@4" into ("a", ["a", "@", "4"]), or None if malformed."""
    if Constants.SUBSTITUTION_SEPARATOR not in line:
        logger.warning(f"Skipping malformed line in {filepath}: {line}")
        return None

    key, raw_replacements = line.split(Constants.SUBSTITUTION_SEPARATOR, 1)
    key = key.strip()
    # Whitespace is never a replacement
    replacements = [char for char in raw_replacements if not char.isspace()]

    if len(key) != 1:
        logger.warning(f"Skipping line with multi-character key in {filepath}: {line}")
        return None
    if not replacements:
        raise ValueError(f"Empty substitution set for {key!r} in {filepath}")

    return key, replacements


def load_substitution_dictionary(
    filepath: str | None, verbose: bool = False
) -> dict[str, list[str]]:
    """Load a substitution dictionary from file.

    Each line maps one character to its replacements, one character each:

        a -> a@4
        o -> o0

    Whitespace between replacements is ignored ("a -> a @ 4" equals "a -> a@4").
    A repeated key replaces the earlier entry.

    Raises:
        ValueError: If a key has an empty substitution set
    """
    if not filepath:
        return {}

    filepath = expand_file_path(filepath)
    if not filepath:
        return {}

    dictionary: dict[str, list[str]] = {}
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith(Constants.COMMENT_MARKER):
                    continue
                entry = _parse_substitution_line(line, filepath)
                if entry is None:
                    continue
                key, replacements = entry
                dictionary[key] = replacements
    except FileNotFoundError:
        logger.error(f"✗ Substitution dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
    except ValueError as e:
        logger.error(f"✗ Invalid substitution dictionary: {e}")
        logger.error("  Every key needs at least one replacement")
        raise

    if verbose:
        logger.info(f"  Loaded substitutions for {len(dictionary)} characters")

    return dictionary
