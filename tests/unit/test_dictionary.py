"""Unit tests for word list and substitution dictionary loading.

Each test has a single assertion and focuses on behavior.
"""

import pytest

from shuffler.data.dictionary import load_substitution_dictionary, load_word_list


class TestLoadWordList:
    """Test load_word_list behavior."""

    def test_returns_empty_list_without_path(self) -> None:
        """No file path means no words."""
        assert load_word_list(None) == []

    def test_loads_one_word_per_line(self, tmp_path) -> None:
        """Each non-empty line is a word, in file order."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("arma\ncarro\n", encoding="utf-8")
        assert load_word_list(str(words_file)) == ["arma", "carro"]

    def test_preserves_case(self, tmp_path) -> None:
        """Words keep their case since substitutions are case-sensitive."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("Arma\n", encoding="utf-8")
        assert load_word_list(str(words_file)) == ["Arma"]

    def test_skips_blank_lines_and_comments(self, tmp_path) -> None:
        """Blank lines and comment lines are ignored."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("# words\n\narma\n   \n", encoding="utf-8")
        assert load_word_list(str(words_file)) == ["arma"]

    def test_strips_surrounding_whitespace(self, tmp_path) -> None:
        """Leading and trailing whitespace is not part of the word."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("  arma \r\n", encoding="utf-8")
        assert load_word_list(str(words_file)) == ["arma"]

    def test_skips_words_with_tabs(self, tmp_path) -> None:
        """Lines containing tabs are rejected as invalid words."""
        words_file = tmp_path / "words.txt"
        words_file.write_text("ar\tma\ncarro\n", encoding="utf-8")
        assert load_word_list(str(words_file)) == ["carro"]

    def test_raises_for_missing_file(self, tmp_path) -> None:
        """Missing file is reported and re-raised."""
        with pytest.raises(FileNotFoundError):
            load_word_list(str(tmp_path / "missing.txt"))


class TestLoadSubstitutionDictionary:
    """Test load_substitution_dictionary behavior."""

    def test_returns_empty_dictionary_without_path(self) -> None:
        """No file path means identity substitution."""
        assert load_substitution_dictionary(None) == {}

    def test_each_character_is_one_replacement(self, tmp_path) -> None:
        """Replacement string is split into single characters, in order."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a -> a@4\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"a": ["a", "@", "4"]}

    def test_loads_multiple_entries(self, tmp_path) -> None:
        """Every well-formed line becomes an entry."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("c -> ck\no -> o0\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"c": ["c", "k"], "o": ["o", "0"]}

    def test_later_entry_replaces_earlier(self, tmp_path) -> None:
        """Repeated key keeps the last substitution set."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a -> 4\na -> @\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"a": ["@"]}

    def test_skips_line_without_separator(self, tmp_path) -> None:
        """Malformed line is skipped with a warning."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a a@4\no -> 0\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"o": ["0"]}

    def test_skips_multi_character_key(self, tmp_path) -> None:
        """Keys must be single characters."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("ab -> 4\no -> 0\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"o": ["0"]}

    def test_skips_comments(self, tmp_path) -> None:
        """Comment lines are ignored."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("# leet\no -> 0\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"o": ["0"]}

    def test_rejects_empty_substitution_set(self, tmp_path) -> None:
        """Key without replacements is a dictionary error."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a ->\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Empty substitution set"):
            load_substitution_dictionary(str(dict_file))

    def test_raises_for_missing_file(self, tmp_path) -> None:
        """Missing file is reported and re-raised."""
        with pytest.raises(FileNotFoundError):
            load_substitution_dictionary(str(tmp_path / "missing.txt"))

    def test_ignores_whitespace_between_replacements(self, tmp_path) -> None:
        """Spaces inside the replacement list are not replacements."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a -> a @ 4\n", encoding="utf-8")
        assert load_substitution_dictionary(str(dict_file)) == {"a": ["a", "@", "4"]}

    def test_whitespace_only_replacements_are_empty(self, tmp_path) -> None:
        """Key followed only by whitespace has an empty substitution set."""
        dict_file = tmp_path / "leet.txt"
        dict_file.write_text("a ->  \t \n", encoding="utf-8")
        with pytest.raises(ValueError, match="Empty substitution set"):
            load_substitution_dictionary(str(dict_file))
