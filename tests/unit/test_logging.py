"""Unit tests for loguru setup alongside tqdm progress bars.

Each test has a single assertion.
"""

import re
from unittest.mock import patch

from loguru import logger
import pytest
from tqdm import tqdm

from shuffler.processing import run
from shuffler.utils.logging import setup_logger

LEET = {"a": ["a", "@", "4"]}


@pytest.fixture(autouse=True)
def _reset_logger():
    """Leave no handlers behind for other tests."""
    yield
    logger.remove()


class TestConsoleLogging:
    """Test where console log messages are written."""

    def test_debug_messages_go_through_tqdm_write(self) -> None:
        """Console handler prints via tqdm so active bars are cleared first."""
        setup_logger(verbose=True, debug=True)
        with patch.object(tqdm, "write") as mock_write:
            run(["arma"], LEET, verbose=True)
        written = [str(c.args[0]) for c in mock_write.mock_calls]
        assert any("Expanded 'arma' into 9 variants" in line for line in written)

    def test_log_lines_do_not_share_a_line_with_progress_bar(self, capsys) -> None:
        """Each debug line is separated from the progress bar text."""
        setup_logger(verbose=True, debug=True)
        run(["arma", "carro"], LEET, verbose=True)
        segments = re.split(r"[\r\n]", capsys.readouterr().err)
        assert not [s for s in segments if "Expanding words" in s and "Expanded" in s]

    def test_console_messages_stay_off_stdout(self, capsys) -> None:
        """Log output never mixes with variants written to stdout."""
        setup_logger(verbose=True, debug=True)
        run(["arma"], LEET, verbose=True)
        assert "Expanded" not in capsys.readouterr().out

    def test_warning_level_hides_debug_messages(self, capsys) -> None:
        """Without verbose or debug only warnings reach the console."""
        setup_logger()
        run(["arma"], LEET)
        assert "Expanded" not in capsys.readouterr().err
