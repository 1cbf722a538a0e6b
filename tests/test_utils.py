"""Tests for utility modules."""

import logging

import pytest


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from lexicolor.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "lexicolor.mymodule"

    def test_logger_with_lexicolor_prefix(self) -> None:
        from lexicolor.utils.logger import get_logger

        assert get_logger("lexicolor.lexer.core").name == "lexicolor.lexer.core"

    def test_logger_name_starting_with_lexicolor_not_submodule(self) -> None:
        from lexicolor.utils.logger import get_logger

        assert get_logger("lexicolor_other").name == "lexicolor.lexicolor_other"

    def test_logger_exact_name(self) -> None:
        from lexicolor.utils.logger import get_logger

        assert get_logger("lexicolor").name == "lexicolor"

    def test_lexer_debug_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        from lexicolor import tokenize

        with caplog.at_level(logging.DEBUG, logger="lexicolor"):
            tokenize("a @")

        assert "Tokenized 3 characters into 3 tokens (2 unknown)" in caplog.text
