"""Tests for ContextVar-based lexer configuration.

Validates context manager behavior, thread isolation, and how Lexer
combines explicit arguments with the active config.
"""

from threading import Thread

import pytest

from lexicolor import (
    DEFAULT_TABLE,
    LexConfig,
    Lexer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)
from lexicolor.tokens import Category, Token


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = LexConfig()
        assert config.table is None
        assert config.lossless is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.lossless = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"lossless": True, "unknown_key": "ignored"})
        assert config.lossless is True
        assert config.table is None

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(lossless=True))
        assert get_lex_config().lossless is True

    def test_reset(self) -> None:
        set_lex_config(LexConfig(lossless=True))
        reset_lex_config()
        assert get_lex_config().lossless is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(lossless=True)):
            assert get_lex_config().lossless is True
        assert get_lex_config().lossless is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(lossless=True)):
                raise RuntimeError("boom")
        assert get_lex_config().lossless is False


class TestLexerUsesConfig:
    """Lexer falls back to the active config for unset options."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_default_table(self) -> None:
        assert Lexer("x").table is DEFAULT_TABLE

    def test_lossless_from_config(self) -> None:
        with lex_config_context(LexConfig(lossless=True)):
            assert tokenize("f (") == [
                Token("f", Category.FUNCTION),
                Token(" ", Category.UNKNOWN),
                Token("(", Category.DELIMITER),
            ]

    def test_explicit_argument_overrides_config(self) -> None:
        with lex_config_context(LexConfig(lossless=True)):
            assert Lexer("f (", lossless=False).lossless is False

    def test_table_from_config(self) -> None:
        table = DEFAULT_TABLE.without("macro")
        with lex_config_context(LexConfig(table=table)):
            lexer = Lexer("a!")
        assert lexer.table is table
        assert lexer.tokenize() == [
            Token("a", Category.IDENTIFIER),
            Token("!", Category.OPERATOR),
        ]

    def test_config_is_read_at_construction(self) -> None:
        lexer = Lexer("f (")
        with lex_config_context(LexConfig(lossless=True)):
            assert len(lexer.tokenize()) == 2


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def teardown_method(self) -> None:
        reset_lex_config()

    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, bool] = {}

        def worker() -> None:
            seen["worker"] = get_lex_config().lossless

        set_lex_config(LexConfig(lossless=True))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen["worker"] is False
        assert get_lex_config().lossless is True
