"""Tests for individual classifiers, independent of table order."""

from __future__ import annotations

import re

import pytest

from lexicolor.lexer.classifiers import (
    COMMENT,
    DELIMITER,
    FUNCTION,
    IDENTIFIER,
    LIBRARY_IMPORT,
    MACRO,
    NUMBER,
    OPERATOR,
    RESERVED_WORD,
    STRING,
    TYPE,
    Classifier,
)
from lexicolor.lexer.classifiers.base import whitespace_tokens, words_pattern
from lexicolor.lexer.vocab import BUILTIN_TYPES, DELIMITER_CHARS, RESERVED_WORDS
from lexicolor.tokens import Category, Token


def _lexeme(classifier: Classifier, source: str, pos: int = 0) -> str | None:
    result = classifier.match(source, pos)
    if result is None:
        return None
    end, _ = result
    return source[pos:end]


class TestAnchoring:
    """Matches must start exactly at the cursor."""

    def test_later_match_does_not_count(self) -> None:
        assert NUMBER.match("x 42", 0) is None

    def test_match_at_offset(self) -> None:
        assert NUMBER.match("x 42", 2) == (4, (Token("42", Category.NUMBER),))

    def test_zero_width_match_is_rejected(self) -> None:
        empty = Classifier("empty", Category.UNKNOWN, re.compile(r"x*"))
        assert empty.match("abc", 0) is None


class TestOperator:
    """Operator classifier."""

    @pytest.mark.parametrize(
        "source",
        ["+", "-", "*", "/", "=", "<", ">", "!", "&", "|", "%",
         "==", "!=", "<=", ">=", "->", "+=", "-=", "&&", "||", "..", "::", "..="],
    )
    def test_operator_forms(self, source: str) -> None:
        assert _lexeme(OPERATOR, source) == source

    def test_longest_range_form(self) -> None:
        assert _lexeme(OPERATOR, "..=x") == "..="

    def test_at_most_two_characters_pair(self) -> None:
        assert _lexeme(OPERATOR, "===") == "=="

    def test_percent_does_not_pair(self) -> None:
        assert _lexeme(OPERATOR, "%=") == "%"

    @pytest.mark.parametrize("source", [".", ":", "(", "a"])
    def test_not_operators(self, source: str) -> None:
        assert OPERATOR.match(source, 0) is None


class TestDelimiter:
    """Delimiter classifier."""

    @pytest.mark.parametrize("char", sorted(DELIMITER_CHARS))
    def test_each_delimiter(self, char: str) -> None:
        assert _lexeme(DELIMITER, char + char) == char

    def test_square_brackets_are_not_delimiters(self) -> None:
        assert DELIMITER.match("[", 0) is None


class TestWordClassifiers:
    """Macro, function, keyword, type, import and identifier classifiers."""

    def test_macro_requires_adjacent_bang(self) -> None:
        assert _lexeme(MACRO, "vec!") == "vec!"
        assert MACRO.match("vec !", 0) is None

    def test_function_tokens(self) -> None:
        _, tokens = FUNCTION.match("main  ()", 0)
        assert tokens == (
            Token("main", Category.FUNCTION),
            Token("(", Category.DELIMITER),
        )

    def test_function_lossless_keeps_gap(self) -> None:
        end, tokens = FUNCTION.match("f \n(", 0, lossless=True)
        assert end == 4
        assert tokens == (
            Token("f", Category.FUNCTION),
            Token(" ", Category.UNKNOWN),
            Token("\n", Category.UNKNOWN),
            Token("(", Category.DELIMITER),
        )

    @pytest.mark.parametrize("word", sorted(RESERVED_WORDS))
    def test_every_reserved_word(self, word: str) -> None:
        assert _lexeme(RESERVED_WORD, word) == word
        assert RESERVED_WORD.match(word + "_x", 0) is None

    @pytest.mark.parametrize("name", sorted(BUILTIN_TYPES))
    def test_every_builtin_type(self, name: str) -> None:
        assert _lexeme(TYPE, name) == name

    def test_import_consumes_semicolon(self) -> None:
        end, tokens = LIBRARY_IMPORT.match("use a::b; x", 0)
        assert end == 9
        assert tokens == (
            Token("use", Category.RESERVED_WORD),
            Token("a::b", Category.IDENTIFIER),
        )

    def test_import_lossless(self) -> None:
        _, tokens = LIBRARY_IMPORT.match("use  a ;", 0, lossless=True)
        assert [t.value for t in tokens] == ["use", " ", " ", "a", " ", ";"]
        assert tokens[-1].category is Category.DELIMITER

    @pytest.mark.parametrize("source", ["use a::;", "use ::a;", "use a:b;", "usea;"])
    def test_malformed_imports(self, source: str) -> None:
        assert LIBRARY_IMPORT.match(source, 0) is None

    def test_identifier_shape(self) -> None:
        assert _lexeme(IDENTIFIER, "_a1b2 c") == "_a1b2"
        assert IDENTIFIER.match("1a", 0) is None


class TestLiteralClassifiers:
    """Comment, string and number classifiers."""

    def test_string_with_escapes(self) -> None:
        assert _lexeme(STRING, r'"\\" rest"') == r'"\\"'

    def test_string_may_span_lines(self) -> None:
        assert _lexeme(STRING, '"a\nb"') == '"a\nb"'

    def test_line_comment_stops_at_carriage_return(self) -> None:
        assert _lexeme(COMMENT, "// x\r\ny") == "// x"

    def test_float_requires_fraction_digits(self) -> None:
        assert _lexeme(NUMBER, "1.x") == "1"


class TestHelpers:
    """Pattern-building helpers."""

    def test_words_pattern_whole_words(self) -> None:
        pattern = re.compile(words_pattern({"in", "int"}))
        assert pattern.match("int").group() == "int"
        assert pattern.match("in x").group() == "in"
        assert pattern.match("inx") is None

    def test_words_pattern_escapes(self) -> None:
        assert re.compile(words_pattern({"&str"})).match("&str").group() == "&str"

    def test_whitespace_tokens(self) -> None:
        assert whitespace_tokens(" \t") == (
            Token(" ", Category.UNKNOWN),
            Token("\t", Category.UNKNOWN),
        )
