"""Classifiers for identifier-shaped lexemes.

Covers macros, function calls, reserved words, the library-import form,
built-in types and plain identifiers. Which of these wins for a given
word is decided by table order, not here.
"""

from __future__ import annotations

import re

from lexicolor.lexer.classifiers.base import (
    IDENT,
    Classifier,
    whitespace_tokens,
    words_pattern,
)
from lexicolor.lexer.vocab import BUILTIN_TYPES, IMPORT_KEYWORD, RESERVED_WORDS
from lexicolor.tokens import Category, Token

MACRO = Classifier(
    name="macro",
    category=Category.MACRO,
    pattern=re.compile(IDENT + "!"),
)


def _extract_function(match: re.Match[str], lossless: bool) -> tuple[Token, ...]:
    """Split ``name (`` into the name and a synthetic "(" delimiter.

    Whitespace between the two is dropped unless lossless.
    """
    name = Token(match.group("name"), Category.FUNCTION)
    paren = Token("(", Category.DELIMITER)
    if lossless:
        return (name, *whitespace_tokens(match.group("gap")), paren)
    return (name, paren)


FUNCTION = Classifier(
    name="function",
    category=Category.FUNCTION,
    pattern=re.compile(rf"(?P<name>{IDENT})(?P<gap>\s*)\(", re.ASCII),
    extractor=_extract_function,
)

RESERVED_WORD = Classifier(
    name="reserved_word",
    category=Category.RESERVED_WORD,
    pattern=re.compile(words_pattern(RESERVED_WORDS), re.ASCII),
)


def _extract_import(match: re.Match[str], lossless: bool) -> tuple[Token, ...]:
    """Split ``use a::b;`` into the keyword and the path.

    The whitespace and the trailing ";" are consumed but only emitted
    when lossless.
    """
    keyword = Token(IMPORT_KEYWORD, Category.RESERVED_WORD)
    path = Token(match.group("path"), Category.IDENTIFIER)
    if not lossless:
        return (keyword, path)
    return (
        keyword,
        *whitespace_tokens(match.group("lead")),
        path,
        *whitespace_tokens(match.group("trail")),
        Token(";", Category.DELIMITER),
    )


LIBRARY_IMPORT = Classifier(
    name="library_import",
    category=Category.RESERVED_WORD,
    pattern=re.compile(
        rf"{IMPORT_KEYWORD}(?P<lead>\s+)(?P<path>{IDENT}(?:::{IDENT})*)(?P<trail>\s*);",
        re.ASCII,
    ),
    extractor=_extract_import,
)

TYPE = Classifier(
    name="type",
    category=Category.TYPE,
    pattern=re.compile(words_pattern(BUILTIN_TYPES), re.ASCII),
)

IDENTIFIER = Classifier(
    name="identifier",
    category=Category.IDENTIFIER,
    pattern=re.compile(IDENT),
)
