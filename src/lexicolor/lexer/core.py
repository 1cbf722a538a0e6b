"""Priority-ordered scanner with guaranteed forward progress.

Scans left to right. At each cursor position the classifier table is
asked for the first entry that matches exactly there; the winning tokens
are appended and the cursor jumps past the match. When nothing matches,
the single character under the cursor becomes an UNKNOWN token.

Every step advances by at least one character, so scanning always
terminates, and no input makes the scanner raise.

Thread Safety:
Lexer instances hold only their source and options. The cursor is local
to each tokenize() call, so one instance may be shared.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lexicolor.config import get_lex_config
from lexicolor.lexer.table import DEFAULT_TABLE, ClassifierTable
from lexicolor.tokens import Category, Token
from lexicolor.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Tokenizer for the Rust-like source subset.

    Usage:
        >>> Lexer('use std::io;').tokenize()
        [Token(RESERVED_WORD, 'use'), Token(IDENTIFIER, 'std::io')]
        >>> Lexer("foo(").tokenize()
        [Token(FUNCTION, 'foo'), Token(DELIMITER, '(')]

    Options left as None are taken from the active LexConfig.

    """

    __slots__ = ("_source", "_source_len", "_table", "_lossless")

    def __init__(
        self,
        source: str,
        *,
        table: ClassifierTable | None = None,
        lossless: bool | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text to tokenize
            table: Classifier table overriding the configured one
            lossless: Override for LexConfig.lossless
        """
        config = get_lex_config()
        self._source = source
        self._source_len = len(source)
        if table is None:
            table = config.table if config.table is not None else DEFAULT_TABLE
        self._table = table
        self._lossless = config.lossless if lossless is None else lossless

    @property
    def source(self) -> str:
        return self._source

    @property
    def table(self) -> ClassifierTable:
        return self._table

    @property
    def lossless(self) -> bool:
        return self._lossless

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Returns:
            Every token in source order. Empty only for empty source.

        Complexity: O(n * k) where k = number of table entries
        """
        tokens = list(self._scan())
        if logger.isEnabledFor(logging.DEBUG):
            unknown = sum(1 for t in tokens if t.category is Category.UNKNOWN)
            logger.debug(
                "Tokenized %d characters into %d tokens (%d unknown)",
                self._source_len,
                len(tokens),
                unknown,
            )
        return tokens

    def __iter__(self) -> Iterator[Token]:
        return self._scan()

    def _scan(self) -> Iterator[Token]:
        """Yield tokens while advancing a local cursor to the end of source."""
        source = self._source
        source_len = self._source_len
        first_match = self._table.first_match
        lossless = self._lossless
        pos = 0
        while pos < source_len:
            result = first_match(source, pos, lossless=lossless)
            if result is None:
                yield Token(source[pos], Category.UNKNOWN)
                pos += 1
                continue
            end, tokens = result
            yield from tokens
            pos = end
