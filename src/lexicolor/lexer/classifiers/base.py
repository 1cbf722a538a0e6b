"""Classifier type shared by every category matcher.

A classifier answers one question: does its category match anchored at a
given position of the source, and if so, how far does the match reach and
which tokens does it produce.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from lexicolor.tokens import Category, Token

# Identifier shape shared by several classifiers
IDENT = r"[A-Za-z_][A-Za-z0-9_]*"

# (match, lossless) -> tokens
Extractor = Callable[[re.Match[str], bool], tuple[Token, ...]]


def words_pattern(words: Iterable[str]) -> str:
    """Build a whole-word alternation over a closed word set.

    Longer words come first so the alternation reads deterministically;
    the trailing word boundary rejects prefixes of longer identifiers.

    Args:
        words: Words to alternate over (escaped here)

    Returns:
        Regex source such as ``(?:return|let|fn)\\b``
    """
    ordered = sorted(words, key=lambda w: (-len(w), w))
    return "(?:" + "|".join(re.escape(w) for w in ordered) + r")\b"


def whitespace_tokens(text: str) -> tuple[Token, ...]:
    """Split swallowed whitespace into one UNKNOWN token per character.

    Matches what the scanner emits for whitespace it meets on its own.
    """
    return tuple(Token(ch, Category.UNKNOWN) for ch in text)


@dataclass(frozen=True, slots=True)
class Classifier:
    """One entry of the classifier table.

    Attributes:
        name: Unique entry name within a table (e.g. "library_import")
        category: Category of the token emitted in the general case
        pattern: Compiled pattern, matched anchored at the cursor
        extractor: Optional callback that turns the match into tokens.
            Used by entries that emit something other than one token
            holding the whole match.

    Thread Safety:
        Frozen dataclass over a compiled pattern; safe to share.

    """

    name: str
    category: Category
    pattern: re.Pattern[str]
    extractor: Extractor | None = None

    def match(
        self, source: str, pos: int, *, lossless: bool = False
    ) -> tuple[int, tuple[Token, ...]] | None:
        """Try to match at exactly ``pos``.

        Args:
            source: Full source text
            pos: Cursor position; a match starting later does not count
            lossless: Ask the extractor to emit characters it would drop

        Returns:
            (end position, tokens) on a non-empty match, None otherwise.
        """
        m = self.pattern.match(source, pos)
        if m is None or m.end() == pos:
            # Zero-width matches would stall the cursor
            return None
        if self.extractor is not None:
            return m.end(), self.extractor(m, lossless)
        return m.end(), (Token(m.group(), self.category),)
