"""Listing renderer: one token per line, plain text.

Meant for debugging and diffing token streams. Lexemes are shown with
repr() so whitespace and escapes stay visible.

Example:
    >>> from lexicolor import tokenize
    >>> print(ListingRenderer().render(tokenize("f(")), end="")
    FUNCTION	'f'
    DELIMITER	'('
"""

from collections.abc import Sequence

from lexicolor.tokens import Token


class ListingRenderer:
    """Render tokens as ``CATEGORY<tab>repr(lexeme)`` lines."""

    __slots__ = ()

    def render(self, tokens: Sequence[Token]) -> str:
        return "".join(f"{t.category.name}\t{t.value!r}\n" for t in tokens)
