"""Ordered classifier table.

The table's order is the lexer's disambiguation policy: the first entry
that matches at the cursor wins, regardless of how long a later entry's
match would have been. Callers may inspect or edit the order without
touching the scan loop.

Thread Safety:
Tables are immutable. Editing operations return new tables.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from lexicolor.errors import ClassifierTableError
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
from lexicolor.tokens import Category, Token


class ClassifierTable:
    """Immutable, priority-ordered sequence of classifiers.

    Usage:
        >>> table = DEFAULT_TABLE.without("macro")
        >>> "macro" in table
        False
        >>> table.first_match("foo!", 0)
        (3, (Token(IDENTIFIER, 'foo'),))

    """

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[Classifier]) -> None:
        """Build a table from classifiers in priority order.

        Args:
            entries: Classifiers, highest priority first

        Raises:
            ClassifierTableError: If the table is empty or names repeat.
        """
        self._entries: tuple[Classifier, ...] = tuple(entries)
        if not self._entries:
            raise ClassifierTableError("table must contain at least one classifier")

        self._index: dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            if entry.name in self._index:
                raise ClassifierTableError("duplicate entry name", entry.name)
            self._index[entry.name] = i

    def __iter__(self) -> Iterator[Classifier]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClassifierTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"ClassifierTable({', '.join(self.names)})"

    @property
    def names(self) -> tuple[str, ...]:
        """Entry names in priority order."""
        return tuple(entry.name for entry in self._entries)

    @property
    def categories(self) -> frozenset[Category]:
        """Categories the table can emit in the general case."""
        return frozenset(entry.category for entry in self._entries)

    def get(self, name: str) -> Classifier:
        """Look up an entry by name.

        Raises:
            ClassifierTableError: If no entry has that name.
        """
        return self._entries[self._position(name)]

    def without(self, *names: str) -> ClassifierTable:
        """Return a copy with the named entries removed."""
        for name in names:
            self._position(name)
        return ClassifierTable(e for e in self._entries if e.name not in names)

    def insert_before(self, name: str, classifier: Classifier) -> ClassifierTable:
        """Return a copy with ``classifier`` tried just before ``name``."""
        i = self._position(name)
        return ClassifierTable((*self._entries[:i], classifier, *self._entries[i:]))

    def insert_after(self, name: str, classifier: Classifier) -> ClassifierTable:
        """Return a copy with ``classifier`` tried just after ``name``."""
        i = self._position(name) + 1
        return ClassifierTable((*self._entries[:i], classifier, *self._entries[i:]))

    def replace(self, name: str, classifier: Classifier) -> ClassifierTable:
        """Return a copy with ``name`` swapped for ``classifier`` in place."""
        i = self._position(name)
        return ClassifierTable(
            (*self._entries[:i], classifier, *self._entries[i + 1 :])
        )

    def first_match(
        self, source: str, pos: int, *, lossless: bool = False
    ) -> tuple[int, tuple[Token, ...]] | None:
        """Try each entry in order at ``pos``; the first match wins.

        Args:
            source: Full source text
            pos: Cursor position
            lossless: Forwarded to the winning classifier's extractor

        Returns:
            (end position, tokens) from the first matching entry, or None.
        """
        for entry in self._entries:
            result = entry.match(source, pos, lossless=lossless)
            if result is not None:
                return result
        return None

    def _position(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise ClassifierTableError("no such entry in table", name) from None


# Priority order: comment, string, number, macro, operator, function,
# reserved word, library import, type, delimiter, identifier
DEFAULT_TABLE = ClassifierTable(
    (
        COMMENT,
        STRING,
        NUMBER,
        MACRO,
        OPERATOR,
        FUNCTION,
        RESERVED_WORD,
        LIBRARY_IMPORT,
        TYPE,
        DELIMITER,
        IDENTIFIER,
    )
)
