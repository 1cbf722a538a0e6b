"""Token and Category definitions for the lexicolor lexer.

The lexer produces a list of Token objects that renderers consume.
Each Token pairs a lexeme with exactly one Category.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Lexical categories produced by the lexer.

    The set is closed: every token carries exactly one of these.
    Each member's value is the human label shown in the color legend.

    """

    NUMBER = "Numbers"
    STRING_LITERAL = "String Literals"
    IDENTIFIER = "Identifiers"
    OPERATOR = "Operators"
    RESERVED_WORD = "Reserved Words"
    DELIMITER = "Delimiters"
    COMMENT = "Comments"
    TYPE = "Types"
    FUNCTION = "Functions"
    MACRO = "Macros"
    UNKNOWN = "Unknown Tokens"  # Fallback for unrecognized characters

    @property
    def label(self) -> str:
        """Human-readable plural label (e.g. "Reserved Words")."""
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        value: The lexeme exactly as it appeared in source
        category: The lexical category (from Category enum)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    value: str
    category: Category

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.category.name}, {val!r})"

    @property
    def is_unknown(self) -> bool:
        """True if no classifier recognized this lexeme."""
        return self.category is Category.UNKNOWN
