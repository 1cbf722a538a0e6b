"""Priority-ordered lexer for the lexicolor source subset.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ClassifierTable, DEFAULT_TABLE
├── core.py              # Lexer class (cursor loop + UNKNOWN fallback)
├── table.py             # ClassifierTable, DEFAULT_TABLE (priority order)
├── vocab.py             # Reserved words, built-in types, char sets
└── classifiers/         # One matcher per category
    ├── base.py          # Classifier dataclass, shared helpers
    ├── literals.py      # Comment, string literal, number
    ├── punctuation.py   # Operator, delimiter
    └── words.py         # Macro, function, reserved word, import, type, identifier

Usage:
    >>> from lexicolor.lexer import Lexer
    >>> for token in Lexer("let x = 42;").tokenize():
    ...     print(token)
Token(RESERVED_WORD, 'let')
Token(UNKNOWN, ' ')
Token(IDENTIFIER, 'x')
Token(UNKNOWN, ' ')
Token(OPERATOR, '=')
Token(UNKNOWN, ' ')
Token(NUMBER, '42')
Token(DELIMITER, ';')

"""

from lexicolor.lexer.classifiers import Classifier
from lexicolor.lexer.core import Lexer
from lexicolor.lexer.table import DEFAULT_TABLE, ClassifierTable

__all__ = ["Classifier", "ClassifierTable", "DEFAULT_TABLE", "Lexer"]
