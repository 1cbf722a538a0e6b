"""Category classifiers for the lexicolor lexer.

Each classifier recognizes one lexical category anchored at the cursor.
Classifiers are pure: they never move the cursor themselves. The order in
which the scanner tries them lives in ``lexicolor.lexer.table``.
"""

from lexicolor.lexer.classifiers.base import Classifier, Extractor
from lexicolor.lexer.classifiers.literals import COMMENT, NUMBER, STRING
from lexicolor.lexer.classifiers.punctuation import DELIMITER, OPERATOR
from lexicolor.lexer.classifiers.words import (
    FUNCTION,
    IDENTIFIER,
    LIBRARY_IMPORT,
    MACRO,
    RESERVED_WORD,
    TYPE,
)

__all__ = [
    "COMMENT",
    "Classifier",
    "DELIMITER",
    "Extractor",
    "FUNCTION",
    "IDENTIFIER",
    "LIBRARY_IMPORT",
    "MACRO",
    "NUMBER",
    "OPERATOR",
    "RESERVED_WORD",
    "STRING",
    "TYPE",
]
