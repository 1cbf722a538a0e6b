"""Classifiers for comments, string literals and numbers."""

from __future__ import annotations

import re

from lexicolor.lexer.classifiers.base import Classifier
from lexicolor.tokens import Category

# "//" to end of line, or a block comment closed at the first "*/"
COMMENT = Classifier(
    name="comment",
    category=Category.COMMENT,
    pattern=re.compile(r"//[^\r\n]*|/\*[\s\S]*?\*/"),
)

# Escaped characters never close the literal
STRING = Classifier(
    name="string",
    category=Category.STRING_LITERAL,
    pattern=re.compile(r'"(?:[^"\\]|\\.)*"'),
)

# Hex needs at least one digit after "0x"; decimals must end on a word boundary
NUMBER = Classifier(
    name="number",
    category=Category.NUMBER,
    pattern=re.compile(r"0x[0-9a-fA-F]+|[0-9]+(?:\.[0-9]+)?\b", re.ASCII),
)
