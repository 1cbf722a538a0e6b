"""Classifiers for operators and delimiters."""

from __future__ import annotations

import re

from lexicolor.lexer.classifiers.base import Classifier
from lexicolor.lexer.vocab import (
    DELIMITER_CHARS,
    OPERATOR_CHARS,
    RANGE_OPERATORS,
    SINGLE_OPERATORS,
)
from lexicolor.tokens import Category


def _char_class(chars: frozenset[str]) -> str:
    return "[" + "".join(re.escape(c) for c in sorted(chars)) + "]"


def _operator_pattern() -> str:
    """Range/path operators, then pairs of operator chars, then singles.

    "..=" is listed before ".." so the longer form wins.
    """
    parts = [re.escape(op) for op in RANGE_OPERATORS]
    parts.append(_char_class(OPERATOR_CHARS) + "{1,2}")
    parts.append(_char_class(SINGLE_OPERATORS))
    return "|".join(parts)


OPERATOR = Classifier(
    name="operator",
    category=Category.OPERATOR,
    pattern=re.compile(_operator_pattern()),
)

DELIMITER = Classifier(
    name="delimiter",
    category=Category.DELIMITER,
    pattern=re.compile(_char_class(DELIMITER_CHARS)),
)
