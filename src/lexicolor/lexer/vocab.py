"""Fixed vocabularies for the lexicolor classifiers.

This module defines the closed word sets and character sets the
classifier patterns are built from.
"""

from __future__ import annotations

# Keywords recognized as whole words
RESERVED_WORDS = frozenset(
    {
        "fn",
        "let",
        "if",
        "else",
        "while",
        "for",
        "return",
        "match",
        "impl",
        "trait",
        "as",
        "in",
        "async",
        "await",
        "dyn",
        "struct",
        "enum",
        "const",
        "static",
        "type",
        "unsafe",
        "mod",
        "pub",
        "self",
        "crate",
        "super",
        "mut",
        "continue",
        "break",
        "loop",
    }
)

# Built-in type names recognized as whole words.
# "&str" is never reached with the default priority order: the operator
# classifier claims "&" first.
BUILTIN_TYPES = frozenset(
    {"i32", "u32", "i64", "u64", "f32", "f64", "String", "&str", "bool", "char"}
)

# Keyword that introduces the library-import form
IMPORT_KEYWORD = "use"

# Single-character delimiters
DELIMITER_CHARS = frozenset("{}();,.:")

# Characters that pair up into one- or two-character operators
OPERATOR_CHARS = frozenset("+-*/=<>!&|")

# Operators that never pair with a neighbour
SINGLE_OPERATORS = frozenset("%")

# Multi-character operators outside OPERATOR_CHARS, longest first
RANGE_OPERATORS = ("..=", "..", "::")
