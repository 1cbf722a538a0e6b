"""
lexicolor — Priority-ordered tokenizer with terminal color output

Tokenizes a small Rust-like language subset into categorized tokens
(numbers, strings, identifiers, operators, reserved words, delimiters,
comments, types, functions, macros) and renders them with ANSI colors.
Scanning never fails: anything unrecognized becomes an UNKNOWN token.

Quick Start:
    >>> from lexicolor import tokenize
    >>> tokenize('println!("hi")')
    [Token(MACRO, 'println!'), Token(DELIMITER, '('), Token(STRING_LITERAL, '"hi"'), Token(DELIMITER, ')')]

    >>> from lexicolor import highlight
    >>> print(highlight("let x = 1;"), end="")  # colored on a terminal

Custom Priority:
    >>> from lexicolor import DEFAULT_TABLE, Lexer
    >>> table = DEFAULT_TABLE.without("macro")
    >>> Lexer("foo!", table=table).tokenize()
    [Token(IDENTIFIER, 'foo'), Token(OPERATOR, '!')]
"""

from lexicolor.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from lexicolor.errors import ClassifierTableError, LexicolorError, ThemeError
from lexicolor.lexer import DEFAULT_TABLE, Classifier, ClassifierTable, Lexer
from lexicolor.renderers import (
    DEFAULT_THEME,
    AnsiRenderer,
    ListingRenderer,
    ThemeColor,
    TokenRenderer,
)
from lexicolor.serialization import from_dict, from_json, to_dict, to_json
from lexicolor.tokens import Category, Token

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    table: ClassifierTable | None = None,
    lossless: bool | None = None,
) -> list[Token]:
    """Tokenize source text.

    Args:
        source: Source text
        table: Classifier table (uses the configured or default table if None)
        lossless: Emit normally swallowed characters (uses config if None)

    Returns:
        Tokens in source order

    Example:
        >>> tokenize("let")
        [Token(RESERVED_WORD, 'let')]
    """
    return Lexer(source, table=table, lossless=lossless).tokenize()


def highlight(source: str, *, color: bool = True, legend: bool = False) -> str:
    """Tokenize source and render it for a terminal.

    Args:
        source: Source text
        color: Emit ANSI escape sequences
        legend: Prefix the output with the color legend

    Returns:
        Rendered text ending in a newline
    """
    renderer = AnsiRenderer(color=color)
    rendered = renderer.render(tokenize(source))
    if legend:
        return renderer.legend() + rendered
    return rendered


__all__ = [
    "AnsiRenderer",
    "Category",
    "Classifier",
    "ClassifierTable",
    "ClassifierTableError",
    "DEFAULT_TABLE",
    "DEFAULT_THEME",
    "LexConfig",
    "Lexer",
    "LexicolorError",
    "ListingRenderer",
    "ThemeColor",
    "ThemeError",
    "Token",
    "TokenRenderer",
    "__version__",
    "from_dict",
    "from_json",
    "get_lex_config",
    "highlight",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
    "to_dict",
    "to_json",
]
