"""lexicolor renderers.

Renderers turn a token list into output text.

Available Renderers:
- AnsiRenderer: Colors each lexeme by category for terminals
- ListingRenderer: One token per line, for debugging

Thread Safety:
Renderers hold no per-call state. Safe for concurrent use.

"""

from lexicolor.renderers.ansi import DEFAULT_THEME, AnsiRenderer, ThemeColor
from lexicolor.renderers.listing import ListingRenderer
from lexicolor.renderers.protocol import TokenRenderer

__all__ = [
    "AnsiRenderer",
    "DEFAULT_THEME",
    "ListingRenderer",
    "ThemeColor",
    "TokenRenderer",
]
