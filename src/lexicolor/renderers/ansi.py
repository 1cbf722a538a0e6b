"""ANSI terminal renderer: one color per token category.

Colors are SGR parameter strings (the part between ``ESC[`` and ``m``).
The default theme follows the classic console layout: each lexeme
painted in its category color, then reset, then a separator.

Example:
    >>> from lexicolor import tokenize
    >>> from lexicolor.renderers.ansi import AnsiRenderer
    >>> AnsiRenderer(color=False).render(tokenize("x"))
    'x \\n'
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from lexicolor.errors import ThemeError
from lexicolor.tokens import Category, Token

RESET = "\033[0m"


@dataclass(frozen=True, slots=True)
class ThemeColor:
    """A terminal color and the name the legend shows for it.

    Attributes:
        code: SGR parameters, e.g. "1;38;5;208"
        name: Human color name, e.g. "Orange"

    """

    code: str
    name: str

    @property
    def sequence(self) -> str:
        """The escape sequence that switches this color on."""
        return f"\033[{self.code}m"


# Order is the legend order
DEFAULT_THEME: Mapping[Category, ThemeColor] = MappingProxyType(
    {
        Category.NUMBER: ThemeColor("0;32", "Green"),
        Category.STRING_LITERAL: ThemeColor("1;33", "Yellow"),
        Category.IDENTIFIER: ThemeColor("1;36", "Cyan"),
        Category.FUNCTION: ThemeColor("1;38;5;208", "Orange"),
        Category.OPERATOR: ThemeColor("1;38;5;206", "Light Pink"),
        Category.RESERVED_WORD: ThemeColor("1;34", "Light Blue"),
        Category.DELIMITER: ThemeColor("0;37", "White"),
        Category.COMMENT: ThemeColor("1;90", "Gray"),
        Category.TYPE: ThemeColor("0;33", "Brown"),
        Category.MACRO: ThemeColor("1;35", "Purple"),
        Category.UNKNOWN: ThemeColor("1;31", "Red"),
    }
)


def validate_theme(theme: Mapping[Category, ThemeColor]) -> Mapping[Category, ThemeColor]:
    """Check that a theme maps every category to exactly one color.

    Args:
        theme: Mapping from Category to ThemeColor

    Returns:
        A read-only copy of the theme, in the caller's order.

    Raises:
        ThemeError: On a non-Category key, a non-ThemeColor value,
            or a missing category.
    """
    for key, value in theme.items():
        if not isinstance(key, Category):
            raise ThemeError(f"Theme key {key!r} is not a Category")
        if not isinstance(value, ThemeColor):
            raise ThemeError(f"Theme color for {key.name} must be a ThemeColor, got {value!r}")

    missing = [c.name for c in Category if c not in theme]
    if missing:
        raise ThemeError(f"Theme has no color for: {', '.join(missing)}")

    return MappingProxyType(dict(theme))


class AnsiRenderer:
    """Render tokens as ANSI-colored terminal text.

    Thread Safety:
        Stateless apart from immutable options. Safe to share.
    """

    __slots__ = ("_theme", "_color", "_separator")

    def __init__(
        self,
        theme: Mapping[Category, ThemeColor] | None = None,
        *,
        color: bool = True,
        separator: str = " ",
    ) -> None:
        """Initialize renderer.

        Args:
            theme: Category colors (None = DEFAULT_THEME)
            color: Emit escape sequences; False gives plain text
            separator: Written after every token
        """
        self._theme = DEFAULT_THEME if theme is None else validate_theme(theme)
        self._color = color
        self._separator = separator

    @property
    def theme(self) -> Mapping[Category, ThemeColor]:
        return self._theme

    def paint(self, text: str, category: Category) -> str:
        """Wrap text in the color of ``category``."""
        if not self._color:
            return text
        return f"{self._theme[category].sequence}{text}{RESET}"

    def render(self, tokens: Sequence[Token]) -> str:
        """Render tokens on one stream, terminated by a newline."""
        sep = self._separator
        parts = [self.paint(token.value, token.category) + sep for token in tokens]
        parts.append("\n")
        return "".join(parts)

    def legend(self) -> str:
        """Describe which color means which category.

        One line per category in theme order, then a blank line.
        """
        lines = ["Token Color Meanings:"]
        for category, color in self._theme.items():
            name = f"{color.sequence}{color.name}{RESET}" if self._color else color.name
            lines.append(f"{name}: {category.label}")
        return "\n".join(lines) + "\n\n"
