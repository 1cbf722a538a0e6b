"""TokenRenderer protocol — stable interface for token renderers.

Any renderer that implements ``render(tokens) -> str`` conforms to this protocol.
The built-in ``AnsiRenderer`` is the reference implementation.

Example:
    from lexicolor.renderers.protocol import TokenRenderer

    def show(renderer: TokenRenderer, tokens: list[Token]) -> None:
        print(renderer.render(tokens), end="")

"""

from collections.abc import Sequence
from typing import Protocol

from lexicolor.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token renderers.

    Implementations must accept a token sequence and return a string.

    """

    def render(self, tokens: Sequence[Token]) -> str:
        """Render tokens to a string.

        Args:
            tokens: Tokens in source order.

        Returns:
            Rendered string output.

        """
        ...
