"""Token serialization — JSON round-trip for lexicolor token lists.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching token streams between tool runs
- Feeding tokens to tools written in other languages
- Debugging and golden-file tests

Categories are written by enum name. All output is deterministic
(sorted keys).

Example:
    from lexicolor import tokenize
    from lexicolor.serialization import to_json, from_json

    tokens = tokenize("let x = 1;")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from lexicolor.tokens import Category, Token


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: Token to convert.

    Returns:
        Dict with ``value`` and ``category`` (enum name).

    """
    return {"value": token.value, "category": token.category.name}


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Args:
        data: Dict with ``value`` and ``category`` keys.

    Returns:
        Token instance.

    Raises:
        ValueError: If a key is missing, the value is not a string,
            or the category name is unknown.

    """
    try:
        value = data["value"]
        category_name = data["category"]
    except (KeyError, TypeError):
        msg = f"Serialized token needs 'value' and 'category' fields: {data!r}"
        raise ValueError(msg) from None

    if not isinstance(value, str):
        msg = f"Token value must be a string, got {type(value).__name__}"
        raise ValueError(msg)

    try:
        category = Category[category_name]
    except (KeyError, TypeError):
        msg = f"Unknown token category: {category_name!r}"
        raise ValueError(msg) from None

    return Token(value, category)


def to_json(tokens: Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array string.

    Args:
        tokens: Tokens in source order.
        indent: JSON indentation (None for compact output).

    Returns:
        Deterministic JSON string.

    """
    return json.dumps(
        [to_dict(t) for t in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize tokens from a JSON array string.

    Raises:
        ValueError: On invalid JSON (json.JSONDecodeError is a
            ValueError), a non-array document, or a malformed token.

    """
    data = json.loads(json_str)
    if not isinstance(data, list):
        msg = f"Expected a JSON array of tokens, got {type(data).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in data]
