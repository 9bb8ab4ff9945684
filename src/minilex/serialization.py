"""Token serialization: JSON-compatible dicts for token streams.

Useful for:
- Storing expected token streams as test fixtures
- Handing a token stream to a consumer in another process
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from minilex import tokenize
    from minilex.serialization import to_json, from_json

    tokens = tokenize("for i in range(3): print(i)")
    restored = from_json(to_json(tokens))
    assert restored == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from minilex.tokens import Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The kind is stored by name; coordinates use their public names.
    """
    return {
        "kind": token.kind.name,
        "text": token.text,
        "lineno": token.lineno,
        "col": token.col,
        "offset": token._start_offset,
        "end_offset": token._end_offset,
        "source_file": token._source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Missing coordinates fall back to the Token defaults.

    Raises:
        ValueError: If data is not a dict or the kind name is unknown.
    """
    if not isinstance(data, dict):
        msg = f"Expected a token object, got {type(data).__name__}"
        raise ValueError(msg)

    kind_name = data.get("kind")
    try:
        kind = TokenKind[kind_name]
    except (KeyError, TypeError):
        msg = f"Unknown token kind: {kind_name!r}"
        raise ValueError(msg) from None

    return Token(
        kind=kind,
        text=data.get("text", ""),
        _lineno=data.get("lineno", 1),
        _col=data.get("col", 1),
        _start_offset=data.get("offset", 0),
        _end_offset=data.get("end_offset", 0),
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of token objects.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
