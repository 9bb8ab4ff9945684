"""
minilex: scanner for a small imperative mini-language

Turns source text with variables, integers, arithmetic, comparisons,
for/in/range loops, if/else and print into a typed token stream.
Single pass, maximal munch, zero runtime dependencies.

Quick Start:
    >>> from minilex import tokenize
    >>> [str(t) for t in tokenize("x = 1")]
    ['Token(IDENTIFIER, x)', 'Token(ASSIGN, =)', 'Token(INTEGER, 1)', 'Token(END_OF_INPUT, )']

    >>> # Pull tokens one at a time
    >>> from minilex import Scanner
    >>> scanner = Scanner("if a <= b: print(a)")
    >>> scanner.next_token()
    Token(IF, 'if', 1:1)

Strict Scanning:
    >>> from minilex import ScanConfig, UnrecognizedPolicy
    >>> tokenize("a ! b", config=ScanConfig(on_unrecognized=UnrecognizedPolicy.ERROR))
    Traceback (most recent call last):
    ...
    minilex.errors.UnrecognizedCharacterError: 1:3 unrecognized character '!'
"""

from minilex.config import (
    ScanConfig,
    UnrecognizedPolicy,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from minilex.errors import MinilexError, ScanError, UnrecognizedCharacterError
from minilex.lexer import Scanner, ScannerState
from minilex.location import SourceLocation
from minilex.serialization import from_dict, from_json, to_dict, to_json
from minilex.tokens import KEYWORDS, RESERVED_KINDS, Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan source into a complete token list ending in END_OF_INPUT.

    Args:
        source: Mini-language source text
        source_file: Optional source file path for diagnostics
        config: Scan configuration (uses the context's config if None)

    Returns:
        Tokens in source order, terminated by exactly one END_OF_INPUT.

    Example:
        >>> [t.kind.name for t in tokenize("a\\nb")]
        ['IDENTIFIER', 'NEWLINE', 'IDENTIFIER', 'END_OF_INPUT']
    """
    return Scanner(source, source_file=source_file, config=config).tokenize()


__all__ = [
    # Main API
    "tokenize",
    "Scanner",
    "ScannerState",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "RESERVED_KINDS",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "UnrecognizedPolicy",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "MinilexError",
    "ScanError",
    "UnrecognizedCharacterError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Version
    "__version__",
]
