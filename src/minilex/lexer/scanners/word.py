"""Identifier and keyword scanner mixin."""

from minilex.lexer.modes import IDENTIFIER_EXTRA
from minilex.tokens import KEYWORDS, Token, TokenKind


class WordScannerMixin:
    """Mixin providing identifier and keyword scanning.

    Consumes the longest run of letters, digits and underscores, then
    looks the spelling up in the keyword table once.

    """

    __slots__ = ()

    # These will be set by the Scanner class
    _source: str
    _source_len: int
    _pos: int

    def _commit_to(self, end: int) -> None:
        """Commit position to end. Implemented by Scanner."""
        raise NotImplementedError

    def _make_token(self, kind: TokenKind, start_pos: int) -> Token:
        """Create token for source[start_pos:pos]. Implemented by Scanner."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan an identifier or keyword starting at a letter.

        Returns:
            Keyword token if the spelling is reserved, else IDENTIFIER.
        """
        source = self._source
        source_len = self._source_len
        start = self._pos
        end = start + 1
        while end < source_len:
            char = source[end]
            if not (char.isalpha() or char.isdecimal() or char in IDENTIFIER_EXTRA):
                break
            end += 1

        self._commit_to(end)
        kind = KEYWORDS.get(source[start:end], TokenKind.IDENTIFIER)
        return self._make_token(kind, start)
