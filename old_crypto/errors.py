"""
Errors raised by the cipher layer.

Everything derives from ValueError so callers that already guard key and
input handling with ``except ValueError`` keep working.
"""


class CipherError(ValueError):
    """Base class for every error raised by old_crypto."""


class InvalidSymbol(CipherError):
    """Input contains a symbol outside the cipher's alphabet."""

    def __init__(self, symbol: str, cipher: str = "", position: int = None):
        self.symbol = symbol
        self.cipher = cipher
        self.position = position
        where = f" at position {position}" if position is not None else ""
        owner = f"{cipher}: " if cipher else ""
        super().__init__(f"{owner}invalid symbol {symbol!r}{where}")


class InvalidKey(CipherError):
    """The key cannot produce a valid cipher state."""


class InvalidConfiguration(CipherError):
    """Unknown, missing or conflicting cipher options."""


class AmbiguousDecode(InvalidConfiguration):
    """A checkerboard layout where one code is a prefix of another."""
