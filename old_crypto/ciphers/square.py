"""
Polybius Square (bigrammatic substitution)
==========================================
Polybius, 2nd century BC: every letter is replaced by its row and column
in a square, so one letter becomes two coordinate symbols.

The square here is keyed: keyword first, then the rest of the alphabet.
Coordinates can be any symbols, digits for the classic square or the
letters A D F G V X for the German field cipher of 1918.

  6 coordinate symbols -> 6x6 over A-Z and 0-9, no conflation
  5 coordinate symbols -> 5x5 over A-Z with J written as I

Role in the stack: first stage of ADFGVX.
"""

import logging

from ..block import Cipher, register_cipher
from ..errors import InvalidConfiguration, InvalidKey, InvalidSymbol
from ..helpers import ALPHABET25, BASE36, Grid

logger = logging.getLogger(__name__)


@register_cipher
class SquareCipher(Cipher):
    """Keyed Polybius square with configurable coordinate symbols."""

    name = "square"
    description = "Keyed Polybius square: each symbol becomes a coordinate pair."
    key_names = ("key", "chrs")

    ALPHABETS = {
        6: (BASE36, None),
        5: (ALPHABET25, {"J": "I"}),
    }

    def __init__(self, key: str, chrs: str = "12345", alphabet: str = None,
                 letter_conflation: bool = None):
        if not key or not chrs:
            raise InvalidKey("neither key nor chrs can be empty")
        if len(set(chrs)) != len(chrs):
            raise InvalidConfiguration(f"coordinate symbols must be unique: {chrs!r}")

        default_alphabet, conflation = self.ALPHABETS.get(len(chrs), (None, None))
        if alphabet is None:
            if default_alphabet is None:
                raise InvalidConfiguration(
                    f"no default alphabet for a {len(chrs)}x{len(chrs)} square; pass one"
                )
            alphabet = default_alphabet
        if letter_conflation is not None:
            conflation = {"J": "I"} if letter_conflation else None

        self.key = key.upper()
        self.chrs = chrs
        self.grid = Grid(self.key, alphabet, len(chrs), len(chrs), conflation)
        self._coord_pos = {c: i for i, c in enumerate(chrs)}
        logger.debug(f"Square {chrs}: {self.grid.symbols}")

    @property
    def block_size(self) -> int:
        return len(self.key)

    def encode(self, text: str) -> str:
        out = []
        for i, ch in enumerate(text):
            try:
                r, c = self.grid.coords(ch)
            except KeyError:
                raise InvalidSymbol(ch, self.name, i) from None
            out.append(self.chrs[r] + self.chrs[c])
        return "".join(out)

    def decode(self, text: str) -> str:
        for i, ch in enumerate(text):
            if ch not in self._coord_pos:
                raise InvalidSymbol(ch, self.name, i)
        if len(text) % 2:
            raise InvalidSymbol(text[-1], self.name, len(text) - 1)
        return "".join(self.grid.at(self._coord_pos[text[i]], self._coord_pos[text[i + 1]])
                       for i in range(0, len(text), 2))

    def __repr__(self):
        return f"SquareCipher({self.key!r}, {self.chrs!r})"
