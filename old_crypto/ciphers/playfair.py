"""
Playfair Digraph Cipher
=======================
Charles Wheatstone, 1854; promoted by Lord Playfair. Used by the British
in the Boer War and WWI, and by Australian coastwatchers in WWII.

Letters are enciphered two at a time on a keyed 5x5 square (I and J share
a cell):

  same row     -> each letter takes the one to its right (wrapping)
  same column  -> each letter takes the one below it (wrapping)
  otherwise    -> each letter takes the corner of the rectangle in its
                  own row

Decoding moves left and up instead; the rectangle rule is its own inverse.

Before enciphering, a filler (X) separates doubled letters inside a pair
and pads a final lone letter. Q replaces X as filler when the doubled
letter is X itself, so a filler never sits next to a copy of itself.
"""

import logging
from typing import Tuple

from ..block import BlockResult, Cipher, register_cipher
from ..errors import InvalidConfiguration, InvalidSymbol
from ..helpers import ALPHABET25, Grid, prepare_digrams, strip_positions

logger = logging.getLogger(__name__)


@register_cipher
class PlayfairCipher(Cipher):
    """Playfair over a keyed grid (5x5 with I/J conflation by default)."""

    name = "playfair"
    description = "Digraph substitution on a keyed 5x5 square."
    key_names = ("key",)
    block_size = 2

    CONFLATION = {"J": "I"}

    def __init__(self, key: str = "", letter_conflation: bool = True,
                 filler: str = "X", alt_filler: str = "Q",
                 alphabet: str = None, grid_size: Tuple[int, int] = None):
        if alphabet is None:
            if not letter_conflation:
                raise InvalidConfiguration(
                    "Playfair without letter conflation needs an explicit alphabet "
                    "that fills the grid."
                )
            alphabet = ALPHABET25
        conflation = self.CONFLATION if letter_conflation else None
        if grid_size is None:
            side = int(round(len(alphabet) ** 0.5))
            grid_size = (side, side)
        rows, cols = grid_size

        self.grid = Grid(key, alphabet, rows, cols, conflation)
        if filler == alt_filler:
            raise InvalidConfiguration("Playfair filler and alternate filler must differ.")
        for fill in (filler, alt_filler):
            if len(fill) != 1 or self.grid.normalize(fill) != fill or fill not in self.grid:
                raise InvalidConfiguration(
                    f"Playfair filler {fill!r} must be a single grid symbol."
                )
        self.filler = filler
        self.alt_filler = alt_filler
        logger.debug(f"Playfair grid: {' / '.join(self.grid.lines())}")

    def _normalize(self, text: str) -> str:
        out = []
        for i, ch in enumerate(text):
            if ch not in self.grid:
                raise InvalidSymbol(ch, self.name, i)
            out.append(self.grid.normalize(ch))
        return "".join(out)

    def _transform(self, a: str, b: str, step: int) -> str:
        r1, c1 = self.grid.coords(a)
        r2, c2 = self.grid.coords(b)
        if r1 == r2:
            return self.grid.at(r1, c1 + step) + self.grid.at(r2, c2 + step)
        if c1 == c2:
            return self.grid.at(r1 + step, c1) + self.grid.at(r2 + step, c2)
        return self.grid.at(r1, c2) + self.grid.at(r2, c1)

    def encode_block(self, text: str) -> BlockResult:
        prepared, padding = prepare_digrams(self._normalize(text),
                                            self.filler, self.alt_filler)
        out = [self._transform(prepared[i], prepared[i + 1], 1)
               for i in range(0, len(prepared), 2)]
        return BlockResult("".join(out), padding)

    def encode(self, text: str) -> str:
        return self.encode_block(text).text

    def decode(self, text: str) -> str:
        """Digraph plaintext, fillers still in place."""
        text = self._normalize(text)
        if len(text) % 2:
            raise InvalidSymbol(text[-1], self.name, len(text) - 1)
        return "".join(self._transform(text[i], text[i + 1], -1)
                       for i in range(0, len(text), 2))

    def decode_block(self, block: BlockResult) -> str:
        return strip_positions(self.decode(block.text), block.padding)

    def __repr__(self):
        return f"PlayfairCipher({self.grid.symbols!r})"
