"""
Columnar Transposition
======================
The text is written in rows under the key and read out column by column,
in the alphabetical order of the key letters (ties left to right).

    key   S U B W A Y         rank  2 3 1 4 0 5
          A T T A C K
          A T D A W N

    -> CW TD AA TT AA KN

No padding is added: the last row may be short, leaving the columns on its
right one symbol shorter. The decoder recovers the column heights from the
message length alone.

Also here: the irregular ("disrupted") variant used as the second VIC
transposition, where triangular areas of the block are filled last.
"""

import logging
from typing import List, Tuple

from ..block import Cipher, register_cipher
from ..errors import InvalidKey
from ..helpers import to_numeric

logger = logging.getLogger(__name__)


@register_cipher
class Transposition(Cipher):
    """Keyed columnar transposition without padding."""

    name = "transposition"
    description = "Columnar transposition, columns read in key order."
    key_names = ("key",)

    def __init__(self, key: str):
        if not key:
            raise InvalidKey("transposition key can not be empty")
        self.key = key
        self.tkey = to_numeric(key)
        self.order = sorted(range(len(self.tkey)), key=self.tkey.__getitem__)
        logger.debug(f"Transposition {key}: order={self.order}")

    @property
    def block_size(self) -> int:
        return len(self.tkey)

    def encode(self, text: str) -> str:
        klen = len(self.tkey)
        return "".join(text[col::klen] for col in self.order)

    def decode(self, text: str) -> str:
        klen = len(self.tkey)
        rows, extra = divmod(len(text), klen)
        columns = [""] * klen
        current = 0
        for col in self.order:
            height = rows + 1 if col < extra else rows
            columns[col] = text[current:current + height]
            current += height
        return "".join(columns[c][r] for r in range(rows + 1) for c in range(klen)
                       if r < len(columns[c]))

    def __repr__(self):
        return f"Transposition({self.key!r})"


@register_cipher
class IrregularTransposition(Transposition):
    """
    Disrupted columnar transposition.

    Two staircases start at the columns ranked 0 and 1 and widen by one
    column per row. Ordinary cells are filled first, row by row; the
    staircase cells take the rest of the text, also row by row. Read-out
    is the same as for the plain transposition.
    """

    name = "irregular"
    description = "Disrupted (triangular area) columnar transposition."

    def __init__(self, key: str):
        super().__init__(key)
        self.rank_pos = (self.tkey.index(0), self.tkey.index(1) if len(self.tkey) > 1 else 0)

    def in_triangle(self, row: int, col: int) -> bool:
        return (col >= self.rank_pos[0] + row or col >= self.rank_pos[1] + row) \
            and col < len(self.tkey)

    def _layout(self, length: int) -> List[Tuple[int, int]]:
        """Cells in fill order, exactly ``length`` of them."""
        klen = len(self.tkey)
        rows = -(-length // klen)
        cells = [(r, c) for r in range(rows) for c in range(klen)]
        plain = [cell for cell in cells if not self.in_triangle(*cell)]
        triangle = [cell for cell in cells if self.in_triangle(*cell)]
        return (plain + triangle)[:length]

    def encode(self, text: str) -> str:
        grid = dict(zip(self._layout(len(text)), text))
        rows = -(-len(text) // len(self.tkey))
        return "".join(grid[(r, col)] for col in self.order for r in range(rows)
                       if (r, col) in grid)

    def decode(self, text: str) -> str:
        layout = self._layout(len(text))
        active = set(layout)
        rows = -(-len(text) // len(self.tkey))
        column_cells = [(r, col) for col in self.order for r in range(rows)
                        if (r, col) in active]
        grid = dict(zip(column_cells, text))
        return "".join(grid[cell] for cell in layout)

    def __repr__(self):
        return f"IrregularTransposition({self.key!r})"
