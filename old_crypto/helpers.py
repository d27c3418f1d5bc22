"""
Alphabet and grid helpers shared by the ciphers.

Key schedules in this package are built out of a handful of primitives:
condensing a keyword (dropping repeated letters), appending the rest of the
alphabet, laying the result out as a grid, ranking key letters to get a
column order, and the checkerboard "shuffle" that transposes a keyed
alphabet by the keyword itself.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .errors import InvalidConfiguration, InvalidKey

logger = logging.getLogger(__name__)

ALPHABET     = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET25   = "ABCDEFGHIKLMNOPQRSTUVWXYZ"           # J merged into I
BASE36       = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
ALPHABET_TXT = "ABCDEFGHIJKLMNOPQRSTUVWXYZ/-"         # checkerboard alphabet
DIGITS       = "0123456789"


def condense(text: str) -> str:
    """Remove repeated symbols, keeping the first occurrence of each."""
    return "".join(dict.fromkeys(text))


def keyed_alphabet(key: str, alphabet: str) -> str:
    """
    Keyword first, then the rest of the alphabet in canonical order.

    A key that already covers the whole alphabet contributes only its
    unique letters; nothing is appended.
    """
    return condense(key + alphabet)


def shuffle(key: str, alphabet: str) -> str:
    """
    Checkerboard-style mixed alphabet.

    The keyed alphabet is written under the condensed key and read back by
    columns, last column first, removing each symbol as it is taken:

        ARABESQUE + ABCDEFGHIJKLMNOPQRSTUVWXYZ/-  ->  ACKVRDLWBFMXEGNYSHOZQIP/UJT-

    Key symbols outside ``alphabet`` (the digits of a VIC key, for example)
    take part in the transposition; callers filter them out afterwards.
    """
    word = list(condense(key + alphabet))
    length = len(condense(key))
    if length == 0:
        raise InvalidKey("shuffle key can not be empty")

    height = -(-len(alphabet) // length)

    res = []
    for i in reversed(range(length)):
        for j in range(height + 1):
            if len(word) <= max(height - 1, 0):
                return "".join(res + word)
            if i * j < len(word):
                res.append(word.pop(i * j))
    return "".join(res)


def to_numeric(key: str) -> List[int]:
    """
    Rank every key symbol; equal symbols are ranked left to right.

        ARABESQUE -> [0, 6, 1, 2, 3, 7, 5, 8, 4]
    """
    order = sorted(range(len(key)), key=lambda i: (key[i], i))
    ranks = [0] * len(key)
    for rank, idx in enumerate(order):
        ranks[idx] = rank
    return ranks


def by_n(text: str, n: int) -> str:
    """Insert a space every ``n`` symbols."""
    return " ".join(text[i:i + n] for i in range(0, len(text), n))


def output_as_block(text: str) -> str:
    """Traditional five-symbol groups."""
    return by_n(text, 5)


def normalize(text: str) -> str:
    """Uppercase and drop all whitespace."""
    return "".join(text.upper().split())


def _pick_filler(symbol: str, filler: str, alt_filler: str) -> str:
    return alt_filler if symbol == filler else filler


def prepare_digrams(text: str, filler: str = "X",
                    alt_filler: str = "Q") -> Tuple[str, Tuple[int, ...]]:
    """
    Split ``text`` into digrams for Playfair.

    A pair made of two identical letters gets a filler between them and the
    second letter moves on to the next pair; a lone final letter is padded.
    When the letter itself is the filler, ``alt_filler`` is used instead.

    Returns the prepared text and the positions of every inserted filler.
    """
    out: List[str] = []
    positions: List[int] = []
    i = 0
    while i < len(text):
        a = text[i]
        b = text[i + 1] if i + 1 < len(text) else None
        if b is None or a == b:
            out.append(a)
            positions.append(len(out))
            out.append(_pick_filler(a, filler, alt_filler))
            i += 1
        else:
            out.extend((a, b))
            i += 2
    return "".join(out), tuple(positions)


def break_doubles(text: str, filler: str = "Q", alt_filler: str = "X",
                  previous: Optional[str] = None) -> Tuple[str, Tuple[int, ...]]:
    """
    Put a filler between every pair of identical consecutive symbols.

        AAAAA -> AQAQAQAQA

    ``previous`` is the symbol considered to precede the text.
    """
    out: List[str] = []
    positions: List[int] = []
    prev = previous
    for ch in text:
        if ch == prev:
            positions.append(len(out))
            out.append(_pick_filler(ch, filler, alt_filler))
        out.append(ch)
        prev = ch
    return "".join(out), tuple(positions)


def strip_positions(text: str, positions) -> str:
    """Drop the symbols found at ``positions``."""
    drop = set(positions)
    return "".join(ch for i, ch in enumerate(text) if i not in drop)


class Grid:
    """
    Keyed rows x cols grid with a bijective symbol <-> (row, col) mapping.

    ``conflation`` maps symbols that share a cell onto the one stored in the
    grid, e.g. ``{"J": "I"}`` for the classic 5x5 square. It applies to the
    keyword and to every lookup.
    """

    def __init__(self, key: str, alphabet: str, rows: int, cols: int,
                 conflation: Optional[Dict[str, str]] = None):
        if len(set(alphabet)) != len(alphabet):
            raise InvalidConfiguration("grid alphabet contains duplicate symbols")
        if rows < 1 or cols < 1 or rows * cols != len(alphabet):
            raise InvalidConfiguration(
                f"a {rows}x{cols} grid can not hold {len(alphabet)} symbols"
            )
        self.conflation = dict(conflation or {})
        for src, dst in self.conflation.items():
            if src in alphabet or dst not in alphabet:
                raise InvalidConfiguration(
                    f"conflation {src}->{dst} does not fit the grid alphabet"
                )

        key = "".join(self.normalize(c) for c in key.upper())
        bad = sorted(set(c for c in key if c not in alphabet))
        if bad:
            raise InvalidKey(f"key symbols not in grid alphabet: {''.join(bad)}")

        self.rows = rows
        self.cols = cols
        self.symbols = keyed_alphabet(key, alphabet)
        self._coords = {s: divmod(i, cols) for i, s in enumerate(self.symbols)}
        logger.debug(f"Grid {rows}x{cols}: {self.symbols}")

    def normalize(self, symbol: str) -> str:
        return self.conflation.get(symbol, symbol)

    def coords(self, symbol: str) -> Tuple[int, int]:
        """(row, col) of ``symbol``; raises KeyError when it is not in the grid."""
        return self._coords[self.normalize(symbol)]

    def at(self, row: int, col: int) -> str:
        """Symbol at (row, col), both wrapping around."""
        return self.symbols[(row % self.rows) * self.cols + (col % self.cols)]

    def __contains__(self, symbol: str) -> bool:
        return self.normalize(symbol) in self._coords

    def lines(self) -> List[str]:
        return [self.symbols[r * self.cols:(r + 1) * self.cols]
                for r in range(self.rows)]

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols}, {self.symbols!r})"
