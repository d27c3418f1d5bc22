"""
Wheatstone Cryptograph
======================
Charles Wheatstone's 1867 cipher device: two concentric alphabets behind a
pair of geared hands.

The outer (plaintext) disc carries 27 positions, the 26 letters plus a
blank used as word separator (written ``+`` here). The inner (ciphertext)
disc carries 26. Turning the long hand clockwise to the next plaintext
letter moves the short hand by the same number of steps, so after one full
turn the two discs have slipped one position relative to each other. That
slip is what makes the substitution change from letter to letter.

A repeated letter would need a full turn of 27 steps, which the short hand
cannot tell apart from a single step, so repeats are broken up with a
filler (Q, or X when the repeated letter is Q) as operators did.

Key material: a start letter for the short hand and two keywords that mix
the discs.
"""

import logging

from ..block import BlockResult, Cipher, register_cipher
from ..errors import InvalidKey, InvalidSymbol
from ..helpers import ALPHABET, break_doubles, shuffle, strip_positions

logger = logging.getLogger(__name__)


@register_cipher
class Wheatstone(Cipher):
    """Two-disc Wheatstone cryptograph."""

    name = "wheatstone"
    description = "Wheatstone's two-disc cryptograph (27/26 positions)."
    key_names = ("start", "plain_key", "cipher_key")

    SEPARATOR = "+"

    def __init__(self, start: str, plain_key: str, cipher_key: str,
                 filler: str = "Q", alt_filler: str = "X"):
        if not plain_key or not cipher_key:
            raise InvalidKey("Wheatstone keys can not be empty.")
        plain_key, cipher_key = plain_key.upper(), cipher_key.upper()
        for key in (plain_key, cipher_key):
            if any(c not in ALPHABET for c in key):
                raise InvalidKey(f"Wheatstone key must be alphabetic: {key!r}")
        start = (start or "").upper()
        if len(start) != 1 or start not in ALPHABET:
            raise InvalidKey(f"Wheatstone start must be a single letter, got {start!r}")
        for fill in (filler, alt_filler):
            if len(fill) != 1 or fill not in ALPHABET:
                raise InvalidKey(f"Wheatstone filler must be a single letter, got {fill!r}")

        self.plain_wheel = self.SEPARATOR + shuffle(plain_key, ALPHABET)
        self.cipher_wheel = shuffle(cipher_key, ALPHABET)
        self.start = start
        self.filler = filler
        self.alt_filler = alt_filler

        self._plain_pos = {c: i for i, c in enumerate(self.plain_wheel)}
        self._cipher_pos = {c: i for i, c in enumerate(self.cipher_wheel)}
        self._start_pos = self._cipher_pos[start]
        logger.debug(f"Wheatstone plain={self.plain_wheel} cipher={self.cipher_wheel} "
                     f"start={start}@{self._start_pos}")

    def _check(self, text: str, table: dict):
        for i, ch in enumerate(text):
            if ch not in table:
                raise InvalidSymbol(ch, self.name, i)

    def encode_block(self, text: str) -> BlockResult:
        self._check(text, self._plain_pos)
        prepared, padding = break_doubles(text, self.filler, self.alt_filler,
                                          previous=self.SEPARATOR)
        n_plain, n_cipher = len(self.plain_wheel), len(self.cipher_wheel)
        cur, ctpos = 0, self._start_pos
        out = []
        for ch in prepared:
            a = self._plain_pos[ch]
            off = a - cur if a > cur else a + n_plain - cur
            cur = a
            ctpos = (ctpos + off) % n_cipher
            out.append(self.cipher_wheel[ctpos])
        return BlockResult("".join(out), padding)

    def encode(self, text: str) -> str:
        return self.encode_block(text).text

    def decode(self, text: str) -> str:
        """Plaintext as enciphered, fillers included."""
        self._check(text, self._cipher_pos)
        n_plain, n_cipher = len(self.plain_wheel), len(self.cipher_wheel)
        cur, ctpos = 0, self._start_pos
        out = []
        for ch in text:
            a = self._cipher_pos[ch]
            off = a - ctpos if a > ctpos else a + n_cipher - ctpos
            ctpos = a
            cur = (cur + off) % n_plain
            out.append(self.plain_wheel[cur])
        return "".join(out)

    def decode_block(self, block: BlockResult) -> str:
        return strip_positions(self.decode(block.text), block.padding)

    def __repr__(self):
        return f"Wheatstone(start={self.start!r})"
