"""
Nihilist Cipher
===============
Russian revolutionary cipher of the 1880s, here in the checkerboard form
later inherited by Soviet services:

  1. straddling checkerboard turns letters into digits
  2. optionally, a repeating numeric key is added digit by digit, mod 10,
     without carries
  3. columnar transposition of the digit stream
"""

import logging

from ..block import Cipher, Pipeline, register_cipher
from ..errors import InvalidKey, InvalidSymbol
from ..helpers import DIGITS
from .straddling import StraddlingCheckerboard
from .transposition import Transposition

logger = logging.getLogger(__name__)


@register_cipher
class AdditiveKey(Cipher):
    """Non-carrying addition of a repeating digit key."""

    name = "additive"
    description = "Add a repeating numeric key digit-wise, mod 10."
    key_names = ("key",)

    def __init__(self, key: str):
        key = str(key)
        if not key or any(d not in DIGITS for d in key):
            raise InvalidKey(f"additive key must be a string of digits, got {key!r}")
        self.key = [int(d) for d in key]

    def _apply(self, text: str, sign: int) -> str:
        for i, ch in enumerate(text):
            if ch not in DIGITS:
                raise InvalidSymbol(ch, self.name, i)
        klen = len(self.key)
        return "".join(str((int(ch) + sign * self.key[i % klen]) % 10)
                       for i, ch in enumerate(text))

    def encode(self, text: str) -> str:
        return self._apply(text, 1)

    def decode(self, text: str) -> str:
        return self._apply(text, -1)


@register_cipher
class Nihilist(Pipeline):
    """Checkerboard, optional additive key, columnar transposition."""

    name = "nihilist"
    description = "Straddling checkerboard + optional additive key + transposition."
    key_names = ("checkerboard_key", "transposition_key", "escape_digits")

    def __init__(self, checkerboard_key: str, transposition_key: str,
                 escape_digits: str = "89", additive_key: str = None,
                 frequent_letters: str = StraddlingCheckerboard.FREQUENT):
        self.checkerboard = StraddlingCheckerboard(checkerboard_key, escape_digits,
                                                   frequent_letters)
        self.additive = AdditiveKey(additive_key) if additive_key else None
        self.transposition = Transposition(transposition_key)
        stages = [self.checkerboard]
        if self.additive is not None:
            stages.append(self.additive)
        stages.append(self.transposition)
        super().__init__(stages)
        logger.debug(f"Nihilist stages: {[s.name for s in self.stages]}")
