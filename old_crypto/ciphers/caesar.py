"""
Caesar Shift Cipher
===================
Every letter moves a fixed number of places down the alphabet.

Historical note: Suetonius reports Julius Caesar writing to his generals
with a shift of three. Trivially broken by trying all 25 shifts.

Symbols outside the alphabet (spaces, punctuation, lowercase) pass through
unchanged in both directions.
"""

import logging

from ..block import Cipher, register_cipher
from ..errors import InvalidConfiguration, InvalidKey
from ..helpers import ALPHABET

logger = logging.getLogger(__name__)


@register_cipher
class CaesarCipher(Cipher):
    """Shift cipher over a configurable alphabet."""

    name = "caesar"
    description = "Shift every letter by a fixed amount (non-letters pass through)."
    key_names = ("shift",)

    def __init__(self, shift=3, alphabet: str = ALPHABET):
        if isinstance(shift, bool):
            raise InvalidKey("Caesar shift must be an integer.")
        try:
            shift = int(shift)
        except (TypeError, ValueError):
            raise InvalidKey(f"Caesar shift must be an integer, got {shift!r}.") from None
        if not alphabet or len(set(alphabet)) != len(alphabet):
            raise InvalidConfiguration("Caesar alphabet must be non-empty with unique symbols.")

        self.alphabet = alphabet
        self.shift = shift % len(alphabet)
        shifted = alphabet[self.shift:] + alphabet[:self.shift]
        self._enc = str.maketrans(alphabet, shifted)
        self._dec = str.maketrans(shifted, alphabet)
        logger.debug(f"Caesar shift={self.shift} over {len(alphabet)} symbols")

    def encode(self, text: str) -> str:
        return text.translate(self._enc)

    def decode(self, text: str) -> str:
        return text.translate(self._dec)

    def __repr__(self):
        return f"CaesarCipher(shift={self.shift})"
