"""
Chaocipher
==========
John F. Byrne, 1918. Kept secret until his family donated the mechanism to
the National Cryptologic Museum in 2010.

Two alphabet wheels, left (ciphertext) and right (plaintext), sit side by
side. A letter is looked up on one wheel and the letter aligned with it on
the other is the output. Then both wheels are permuted:

  ciphertext wheel: rotate the used letter to the zenith, pull out the
                    letter at zenith+1 and re-insert it at the nadir
  plaintext wheel:  rotate one step further, pull out the letter at
                    zenith+2 and re-insert it at the nadir

The different extraction points keep the two wheels drifting apart, so
the substitution never repeats with a fixed period.

The wheel pair is the only mutable state in the package. It lives on the
instance and carries over from one call to the next; ``reset()`` puts the
wheels back in their keyed position. Do not share an instance between
threads without a lock.
"""

import logging

from ..block import Cipher, register_cipher
from ..errors import InvalidKey, InvalidSymbol
from ..helpers import ALPHABET

logger = logging.getLogger(__name__)


@register_cipher
class Chaocipher(Cipher):
    """Byrne's Chaocipher with persistent wheel state."""

    name = "chaocipher"
    description = "Two self-permuting alphabet wheels (state carries across calls)."
    key_names = ("plain_wheel", "cipher_wheel")

    ZENITH = 0
    NADIR  = 13

    def __init__(self, plain_wheel: str, cipher_wheel: str):
        plain_wheel, cipher_wheel = plain_wheel.upper(), cipher_wheel.upper()
        for wheel in (plain_wheel, cipher_wheel):
            if len(wheel) != len(ALPHABET) or set(wheel) != set(ALPHABET):
                raise InvalidKey(
                    f"Chaocipher wheel must be a permutation of {ALPHABET}, got {wheel!r}"
                )
        self._plain_key = plain_wheel
        self._cipher_key = cipher_wheel
        self.reset()

    def reset(self):
        """Return both wheels to their keyed position."""
        self.plain_wheel = list(self._plain_key)
        self.cipher_wheel = list(self._cipher_key)
        logger.debug("Chaocipher wheels reset")

    @staticmethod
    def _permute(wheel: list, idx: int, extract: int, nadir: int) -> list:
        wheel = wheel[idx:] + wheel[:idx]
        ch = wheel.pop(extract)
        wheel.insert(nadir, ch)
        return wheel

    def _advance(self, idx: int):
        z, n = self.ZENITH, self.NADIR
        self.cipher_wheel = self._permute(self.cipher_wheel, idx, z + 1, n)
        self.plain_wheel = self._permute(self.plain_wheel, (idx + 1) % len(ALPHABET), z + 2, n)

    def _check(self, text: str):
        for i, ch in enumerate(text):
            if ch not in ALPHABET:
                raise InvalidSymbol(ch, self.name, i)

    def encode(self, text: str) -> str:
        self._check(text)
        out = []
        for ch in text:
            idx = self.plain_wheel.index(ch)
            out.append(self.cipher_wheel[idx])
            self._advance(idx)
        return "".join(out)

    def decode(self, text: str) -> str:
        self._check(text)
        out = []
        for ch in text:
            idx = self.cipher_wheel.index(ch)
            out.append(self.plain_wheel[idx])
            self._advance(idx)
        return "".join(out)

    def wheels(self):
        """Current (plaintext, ciphertext) wheels as strings."""
        return "".join(self.plain_wheel), "".join(self.cipher_wheel)

    def __repr__(self):
        pw, cw = self.wheels()
        return f"Chaocipher(plain={pw!r}, cipher={cw!r})"
