"""
Straddling Checkerboard
=======================
Variable-length digit code used by Soviet field agents from the 1940s on
(the VIC cipher's first stage) and by anarchist and Nihilist networks
before them.

The eight most frequent letters get one digit each. The two digits left
over ("escape" digits) head the rows of two-digit codes for every other
letter:

        0 1 2 3 4 5 6 7 8 9        ARABESQUE, escape 8 and 9
        A R E N S I U T            A=0 R=1 E=2 ...
     8  C K V D L W B F M X        C=80 K=81 ...
     9  G Y H O Z Q P / J -        G=90 ... /=97

The letter order comes from the key-shuffled alphabet; the frequent set is
configuration, not computed from any text. Because no single-digit code is
an escape digit, a decoder can always tell a one-digit code from the first
half of a two-digit one. That property is checked when the board is built.

Numbers are sent as figures between two "/" codes with every digit doubled:
``2`` becomes ``97 22 97`` on the board above. "/" is therefore reserved
and can not appear in the plaintext on its own.
"""

import logging
from typing import Dict

from ..block import Cipher, register_cipher
from ..errors import AmbiguousDecode, InvalidConfiguration, InvalidKey, InvalidSymbol
from ..helpers import ALPHABET_TXT, DIGITS, shuffle

logger = logging.getLogger(__name__)


@register_cipher
class StraddlingCheckerboard(Cipher):
    """Straddling checkerboard with key-shuffled alphabet."""

    name = "straddling"
    description = "Straddling checkerboard: 1-digit codes for frequent letters, 2 for the rest."
    key_names = ("key", "escape_digits")

    FREQUENT = "ESANTIRU"
    NUMBER_MARKER = "/"

    def __init__(self, key: str, escape_digits: str = "89",
                 frequent_letters: str = FREQUENT, alphabet: str = ALPHABET_TXT):
        if not key:
            raise InvalidKey("checkerboard key can not be empty")
        escape_digits = str(escape_digits)
        if (len(escape_digits) != 2 or escape_digits[0] == escape_digits[1]
                or any(d not in DIGITS for d in escape_digits)):
            raise InvalidConfiguration(
                f"escape digits must be two distinct digits, got {escape_digits!r}"
            )
        frequent_letters = frequent_letters.upper()
        short_digits = [d for d in DIGITS if d not in escape_digits]
        if (len(frequent_letters) != len(short_digits)
                or len(set(frequent_letters)) != len(frequent_letters)
                or any(c not in alphabet for c in frequent_letters)):
            raise InvalidConfiguration(
                f"need {len(short_digits)} distinct frequent letters from the alphabet, "
                f"got {frequent_letters!r}"
            )
        if len(alphabet) - len(short_digits) > 2 * len(DIGITS):
            raise InvalidConfiguration(f"alphabet of {len(alphabet)} symbols does not fit the board")

        self.key = key.upper()
        self.escape_digits = escape_digits
        self.frequent_letters = frequent_letters
        self.alphabet = alphabet

        full = shuffle(self.key, alphabet)
        self.full = "".join(c for c in full if c in alphabet)

        long_codes = [e + d for e in escape_digits for d in DIGITS]
        self.codes: Dict[str, str] = {}
        short_iter, long_iter = iter(short_digits), iter(long_codes)
        for ch in self.full:
            if ch in frequent_letters:
                self.codes[ch] = next(short_iter)
            else:
                self.codes[ch] = next(long_iter)
        self._letters = {code: ch for ch, code in self.codes.items()}

        self.check_prefix_free()
        logger.debug(f"Checkerboard {self.key} escape={escape_digits}: {self.full}")

    def check_prefix_free(self):
        """Raise AmbiguousDecode if any code is a proper prefix of another."""
        codes = sorted(self.codes.values())
        for a in codes:
            for b in codes:
                if a != b and b.startswith(a):
                    raise AmbiguousDecode(f"checkerboard code {a} is a prefix of {b}")

    @property
    def block_size(self) -> int:
        return len(self.key)

    def encode(self, text: str) -> str:
        marker = self.codes.get(self.NUMBER_MARKER)
        out = []
        for i, ch in enumerate(text):
            if ch in DIGITS and marker is not None:
                out.append(marker + ch + ch + marker)
            elif ch in self.codes and ch != self.NUMBER_MARKER:
                out.append(self.codes[ch])
            else:
                raise InvalidSymbol(ch, self.name, i)
        return "".join(out)

    def decode(self, text: str) -> str:
        for i, ch in enumerate(text):
            if ch not in DIGITS:
                raise InvalidSymbol(ch, self.name, i)

        marker = self.codes.get(self.NUMBER_MARKER)
        out = []
        i = 0
        while i < len(text):
            width = 2 if text[i] in self.escape_digits else 1
            code = text[i:i + width]
            if len(code) < width or code not in self._letters:
                raise InvalidSymbol(code, self.name, i)
            i += width
            ch = self._letters[code]
            if ch == self.NUMBER_MARKER:
                figure = text[i:i + 2]
                if (len(figure) == 2 and figure[0] == figure[1]
                        and text[i + 2:i + 2 + len(marker)] == marker):
                    out.append(figure[0])
                    i += 2 + len(marker)
                    continue
            out.append(ch)
        return "".join(out)

    def __repr__(self):
        return f"StraddlingCheckerboard({self.key!r}, {self.escape_digits!r})"
