"""
VIC Cipher
==========
The hand cipher of Soviet agent Reino Häyhänen ("VICTOR"), whose 1957
defection exposed it. Probably the most complex pencil-and-paper cipher
ever fielded.

Key material:
  personal number    two digits, the checkerboard escape digits
  indicator          at least five digits (a date in the original)
  phrase             20 letters (a line of a song)
  message indicator  five random digits sent with the message

Key derivation chains everything through mod-10 arithmetic:

  1. message indicator minus the first five indicator digits (no borrow)
  2. extend to ten digits by chain addition
  3. add the ranks of the first half of the phrase (no carry)
  4. substitute through the ranks of the second half of the phrase
  5. five rounds of in-place chain addition

Step 4 gives the first transposition key, step 5 the second, and the ranks
of step 5 the checkerboard key.

The derivation is a plain function passed to the cipher, so other
published variants of the chain can be swapped in and checked against
their own worked examples.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..block import Pipeline, register_cipher
from ..errors import InvalidKey
from ..helpers import ALPHABET, ALPHABET_TXT, DIGITS, to_numeric
from .straddling import StraddlingCheckerboard
from .transposition import Transposition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VicKeys:
    first_transposition: str
    second_transposition: str
    checkerboard: str


def str2int(text: str) -> List[int]:
    return [int(c) for c in text]


def int2str(digits: Sequence[int]) -> str:
    return "".join(str(d) for d in digits)


def addmod10(a: Sequence[int], b: Sequence[int]) -> List[int]:
    return [(x + y) % 10 for x, y in zip(a, b)]


def submod10(a: Sequence[int], b: Sequence[int]) -> List[int]:
    return [(x - y) % 10 for x, y in zip(a, b)]


def chainadd_inplace(a: List[int]) -> None:
    """Lagged Fibonacci step: each digit plus its right neighbour, wrapping."""
    n = len(a)
    for i in range(n):
        a[i] = (a[i] + a[(i + 1) % n]) % 10


def chainadd(a: Sequence[int]) -> List[int]:
    b = list(a)
    chainadd_inplace(b)
    return b


def expand5to10(a: Sequence[int]) -> List[int]:
    return list(a) + chainadd(a)


def first_encode(a: Sequence[int], b: Sequence[int]) -> List[int]:
    """Replace each digit d of ``a`` by ``b[d - 1]``; 0 stands for the tenth."""
    return [b[(v - 1) % 10] for v in a]


def phrase_ranks(half: str) -> List[int]:
    """Ranks numbered 1..9 then 0, as written on the pad."""
    return [(x + 1) % 10 for x in to_numeric(half)]


def derive_keys(phrase: str, message_indicator: str, indicator: str) -> VicKeys:
    """Default VIC key chain."""
    ph1 = phrase_ranks(phrase[:10])
    ph2 = phrase_ranks(phrase[10:20])

    first = expand5to10(submod10(str2int(message_indicator), str2int(indicator[:5])))
    second = first_encode(addmod10(first, ph1), ph2)

    third = list(second)
    for _ in range(5):
        chainadd_inplace(third)

    sckey = to_numeric(int2str(third))
    return VicKeys(int2str(second), int2str(third), int2str(sckey))


@register_cipher
class VicCipher(Pipeline):
    """Checkerboard, then two columnar transpositions, all keyed by the VIC chain."""

    name = "vic"
    description = "VIC: keyed checkerboard + double transposition from a derived key chain."
    key_names = ("personal_number", "indicator", "phrase", "message_indicator")

    FREQUENT = "ATONESIR"

    def __init__(self, personal_number: str, indicator: str, phrase: str,
                 message_indicator: str,
                 key_schedule: Callable[[str, str, str], VicKeys] = derive_keys,
                 frequent_letters: str = FREQUENT):
        indicator, message_indicator = str(indicator), str(message_indicator)
        phrase = phrase.upper()
        if len(indicator) < 5 or any(c not in DIGITS for c in indicator):
            raise InvalidKey(f"VIC indicator needs at least 5 digits, got {indicator!r}")
        if len(message_indicator) != 5 or any(c not in DIGITS for c in message_indicator):
            raise InvalidKey(f"VIC message indicator must be 5 digits, got {message_indicator!r}")
        if len(phrase) < 20 or any(c not in ALPHABET for c in phrase):
            raise InvalidKey("VIC phrase needs at least 20 letters")

        self.keys = key_schedule(phrase, message_indicator, indicator)
        logger.debug(f"VIC keys: {self.keys}")

        self.checkerboard = StraddlingCheckerboard(self.keys.checkerboard, personal_number,
                                                   frequent_letters, ALPHABET_TXT)
        self.first_transposition = Transposition(self.keys.first_transposition)
        self.second_transposition = Transposition(self.keys.second_transposition)
        super().__init__([self.checkerboard, self.first_transposition,
                          self.second_transposition])
