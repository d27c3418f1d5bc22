"""
ADFGVX
======
Fritz Nebel, March 1918. German army field cipher on the Western Front,
broken by Georges Painvin in time to anticipate the June offensive.

Two stages:
  1. Polybius square keyed with the first key, coordinates A D F G V X
     (letters chosen for being unmistakable in Morse)
  2. Columnar transposition of the coordinate stream under the second key
"""

from ..block import Pipeline, register_cipher
from .square import SquareCipher
from .transposition import Transposition


@register_cipher
class ADFGVX(Pipeline):
    """Polybius square with A D F G V X coordinates + columnar transposition."""

    name = "adfgvx"
    description = "ADFGVX: 6x6 Polybius square, then columnar transposition."
    key_names = ("square_key", "transposition_key")

    COORDINATES = "ADFGVX"

    def __init__(self, square_key: str, transposition_key: str):
        self.square = SquareCipher(square_key, self.COORDINATES)
        self.transposition = Transposition(transposition_key)
        super().__init__([self.square, self.transposition])
