"""
old_crypto — Paper & pencil ciphers
===================================
Classical substitution, transposition and composite ciphers behind one
encode/decode contract, from Caesar to the VIC cipher.

Ciphers:
    null           — identity
    caesar         — shift cipher
    wheatstone     — Wheatstone's two-disc cryptograph (1867)
    playfair       — digraph substitution on a keyed 5x5 square (1854)
    chaocipher     — Byrne's self-permuting wheels (1918)
    square         — keyed Polybius square
    straddling     — straddling checkerboard
    transposition  — columnar transposition (+ irregular variant)
    adfgvx         — square + transposition (1918)
    nihilist       — checkerboard + additive key + transposition
    vic            — checkerboard + double transposition, VIC key chain (1950s)
    solitaire      — Schneier's card keystream (1999)

None of these offer any confidentiality against modern cryptanalysis.
"""

__version__ = "1.0.0"

from .errors import (
    CipherError, InvalidSymbol, InvalidKey, InvalidConfiguration, AmbiguousDecode,
)
from .block                     import Cipher, BlockResult, Pipeline, CIPHER_REGISTRY, create
from .ciphers.null              import NullCipher
from .ciphers.caesar            import CaesarCipher
from .ciphers.wheatstone        import Wheatstone
from .ciphers.playfair          import PlayfairCipher
from .ciphers.chaocipher        import Chaocipher
from .ciphers.square            import SquareCipher
from .ciphers.straddling        import StraddlingCheckerboard
from .ciphers.transposition     import Transposition, IrregularTransposition
from .ciphers.adfgvx            import ADFGVX
from .ciphers.nihilist          import Nihilist, AdditiveKey
from .ciphers.vic               import VicCipher, VicKeys, derive_keys
from .ciphers.solitaire         import Solitaire

__all__ = [
    "CipherError",
    "InvalidSymbol",
    "InvalidKey",
    "InvalidConfiguration",
    "AmbiguousDecode",
    "Cipher",
    "BlockResult",
    "Pipeline",
    "CIPHER_REGISTRY",
    "create",
    "NullCipher",
    "CaesarCipher",
    "Wheatstone",
    "PlayfairCipher",
    "Chaocipher",
    "SquareCipher",
    "StraddlingCheckerboard",
    "Transposition",
    "IrregularTransposition",
    "ADFGVX",
    "Nihilist",
    "AdditiveKey",
    "VicCipher",
    "VicKeys",
    "derive_keys",
    "Solitaire",
]
