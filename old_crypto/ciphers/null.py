"""
Null cipher
===========
Identity transform. Useful as a placeholder stage and for checking the
plumbing around the real ciphers.
"""

from ..block import Cipher, register_cipher


@register_cipher
class NullCipher(Cipher):
    """Returns its input unchanged."""

    name = "null"
    description = "Identity: ciphertext equals plaintext."

    def encode(self, text: str) -> str:
        return text

    def decode(self, text: str) -> str:
        return text
