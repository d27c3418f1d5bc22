"""
Block cipher contract
=====================
One capability shared by every cipher in the package: ``encode`` a symbol
stream into another, ``decode`` it back.

Ciphers register themselves by name so the CLI and the demo can build any
of them from a name, a list of keys and keyword options. Composite ciphers
(ADFGVX, Nihilist, VIC) are ``Pipeline`` instances: an ordered list of
stages, each a cipher in its own right.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Type

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockResult:
    """
    Output of ``encode_block``.

    ``padding`` lists the positions, in the decoded stream, of filler
    symbols the encoder inserted (Playfair doubled letters, Wheatstone
    repeats). ``decode_block`` drops them.
    """

    text: str
    padding: Tuple[int, ...] = ()


class Cipher(ABC):
    """Abstract base class that every cipher implements."""

    name: str = ""
    description: str = ""
    key_names: Tuple[str, ...] = ()
    block_size: int = 1

    @abstractmethod
    def encode(self, text: str) -> str:
        """Plaintext -> ciphertext."""

    @abstractmethod
    def decode(self, text: str) -> str:
        """Ciphertext -> plaintext."""

    def encode_block(self, text: str) -> BlockResult:
        return BlockResult(self.encode(text))

    def decode_block(self, block: BlockResult) -> str:
        return self.decode(block.text)

    def __repr__(self):
        return f"{type(self).__name__}()"


CIPHER_REGISTRY: Dict[str, Type[Cipher]] = {}


def register_cipher(cls):
    """Class decorator: make the cipher available by its ``name``."""
    if not cls.name:
        raise InvalidConfiguration(f"{cls.__name__} has no name")
    CIPHER_REGISTRY[cls.name] = cls
    return cls


def create(name: str, *keys, **options) -> Cipher:
    """
    Build a registered cipher from its name, keys and options.

    Raises InvalidConfiguration for an unknown name or for keys/options the
    cipher's constructor does not take.
    """
    cls = CIPHER_REGISTRY.get(name.lower())
    if cls is None:
        raise InvalidConfiguration(
            f"unknown cipher {name!r} (known: {', '.join(sorted(CIPHER_REGISTRY))})"
        )
    try:
        inspect.signature(cls).bind(*keys, **options)
    except TypeError as e:
        raise InvalidConfiguration(f"{name}: {e}") from e
    logger.debug(f"create {name}: {len(keys)} key(s), options={sorted(options)}")
    return cls(*keys, **options)


class Pipeline(Cipher):
    """Stages applied in order on encode and in reverse order on decode."""

    name = "pipeline"
    description = "Sequence of cipher stages."

    def __init__(self, stages: Sequence[Cipher]):
        if not stages:
            raise InvalidConfiguration("a pipeline needs at least one stage")
        self.stages: List[Cipher] = list(stages)

    @property
    def block_size(self) -> int:
        return self.stages[-1].block_size

    def encode(self, text: str) -> str:
        for stage in self.stages:
            text = stage.encode(text)
        return text

    def decode(self, text: str) -> str:
        for stage in reversed(self.stages):
            text = stage.decode(text)
        return text

    def __repr__(self):
        inner = ", ".join(repr(s) for s in self.stages)
        return f"{type(self).__name__}([{inner}])"
