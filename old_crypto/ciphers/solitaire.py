"""
Solitaire (Pontifex)
====================
Bruce Schneier's playing-card cipher, 1999, written for Neal Stephenson's
"Cryptonomicon". A shuffled deck of 52 cards and two jokers produces a
keystream; letters are added to it mod 26 like a Vigenère.

Deck step:
  1. joker A down one card, joker B down two (wrapping below the top card)
  2. triple cut around the jokers
  3. count cut by the value of the bottom card
Output: count down by the value of the top card; jokers give no output.

Keying: for each passphrase letter, one deck step then a count cut by the
letter's value. Only letters are enciphered; everything else passes through.
The deck restarts from its keyed order on every call.
"""

import logging
from typing import List, Sequence

from ..block import Cipher, register_cipher
from ..errors import InvalidKey

logger = logging.getLogger(__name__)

JOKER_A = 53
JOKER_B = 54
DECK_SIZE = 54


def move_joker(deck: List[int], joker: int, n: int) -> None:
    for _ in range(n):
        pos = deck.index(joker)
        if pos == DECK_SIZE - 1:
            deck.insert(1, deck.pop())
        else:
            deck[pos], deck[pos + 1] = deck[pos + 1], deck[pos]


def count_cut(deck: List[int], count: int) -> None:
    if count < DECK_SIZE - 1:
        deck[:] = deck[count:-1] + deck[:count] + deck[-1:]


def card_value(card: int) -> int:
    return JOKER_A if card > 52 else card


def advance_deck(deck: List[int]) -> None:
    move_joker(deck, JOKER_A, 1)
    move_joker(deck, JOKER_B, 2)

    top, bottom = sorted((deck.index(JOKER_A), deck.index(JOKER_B)))
    deck[:] = deck[bottom + 1:] + deck[top:bottom + 1] + deck[:top]

    count_cut(deck, card_value(deck[-1]))


def step(deck: List[int]) -> int:
    """Next keystream value, 1..26."""
    while True:
        advance_deck(deck)
        card = deck[card_value(deck[0])]
        if card <= 52:
            return card - 26 if card > 26 else card


@register_cipher
class Solitaire(Cipher):
    """Schneier's Solitaire keystream cipher."""

    name = "solitaire"
    description = "Solitaire: 54-card keystream added mod 26 (non-letters pass through)."
    key_names = ("passphrase",)

    def __init__(self, passphrase: str = "", deck: Sequence[int] = None):
        if deck is None:
            deck = list(range(1, DECK_SIZE + 1))
        deck = list(deck)
        if sorted(deck) != list(range(1, DECK_SIZE + 1)):
            raise InvalidKey("Solitaire deck must hold the cards 1..54 exactly once.")

        for ch in passphrase:
            if not ch.isascii() or not ch.isalpha():
                continue
            advance_deck(deck)
            count_cut(deck, ord(ch.upper()) - ord("A") + 1)

        self.initial_deck = deck
        logger.debug(f"Solitaire deck keyed by {len(passphrase)} char passphrase")

    def keystream(self, length: int) -> List[int]:
        deck = list(self.initial_deck)
        return [step(deck) for _ in range(length)]

    def _apply(self, text: str, sign: int) -> str:
        letters = sum(1 for ch in text if ch.isascii() and ch.isalpha())
        stream = iter(self.keystream(letters))
        out = []
        for ch in text:
            if ch.isascii() and ch.isalpha():
                p = ord(ch.upper()) - ord("A")
                out.append(chr((p + sign * next(stream)) % 26 + ord("A")))
            else:
                out.append(ch)
        return "".join(out)

    def encode(self, text: str) -> str:
        return self._apply(text, 1)

    def decode(self, text: str) -> str:
        return self._apply(text, -1)
