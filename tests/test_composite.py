"""
old_crypto — transpositions and composite ciphers
Transposition, irregular transposition, ADFGVX, Nihilist, VIC
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from old_crypto.block import Pipeline
from old_crypto.ciphers.square        import SquareCipher
from old_crypto.ciphers.transposition import IrregularTransposition, Transposition
from old_crypto.ciphers.adfgvx        import ADFGVX
from old_crypto.ciphers.nihilist      import AdditiveKey, Nihilist
from old_crypto.ciphers.vic import (
    VicCipher, VicKeys, addmod10, chainadd, derive_keys, expand5to10,
    first_encode, phrase_ranks, submod10,
)
from old_crypto.errors import InvalidKey, InvalidSymbol

LONG_MSG = "ATTACKATDAWNATPOINT42X23XSENDMOREMUNITIONSBYNIGHTX123"

VIC_MSG = (
    "WEAREPLEASEDTOHEAROFYOURSUCCESSINESTABLISHINGYOURFALSEIDENTITYYOUWILL"
    "BESENTSOMEMONEYTOCOVEREXPENSESWITHINAMONTH"
)

# ── Columnar transposition ───────────────────────────────────────────────────
@pytest.mark.parametrize("key, cipher", [
    ("ARABESQUE", "AATNIITN2MIHAAXOOTCT2RNXDNENNAOXMB2TW4DTGKP3ES1TISUY3"),
    ("SUBWAY", "CWI2DUNG3TDP2EEIN1AAATXOIBTTTT4SRTYXAAOXNMOI2KNN3MNSH"),
    ("PORTABLE", "CA2DIN3KTXMTITO3ROHAP2OIGTANSMSXADIXENTTWTEUB1AN4NNY2"),
])
def test_transposition_vectors(key, cipher):
    c = Transposition(key)
    assert c.encode(LONG_MSG) == cipher
    assert c.decode(cipher) == LONG_MSG

def test_transposition_coordinates():
    c = Transposition("SUBWAY")
    assert c.encode("AVAGAGAVDFFGAVAGDGAVGVFX") == "AFDFADAGAAAAVVVVGFGVGGGX"

def test_transposition_full_rectangle():
    assert Transposition("SUBWAY").encode("ATTACKATDAWN") == "CWTDAATTAAKN"

@pytest.mark.parametrize("msg, cipher", [
    ("ATTACKATDAW", "CWTDAATTAAK"),   # last row one short
    ("ABC", "CAB"),                   # shorter than the key
    ("", ""),
])
def test_transposition_incomplete_last_row(msg, cipher):
    c = Transposition("SUBWAY")
    assert c.encode(msg) == cipher
    assert c.decode(cipher) == msg

def test_transposition_repeated_key_letters():
    c = Transposition("AAABRAACADAABRA")
    assert c.tkey == [0, 1, 2, 9, 13, 3, 4, 11, 5, 12, 6, 7, 10, 14, 8]
    assert c.decode(c.encode(LONG_MSG)) == LONG_MSG

def test_transposition_empty_key():
    with pytest.raises(InvalidKey):
        Transposition("")

# ── Irregular transposition ──────────────────────────────────────────────────
def test_irregular_triangle_mask():
    c = IrregularTransposition("94735236270398134")
    assert c.rank_pos == (10, 14)
    assert not any(c.in_triangle(0, col) for col in range(10))
    assert all(c.in_triangle(0, col) for col in range(10, 17))
    assert not c.in_triangle(1, 10)
    assert all(c.in_triangle(1, col) for col in range(11, 17))

@pytest.mark.parametrize("length", [0, 1, 16, 17, 18, 53, 120])
def test_irregular_round_trip(length):
    c = IrregularTransposition("94735236270398134")
    msg = (LONG_MSG * 3)[:length]
    ct = c.encode(msg)
    assert sorted(ct) == sorted(msg)
    assert c.decode(ct) == msg

def test_irregular_differs_from_plain_columnar():
    key = "94735236270398134"
    assert IrregularTransposition(key).encode(LONG_MSG) != Transposition(key).encode(LONG_MSG)

# ── ADFGVX ───────────────────────────────────────────────────────────────────
def test_adfgvx_vector():
    c = ADFGVX("PORTABLE", "SUBWAY")
    assert c.encode("ATTACKATDAWN") == "AFDFADAGAAAAVVVVGFGVGGGX"
    assert c.decode("AFDFADAGAAAAVVVVGFGVGGGX") == "ATTACKATDAWN"

def test_adfgvx_is_square_then_transposition():
    c = ADFGVX("PORTABLE", "SUBWAY")
    manual = Transposition("SUBWAY").encode(SquareCipher("PORTABLE", "ADFGVX").encode(LONG_MSG))
    assert isinstance(c, Pipeline)
    assert c.encode(LONG_MSG) == manual
    assert c.block_size == len("SUBWAY")

def test_adfgvx_long_message():
    c = ADFGVX("PORTABLE", "SUBWAY")
    ct = c.encode(LONG_MSG)
    assert len(ct) == 2 * len(LONG_MSG)
    assert set(ct) <= set("ADFGVX")
    assert c.decode(ct) == LONG_MSG

def test_adfgvx_invalid_input():
    c = ADFGVX("PORTABLE", "SUBWAY")
    with pytest.raises(InvalidSymbol):
        c.encode("ATTACK AT DAWN")
    with pytest.raises(InvalidSymbol):
        c.decode("AFDFADAGAAAAVVVVGFGVGGG")

# ── Nihilist ─────────────────────────────────────────────────────────────────
def test_nihilist_vector():
    c = Nihilist("ARABESQUE", "SUBWAY", "37")
    assert c.encode("IFYOUCANREADTHIS") == "1037306631738227035749"
    assert c.decode("1037306631738227035749") == "IFYOUCANREADTHIS"

def test_nihilist_with_additive_key():
    plain = Nihilist("ARABESQUE", "SUBWAY", "37")
    keyed = Nihilist("ARABESQUE", "SUBWAY", "37", additive_key="3589")
    assert [s.name for s in keyed.stages] == ["straddling", "additive", "transposition"]
    ct = keyed.encode("IFYOUCANREADTHIS")
    assert ct != plain.encode("IFYOUCANREADTHIS")
    assert keyed.decode(ct) == "IFYOUCANREADTHIS"

def test_nihilist_numbers():
    c = Nihilist("ARABESQUE", "SUBWAY")
    assert c.decode(c.encode("MEETAT1030")) == "MEETAT1030"

def test_additive_key():
    c = AdditiveKey("123")
    assert c.encode("000000") == "123123"
    assert c.encode("99") == "01"
    assert c.decode("123123") == "000000"
    with pytest.raises(InvalidSymbol):
        c.encode("12A")
    with pytest.raises(InvalidKey):
        AdditiveKey("12A")

# ── VIC ──────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("half, ranks", [
    ("IDREAMOFJE", [6, 2, 0, 3, 1, 8, 9, 5, 7, 4]),
    ("ANNIEWITHT", [1, 6, 7, 4, 2, 0, 5, 8, 3, 9]),
])
def test_vic_phrase_ranks(half, ranks):
    assert phrase_ranks(half) == ranks

@pytest.mark.parametrize("a, b, added, subbed", [
    ([8, 6, 1, 5, 4], [2, 0, 9, 5, 2], [0, 6, 0, 0, 6], [6, 6, 2, 0, 2]),
    ([7, 7, 6, 5, 1], [7, 4, 1, 7, 7], [4, 1, 7, 2, 8], [0, 3, 5, 8, 4]),
])
def test_vic_mod10(a, b, added, subbed):
    assert addmod10(a, b) == added
    assert submod10(a, b) == subbed

@pytest.mark.parametrize("a, b", [
    ([8, 6, 1, 5, 4], [4, 7, 6, 9, 8]),
    ([7, 7, 6, 5, 1], [4, 3, 1, 6, 5]),
])
def test_vic_chainadd(a, b):
    assert chainadd(a) == b

def test_vic_expand5to10():
    assert expand5to10([0, 3, 5, 8, 4]) == [0, 3, 5, 8, 4, 3, 8, 3, 2, 7]

def test_vic_first_encode():
    a = [6, 5, 5, 1, 5, 1, 7, 8, 9, 1]
    b = [1, 6, 7, 4, 2, 0, 5, 8, 3, 9]
    assert first_encode(a, b) == [0, 2, 2, 1, 2, 1, 5, 8, 3, 1]

def test_vic_first_encode_zero_is_tenth():
    assert first_encode([0], list(range(10))) == [9]

def test_vic_derived_keys():
    keys = derive_keys("IDREAMOFJEANNIEWITHT", "77651", "741776")
    assert len(keys.first_transposition) == 10
    assert len(keys.second_transposition) == 10
    assert sorted(keys.checkerboard) == list("0123456789")

@pytest.mark.parametrize("msg", ["HELLOWORLD", VIC_MSG, "MEETAT1030"])
def test_vic_round_trip(msg):
    c = VicCipher("89", "741776", "IDREAMOFJEANNIEWITHT", "77651")
    ct = c.encode(msg)
    assert ct.isdigit()
    assert c.decode(ct) == msg

def test_vic_stages():
    c = VicCipher("89", "741776", "IDREAMOFJEANNIEWITHT", "77651")
    assert [s.name for s in c.stages] == ["straddling", "transposition", "transposition"]
    assert c.block_size == 10

def test_vic_custom_key_schedule():
    fixed = VicKeys("3141592653", "2718281828", "0123456789")
    c = VicCipher("89", "741776", "IDREAMOFJEANNIEWITHT", "77651",
                  key_schedule=lambda phrase, mi, ind: fixed)
    assert c.keys is fixed
    assert c.first_transposition.key == "3141592653"
    assert c.decode(c.encode("HELLOWORLD")) == "HELLOWORLD"

@pytest.mark.parametrize("args", [
    ("89", "7417", "IDREAMOFJEANNIEWITHT", "77651"),
    ("89", "741776", "IDREAMOFJE", "77651"),
    ("89", "741776", "IDREAMOFJEANNIEWITHT", "7765"),
    ("89", "741776", "IDREAMOFJEANNIEWITH1", "77651"),
])
def test_vic_bad_keys(args):
    with pytest.raises(InvalidKey):
        VicCipher(*args)
