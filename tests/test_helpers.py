"""
old_crypto — grid and key-schedule helpers
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from old_crypto.errors  import InvalidConfiguration, InvalidKey
from old_crypto.helpers import (
    ALPHABET, ALPHABET25, ALPHABET_TXT, BASE36, Grid,
    break_doubles, by_n, condense, keyed_alphabet, normalize, output_as_block,
    prepare_digrams, shuffle, strip_positions, to_numeric,
)

# ── condense / keyed alphabet ────────────────────────────────────────────────
@pytest.mark.parametrize("text, expected", [
    ("ABCDE", "ABCDE"),
    ("AAAAA", "A"),
    ("ARABESQUE", "ARBESQU"),
    ("ARABESQUEABCDEFGHIKLMNOPQRSTUVWXYZ", "ARBESQUCDFGHIKLMNOPTVWXYZ"),
    ("PLAYFAIRABCDEFGHIKLMNOPQRSTUVWXYZ", "PLAYFIRBCDEGHKMNOQSTUVWXZ"),
    ("PLAYFAIREXMABCDEFGHIKLMNOPQRSTUVWXYZ", "PLAYFIREXMBCDGHKNOQSTUVWZ"),
])
def test_condense(text, expected):
    assert condense(text) == expected

def test_keyed_alphabet_long_key_adds_nothing():
    key = "ZYXWVUTSRQPONMLKJIHGFEDCBAZZ"
    assert keyed_alphabet(key, ALPHABET) == ALPHABET[::-1]

# ── shuffle ──────────────────────────────────────────────────────────────────
def test_shuffle_regular_rectangle():
    assert shuffle("ARABESQUE", ALPHABET_TXT) == "ACKVRDLWBFMXEGNYSHOZQIP/UJT-"

def test_shuffle_irregular_rectangle():
    assert shuffle("SUBWAY", ALPHABET_TXT) == "SCIOXUDJPZBEKQ/WFLR-AGMTYHNV"

def test_shuffle_is_permutation():
    res = shuffle("MACHINE", ALPHABET)
    assert sorted(res) == sorted(ALPHABET)
    assert res.startswith("M")

def test_shuffle_empty_key():
    with pytest.raises(InvalidKey):
        shuffle("", ALPHABET)

# ── to_numeric ───────────────────────────────────────────────────────────────
@pytest.mark.parametrize("key, ranks", [
    ("ARABESQUE", [0, 6, 1, 2, 3, 7, 5, 8, 4]),
    ("PJRJJJJJJS", [7, 0, 8, 1, 2, 3, 4, 5, 6, 9]),
    ("AAABRAACADAABRA", [0, 1, 2, 9, 13, 3, 4, 11, 5, 12, 6, 7, 10, 14, 8]),
])
def test_to_numeric(key, ranks):
    assert to_numeric(key) == ranks

# ── grouping ─────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("n, text, expected", [
    (5, "ARABESQUE", "ARABE SQUE"),
    (4, "PJRJJJJJJS", "PJRJ JJJJ JS"),
    (5, "AAABRAACADAABRA", "AAABR AACAD AABRA"),
])
def test_by_n(n, text, expected):
    assert by_n(text, n) == expected

def test_output_as_block():
    assert output_as_block("ABCDEF") == "ABCDE F"
    assert output_as_block("ABCDE") == "ABCDE"
    assert output_as_block("") == ""

def test_normalize():
    assert normalize("Attack at\tdawn\n") == "ATTACKATDAWN"

# ── fillers ──────────────────────────────────────────────────────────────────
def test_prepare_digrams_doubles_and_padding():
    assert prepare_digrams("LANNONCE") == ("LANXNONCEX", (3, 9))
    assert prepare_digrams("HIDE") == ("HIDE", ())
    assert prepare_digrams("HID") == ("HIDX", (3,))

def test_prepare_digrams_filler_letter_uses_alternate():
    assert prepare_digrams("XX") == ("XQXQ", (1, 3))

@pytest.mark.parametrize("text, expected", [
    ("ABCDEF", "ABCDEF"),
    ("AABCDE", "AQABCDE"),
    ("AAAAA", "AQAQAQAQA"),
])
def test_break_doubles(text, expected):
    assert break_doubles(text)[0] == expected

def test_break_doubles_alternate_and_previous():
    assert break_doubles("QQ") == ("QXQ", (1,))
    assert break_doubles("+A", previous="+") == ("Q+A", (0,))

def test_strip_positions_inverts_fillers():
    prepared, positions = prepare_digrams("BALLOONS")
    assert strip_positions(prepared, positions) == "BALLOONS"

# ── Grid ─────────────────────────────────────────────────────────────────────
def test_grid_monarchy():
    g = Grid("MONARCHY", ALPHABET25, 5, 5, {"J": "I"})
    assert g.lines() == ["MONAR", "CHYBD", "EFGIK", "LPQST", "UVWXZ"]
    assert g.coords("H") == (1, 1)
    assert g.coords("J") == g.coords("I")
    assert g.at(1, 5) == "C"
    assert g.at(-1, 0) == "U"

def test_grid_is_bijective():
    g = Grid("PORTABLE", BASE36, 6, 6)
    seen = {g.coords(s) for s in BASE36}
    assert len(seen) == 36
    assert all(g.at(*g.coords(s)) == s for s in BASE36)

def test_grid_wrong_size():
    with pytest.raises(InvalidConfiguration):
        Grid("KEY", ALPHABET, 5, 5)

def test_grid_key_outside_alphabet():
    with pytest.raises(InvalidKey):
        Grid("KEY1", ALPHABET25, 5, 5)
