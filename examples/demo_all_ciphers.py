"""
old_crypto — Live Demo: Caesar to VIC
=====================================
Run:  python examples/demo_all_ciphers.py

Shows every cipher encoding and decoding a real message, with the key
material, the grid or wheel where there is one, and the timing.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from old_crypto import (
    ADFGVX, CaesarCipher, Chaocipher, IrregularTransposition, Nihilist, NullCipher,
    PlayfairCipher, Solitaire, SquareCipher, StraddlingCheckerboard, Transposition,
    VicCipher, Wheatstone,
)
from old_crypto.helpers import output_as_block

LINE = "═" * 70
MSG  = "ATTACKATDAWNATPOINT42X23XSENDMOREMUNITIONSBYNIGHTX123"
WORDS = "WEAREPLEASEDTOHEAROFYOURSUCCESS"

def header(year, name):
    print(f"\n{LINE}")
    print(f"  {year} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def run(cipher, msg, block=False):
    t0 = time.perf_counter()
    if block:
        res = cipher.encode_block(msg)
        ct, pt = res.text, cipher.decode_block(res)
    else:
        ct = cipher.encode(msg)
        pt = cipher.decode(ct)
    elapsed = time.perf_counter() - t0
    ok("Encoded",    output_as_block(ct))
    ok("Decoded",    pt)
    ok("Round-trip", f"{'OK' if pt == msg else 'MISMATCH'} in {elapsed*1000:.2f} ms")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  old_crypto — Paper & Pencil Ciphers Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── NULL ─────────────────────────────────────────────────────────────────────
header("----", "Null cipher (identity)")
run(NullCipher(), MSG)

# ── CAESAR ───────────────────────────────────────────────────────────────────
header("50 BC", "Caesar, shift 3")
run(CaesarCipher(3), MSG)

# ── PLAYFAIR ─────────────────────────────────────────────────────────────────
header(1854, "Playfair, key PLAYFAIREXAMPLE")
p = PlayfairCipher("PLAYFAIREXAMPLE")
for row in p.grid.lines():
    ok("Grid", " ".join(row))
run(p, WORDS, block=True)

# ── WHEATSTONE ───────────────────────────────────────────────────────────────
header(1867, "Wheatstone cryptograph, start M, keys CIPHER / MACHINE")
w = Wheatstone("M", "CIPHER", "MACHINE")
ok("Plain disc",  w.plain_wheel)
ok("Cipher disc", w.cipher_wheel)
run(w, WORDS, block=True)

# ── CHAOCIPHER ───────────────────────────────────────────────────────────────
header(1918, "Chaocipher")
ch = Chaocipher("PTLNBQDEOYSFAVZKGJRIHWXUMC", "HXUCZVAMDSLKPEFJRIGTWOBNYQ")
ct = ch.encode(WORDS)
ok("Encoded", output_as_block(ct))
ok("Wheels after encoding", " / ".join(ch.wheels()))
ch.reset()
ok("Decoded after reset()", ch.decode(ct))

# ── POLYBIUS SQUARE ──────────────────────────────────────────────────────────
header("~150 BC", "Polybius square, key PORTABLE, coordinates ADFGVX")
run(SquareCipher("PORTABLE", "ADFGVX"), MSG)

# ── TRANSPOSITION ────────────────────────────────────────────────────────────
header("----", "Columnar transposition, key SUBWAY")
run(Transposition("SUBWAY"), MSG)
header("----", "Irregular transposition, key 94735236270398134")
run(IrregularTransposition("94735236270398134"), MSG)

# ── ADFGVX ───────────────────────────────────────────────────────────────────
header(1918, "ADFGVX, keys PORTABLE / SUBWAY")
run(ADFGVX("PORTABLE", "SUBWAY"), MSG)

# ── CHECKERBOARD ─────────────────────────────────────────────────────────────
header(1940, "Straddling checkerboard, key ARABESQUE, escape 8 9")
sc = StraddlingCheckerboard("ARABESQUE", "89")
ok("Board", sc.full)
run(sc, MSG)

# ── NIHILIST ─────────────────────────────────────────────────────────────────
header(1880, "Nihilist, keys ARABESQUE / SUBWAY, additive key 3589")
run(Nihilist("ARABESQUE", "SUBWAY", "37", additive_key="3589"), MSG)

# ── VIC ──────────────────────────────────────────────────────────────────────
header(1953, "VIC cipher")
vic = VicCipher("89", "741776", "IDREAMOFJEANNIEWITHT", "77651")
ok("First transposition key",  vic.keys.first_transposition)
ok("Second transposition key", vic.keys.second_transposition)
ok("Checkerboard key",         vic.keys.checkerboard)
run(vic, MSG)

# ── SOLITAIRE ────────────────────────────────────────────────────────────────
header(1999, "Solitaire, passphrase CRYPTONOMICON")
run(Solitaire("cryptonomicon"), MSG)

print(f"\n{LINE}")
print("  None of the above resists modern cryptanalysis.")
print(f"{LINE}\n")
