"""
Command-line front-end.

    old-crypto -l
    old-crypto -c caesar -e -k 3 -t "attack at dawn"
    old-crypto -c adfgvx -e -k PORTABLE -k SUBWAY -t ATTACKATDAWN --blocks
    old-crypto -c playfair -e -k MONARCHY --opt filler=Q -i message.txt
"""

import argparse
import logging
import re
import sys

from . import __version__
from .block import CIPHER_REGISTRY, create
from .errors import CipherError
from .helpers import normalize, output_as_block

logger = logging.getLogger(__name__)

_GRID_SIZE = re.compile(r"^(\d+)[xX](\d+)$")


def parse_option(item: str):
    """``name=value`` -> (name, value) with booleans and RxC sizes converted."""
    name, sep, value = item.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {item!r}")
    lowered = value.lower()
    if lowered in ("true", "yes", "on"):
        return name, True
    if lowered in ("false", "no", "off"):
        return name, False
    m = _GRID_SIZE.match(value)
    if m:
        return name, (int(m.group(1)), int(m.group(2)))
    return name, value


def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 72)
    for name, cls in sorted(CIPHER_REGISTRY.items()):
        keys = ", ".join(cls.key_names) or "-"
        print(f"  {name:<14} [{keys}]")
        print(f"  {'':<14} {cls.description}")
    print("=" * 72)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="old-crypto",
        description="Paper & pencil ciphers: encode or decode text.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("-c", "--cipher", choices=sorted(CIPHER_REGISTRY), metavar="NAME",
                        help="Cipher to use (see --list)")

    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encode", action="store_true", help="Encode mode")
    action_group.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-k", "--key", action="append", default=[], metavar="KEY",
                        help="Cipher key; repeat for ciphers taking several keys, in order")
    parser.add_argument("--opt", action="append", default=[], type=parse_option,
                        metavar="NAME=VALUE",
                        help="Cipher option, e.g. filler=Q, letter_conflation=false, grid_size=6x6")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")
    parser.add_argument("-o", "--output", help="Output file path")

    parser.add_argument("--raw", action="store_true",
                        help="Do not uppercase the input or strip whitespace")
    parser.add_argument("--blocks", action="store_true",
                        help="Print the result in groups of five")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging of key schedules")
    return parser


def read_input(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            sys.exit(f"Error: can not read '{args.input}': {e}")
    return sys.stdin.read()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.list:
        list_ciphers()
        return 0

    if not args.cipher:
        parser.error("-c/--cipher is required to encode or decode")

    source = read_input(args)
    source = source.rstrip("\r\n") if args.raw else normalize(source)

    try:
        cipher = create(args.cipher, *args.key, **dict(args.opt))
        logger.info(f"{args.cipher}: {len(source)} symbol(s) in")
        result = cipher.encode(source) if args.encode else cipher.decode(source)
    except CipherError as e:
        sys.exit(f"Error: {e}")

    if args.blocks:
        result = output_as_block(result)

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result + "\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
