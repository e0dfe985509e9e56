"""Command-line front end for gomatria.

Usage:
    gomatria [-c CIPHER] WORD...        score words and save them
    gomatria -x WORD...                 score without saving
    gomatria -q WORD...                 score, save, then list every saved
                                        text sharing each value
    gomatria -n NUMBER                  list saved texts with that value
    gomatria -l                         list available ciphers
    gomatria -v [-c CIPHER]             show a cipher's alphabet

Exit status is 1 when the cipher is unknown, a lookup finds nothing, the
number given to -n is not an integer, or the reverse index fails.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from . import settings
from .ciphers import CipherSet, load_ciphers
from .errors import CipherNotFound, GomatriaError, StorageError
from .models import Cipher
from .scoring import fold, letter_table, score, unique_in_order
from .store import ReverseIndex

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gomatria",
        description="Score text under letter-value ciphers and look values back up.",
    )
    p.add_argument("-c", dest="cipher", default=None, help="Cipher to use")
    p.add_argument("-l", dest="list_ciphers", action="store_true",
                   help="List available ciphers")
    p.add_argument("-v", dest="view", action="store_true",
                   help="View info about a cipher")
    p.add_argument("-q", dest="text_query", action="store_true",
                   help="Query the database with words")
    p.add_argument("-n", dest="num_query", action="store_true",
                   help="Query the database with a number")
    p.add_argument("-x", dest="no_save", action="store_true",
                   help="Don't save words to the database")
    p.add_argument("--set-default", action="store_true",
                   help="Remember the chosen cipher as the default")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("args", nargs="*", metavar="WORD")
    return p


def decode_arg(arg: str) -> str:
    """Re-decode a command-line argument, replacing bytes that are not UTF-8."""
    return os.fsencode(arg).decode("utf-8", "replace")


def list_ciphers(ciphers: CipherSet) -> None:
    print("Available ciphers:")
    for name in ciphers.names():
        print(name)


def view_cipher(ciph: Cipher) -> None:
    print(f"Cipher {ciph.name}:")
    print(ciph.description)
    print("\nAlphabet used:")
    for letter, value in letter_table(ciph):
        print(f"{letter} = {value}")


def show_query(index: ReverseIndex, num: int, ciph: Cipher) -> bool:
    """Print saved texts for ``num``; return False when there are none."""
    entries = index.query(ciph.name, num)
    if not entries:
        print(f"There are no entries with value {num} for cipher {ciph.name}.")
        return False
    print(f"Results for {num} in cipher {ciph.name}:")
    for entry in entries:
        print("-", entry)
    return True


def run(args: argparse.Namespace) -> int:
    try:
        cfg = settings.ensure_config_dir()
    except OSError as e:
        raise StorageError(f"cannot create config directory: {e}") from e
    ciphers = load_ciphers(cfg)

    if args.list_ciphers:
        list_ciphers(ciphers)
        return 0

    name = args.cipher or settings.get_default_cipher()
    ciph = ciphers.require(name)

    if args.set_default:
        settings.set_default_cipher(ciph.name)
        logger.debug("default cipher set to %s", ciph.name)

    if args.view:
        view_cipher(ciph)
        return 0

    index = ReverseIndex(settings.database_path())

    if args.num_query:
        try:
            num = int(args.args[0])
        except (IndexError, ValueError):
            print("Error: The -n flag only allows numbers.")
            return 1
        return 0 if show_query(index, num, ciph) else 1

    values = []
    for arg in args.args:
        arg = fold(decode_arg(arg), ciph)
        val = score(arg, ciph)
        values.append(val)
        print(f"{arg} = {val}")
        if not args.no_save:
            index.record(ciph.name, val, arg)

    status = 0
    if args.text_query:
        for num in unique_in_order(values):
            print("")
            if not show_query(index, num, ciph):
                status = 1
    return status


def main(argv=None) -> int:
    args = build_parser().parse_intermixed_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except CipherNotFound as e:
        print(str(e))
        return 1
    except GomatriaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
