"""
Command-line interface for encrypting, decrypting and cracking S-DES.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .brute_force.search import brute_force_all, brute_force_first
from .cipher_core.block_cipher import BLOCK_SIZE, SdesCipher
from .codec.binary import (
    decrypt_binary, decrypt_text, encrypt_binary, encrypt_text, from_binary_string, to_binary_string,
)
from .exceptions import SdesError, SearchTimedOut
from .key_schedule.sdes_key_schedule import KEY_SIZE, derive_key_from_password, generate_key

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TIMEOUT = 2


def _cipher_from_args(args: argparse.Namespace) -> SdesCipher:
    return SdesCipher.from_key(from_binary_string(args.key))


def _encrypt(args: argparse.Namespace) -> int:
    cipher = _cipher_from_args(args)
    if args.text:
        print(encrypt_text(args.data, cipher))
    else:
        print(encrypt_binary(args.data, cipher))
    return EXIT_OK


def _decrypt(args: argparse.Namespace) -> int:
    cipher = _cipher_from_args(args)
    if args.text:
        print(decrypt_text(args.data, cipher))
    else:
        print(decrypt_binary(args.data, cipher))
    return EXIT_OK


def _crack(args: argparse.Namespace) -> int:
    plaintext = from_binary_string(args.plaintext)
    ciphertext = from_binary_string(args.ciphertext)

    if args.first:
        key = brute_force_first(plaintext, ciphertext, timeout=args.timeout, max_workers=args.workers)
        print(to_binary_string(key) if key is not None else "no matching key")
        return EXIT_OK

    result = brute_force_all(plaintext, ciphertext, timeout=args.timeout, max_workers=args.workers)
    result.raise_for_timeout()
    if not result.keys:
        print("no matching key")
    for key in sorted(result.keys):
        print(to_binary_string(key))
    return EXIT_OK


def _keygen(args: argparse.Namespace) -> int:
    if args.password is None:
        print(to_binary_string(generate_key()))
        return EXIT_OK
    salt = bytes.fromhex(args.salt) if args.salt else None
    key, salt = derive_key_from_password(args.password, salt)
    print(f"{to_binary_string(key)} salt={salt.hex()}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sdes", description="S-DES teaching cipher and key search")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, handler in (("encrypt", _encrypt), ("decrypt", _decrypt)):
        sub = commands.add_parser(name, help=f"{name} binary blocks or text")
        sub.add_argument("--key", required=True, help=f"{KEY_SIZE}-bit key as a binary string")
        sub.add_argument("--text", action="store_true",
                         help="treat DATA as characters instead of a binary string")
        sub.add_argument("data", help=f"binary string (multiple of {BLOCK_SIZE} bits) or text")
        sub.set_defaults(handler=handler)

    crack = commands.add_parser("crack", help="recover keys from a known plaintext/ciphertext pair")
    crack.add_argument("--plaintext", required=True, help=f"{BLOCK_SIZE}-bit plaintext")
    crack.add_argument("--ciphertext", required=True, help=f"{BLOCK_SIZE}-bit ciphertext")
    crack.add_argument("--first", action="store_true", help="stop at the first matching key")
    crack.add_argument("--timeout", type=float, default=None,
                       help="seconds to wait for the search (default: SDES_SEARCH_TIMEOUT or 60)")
    crack.add_argument("--workers", type=int, default=None, help="number of worker threads")
    crack.set_defaults(handler=_crack)

    keygen = commands.add_parser("keygen", help="generate a random or password-derived key")
    keygen.add_argument("--password", default=None, help="derive the key from this password")
    keygen.add_argument("--salt", default=None, help="hex salt for password derivation")
    keygen.set_defaults(handler=_keygen)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        return args.handler(args)
    except SearchTimedOut as e:
        logger.error(str(e))
        return EXIT_TIMEOUT
    except (SdesError, ValueError) as e:
        logger.error(str(e))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
