"""
S-DES Key Schedule Implementation

This module implements the key schedule that expands a 10-bit master key
into the two 8-bit round subkeys, along with helpers for producing master
keys either at random or from a password.
"""

import secrets
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

import argon2
from argon2.low_level import Type

from ..bitops import BitVector, as_bit_vector, bits_to_int, combine, int_to_bits, permute, rotate_left
from ..config import KDF_DEFAULT_PARAMS
from ..exceptions import InvalidKeyLength

KEY_SIZE = 10      # Master key size in bits
SUBKEY_SIZE = 8    # Round subkey size in bits

# Key expansion permutations (1-based)
P10 = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8 = (6, 3, 7, 4, 8, 5, 10, 9)


class SubkeyPair(NamedTuple):
    """The two round subkeys derived from one master key."""
    subkey1: BitVector
    subkey2: BitVector


def derive_subkeys(key: Sequence[int]) -> SubkeyPair:
    """
    Expand a 10-bit master key into the two round subkeys.

    The halves are rotated left by one for the first subkey, then the
    already-rotated halves are rotated left by two more for the second.

    Args:
        key: The 10-bit master key

    Returns:
        The SubkeyPair (subkey1, subkey2)

    Raises:
        InvalidKeyLength: If the key is not exactly 10 bits
    """
    key = as_bit_vector(key, KEY_SIZE, InvalidKeyLength, "Key")

    permuted = permute(key, P10)
    left, right = permuted[:5], permuted[5:]

    # LS-1
    left = rotate_left(left, 1)
    right = rotate_left(right, 1)
    subkey1 = permute(combine(left, right), P8)

    # LS-2, applied to the LS-1 output
    left = rotate_left(left, 2)
    right = rotate_left(right, 2)
    subkey2 = permute(combine(left, right), P8)

    return SubkeyPair(subkey1, subkey2)


def generate_key() -> BitVector:
    """
    Generate a uniformly random 10-bit master key.

    Returns:
        A random key as a bit vector
    """
    return int_to_bits(secrets.randbelow(1 << KEY_SIZE), KEY_SIZE)


def derive_key_from_password(password: str, salt: Optional[bytes] = None,
                             params: Optional[Dict[str, int]] = None) -> Tuple[BitVector, bytes]:
    """
    Derive a 10-bit master key from a password using Argon2id.

    The leading 10 bits of the Argon2id digest become the key, so the same
    password and salt always give the same key.

    Args:
        password: The password to derive the key from
        salt: Optional salt (will be generated if not provided)
        params: Optional Argon2id parameters overriding KDF_DEFAULT_PARAMS

    Returns:
        A tuple of (key, salt)
    """
    if params is None:
        params = {}
    settings = dict(KDF_DEFAULT_PARAMS, **params)

    if salt is None:
        salt = secrets.token_bytes(settings['salt_len'])

    digest = argon2.low_level.hash_secret_raw(
        secret=password.encode('utf-8'),
        salt=salt,
        time_cost=settings['time_cost'],
        memory_cost=settings['memory_cost'],
        parallelism=settings['parallelism'],
        hash_len=settings['hash_len'],
        type=Type.ID  # Argon2id variant
    )

    # Top 10 bits of the first two bytes
    leading = int.from_bytes(digest[:2], byteorder='big') >> (16 - KEY_SIZE)
    return int_to_bits(leading, KEY_SIZE), salt


def key_to_int(key: Sequence[int]) -> int:
    """Index of a 10-bit key in the keyspace, 0 to 1023."""
    return bits_to_int(as_bit_vector(key, KEY_SIZE, InvalidKeyLength, "Key"))
