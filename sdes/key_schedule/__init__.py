"""
Key Schedule Package

This package implements the key expansion algorithm that transforms
a 10-bit master key into the two round subkeys used by the block cipher.
"""

from .sdes_key_schedule import (
    KEY_SIZE, SUBKEY_SIZE, SubkeyPair, derive_subkeys, generate_key,
    derive_key_from_password, key_to_int,
)

__all__ = ['KEY_SIZE', 'SUBKEY_SIZE', 'SubkeyPair', 'derive_subkeys', 'generate_key',
           'derive_key_from_password', 'key_to_int']
