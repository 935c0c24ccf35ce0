"""
Block Cipher Implementation

This module provides the core implementation of S-DES, a two-round
Feistel block cipher with an 8-bit block and a 10-bit key.
"""

from dataclasses import dataclass
from typing import Sequence

from ..bitops import BitVector, as_bit_vector, permute, split, combine
from ..exceptions import InvalidBlockLength
from ..key_schedule.sdes_key_schedule import SubkeyPair, derive_subkeys
from .round_function import feistel_round

BLOCK_SIZE = 8  # Block size in bits

# Initial permutation and its inverse (1-based)
IP = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)


def _swap_halves(block: BitVector) -> BitVector:
    left, right = split(block)
    return combine(right, left)


def _transform(block: Sequence[int], first: BitVector, second: BitVector) -> BitVector:
    state = permute(block, IP)
    state = feistel_round(state, first)
    state = _swap_halves(state)
    state = feistel_round(state, second)
    return permute(state, IP_INV)


def encrypt_block(plaintext: Sequence[int], keys: SubkeyPair) -> BitVector:
    """
    Encrypt a single 8-bit block.

    Args:
        plaintext: The plaintext block to encrypt (must be 8 bits)
        keys: The subkeys derived from the master key

    Returns:
        The encrypted ciphertext block

    Raises:
        InvalidBlockLength: If the block is not exactly 8 bits
    """
    plaintext = as_bit_vector(plaintext, BLOCK_SIZE, InvalidBlockLength, "Plaintext")
    return _transform(plaintext, keys.subkey1, keys.subkey2)


def decrypt_block(ciphertext: Sequence[int], keys: SubkeyPair) -> BitVector:
    """
    Decrypt a single 8-bit block.

    Identical to encryption with the subkey order reversed.

    Args:
        ciphertext: The ciphertext block to decrypt (must be 8 bits)
        keys: The subkeys derived from the master key

    Returns:
        The decrypted plaintext block

    Raises:
        InvalidBlockLength: If the block is not exactly 8 bits
    """
    ciphertext = as_bit_vector(ciphertext, BLOCK_SIZE, InvalidBlockLength, "Ciphertext")
    return _transform(ciphertext, keys.subkey2, keys.subkey1)


@dataclass(frozen=True)
class SdesCipher:
    """
    S-DES bound to one key.

    Holds only the derived subkeys, so one instance can be shared between
    threads and used for any number of blocks.
    """
    subkeys: SubkeyPair

    @classmethod
    def from_key(cls, key: Sequence[int]) -> "SdesCipher":
        """
        Validate a 10-bit master key and derive its subkeys once.

        Args:
            key: The 10-bit master key

        Returns:
            A cipher ready for block operations

        Raises:
            InvalidKeyLength: If the key is not exactly 10 bits
        """
        return cls(derive_subkeys(key))

    def encrypt(self, plaintext: Sequence[int]) -> BitVector:
        return encrypt_block(plaintext, self.subkeys)

    def decrypt(self, ciphertext: Sequence[int]) -> BitVector:
        return decrypt_block(ciphertext, self.subkeys)
