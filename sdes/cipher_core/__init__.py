"""
Cipher Core Package

This package implements the core components of the block cipher,
including the round function, the Feistel structure, and the
encryption/decryption operations.
"""

from .block_cipher import BLOCK_SIZE, SdesCipher, encrypt_block, decrypt_block
from .round_function import S0, S1, apply_round_function, feistel_round, sbox_lookup

__all__ = ['BLOCK_SIZE', 'SdesCipher', 'encrypt_block', 'decrypt_block',
           'S0', 'S1', 'apply_round_function', 'feistel_round', 'sbox_lookup']
