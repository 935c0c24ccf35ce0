"""
Codec Package

This package converts between human-facing text and binary strings and
the bit vectors consumed by the cipher core.
"""

from .binary import (
    from_binary_string, to_binary_string, split_blocks, text_to_blocks, blocks_to_text,
    encrypt_text, decrypt_text, encrypt_binary, decrypt_binary,
)
from ..bitops import bits_to_int, int_to_bits

__all__ = ['from_binary_string', 'to_binary_string', 'split_blocks', 'text_to_blocks',
           'blocks_to_text', 'encrypt_text', 'decrypt_text', 'encrypt_binary',
           'decrypt_binary', 'bits_to_int', 'int_to_bits']
