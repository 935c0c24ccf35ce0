"""
Round Function

This module implements the S-DES round function F (expansion, key mixing,
S-box substitution, P4 permutation) and the f_K Feistel step built on it.
"""

from typing import Sequence

from ..bitops import BitVector, as_bit_vector, combine, int_to_bits, permute, split, xor
from ..exceptions import InvalidBlockLength, InvalidKeyLength

HALF_SIZE = 4

# Expansion permutation, 4 -> 8 bits (positions repeat)
EP = (4, 1, 2, 3, 2, 3, 4, 1)
P4 = (2, 4, 3, 1)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 0, 2),
)

S1 = (
    (0, 1, 2, 3),
    (2, 3, 1, 0),
    (3, 0, 1, 2),
    (2, 1, 0, 3),
)


def sbox_lookup(bits: Sequence[int], sbox: Sequence[Sequence[int]]) -> BitVector:
    """
    Substitute a 4-bit input through a 4x4 S-box.

    The row is taken from the outer bits (0 and 3) and the column from the
    inner bits (1 and 2).

    Args:
        bits: 4-bit input
        sbox: The S-box table

    Returns:
        The 2-bit S-box output
    """
    row = (bits[0] << 1) | bits[3]
    col = (bits[1] << 1) | bits[2]
    return int_to_bits(sbox[row][col], 2)


def apply_round_function(right_half: Sequence[int], subkey: Sequence[int]) -> BitVector:
    """
    Apply the round function F to a right half.

    Args:
        right_half: 4-bit half block
        subkey: 8-bit round subkey

    Returns:
        The 4-bit output of F

    Raises:
        InvalidBlockLength: If the half block is not 4 bits
        InvalidKeyLength: If the subkey is not 8 bits
    """
    right_half = as_bit_vector(right_half, HALF_SIZE, InvalidBlockLength, "Half block")
    subkey = as_bit_vector(subkey, 8, InvalidKeyLength, "Subkey")

    expanded = permute(right_half, EP)
    mixed = xor(expanded, subkey)
    s0_input, s1_input = split(mixed)

    substituted = combine(sbox_lookup(s0_input, S0), sbox_lookup(s1_input, S1))
    return permute(substituted, P4)


def feistel_round(block: Sequence[int], subkey: Sequence[int]) -> BitVector:
    """
    The f_K step: XOR the left half with F(right half), keep the right half.

    Args:
        block: 8-bit state
        subkey: 8-bit round subkey

    Returns:
        The new 8-bit state
    """
    block = as_bit_vector(block, 2 * HALF_SIZE, InvalidBlockLength, "Block")
    left, right = split(block)
    return combine(xor(left, apply_round_function(right, subkey)), right)
