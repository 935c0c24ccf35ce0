"""
Bit Vector Operations

Fixed-length bit vectors are tuples of 0/1 integers, most significant bit
first. Permutation tables use 1-based source positions: output bit ``i``
is input bit ``table[i] - 1``.
"""

from typing import Iterable, Sequence, Tuple, Type

from .exceptions import InvalidBitCharacter

BitVector = Tuple[int, ...]
PermutationTable = Tuple[int, ...]


def as_bit_vector(bits: Iterable[int], length: int,
                  error: Type[ValueError], role: str = "Input") -> BitVector:
    """
    Validate a bit sequence and return it as a BitVector.

    Args:
        bits: Sequence of 0/1 values (bools accepted)
        length: Exact number of bits required
        error: Exception class raised on a length mismatch
        role: Name used in the error message

    Returns:
        The bits as a tuple of ints

    Raises:
        error: If the sequence is not exactly ``length`` bits long
        InvalidBitCharacter: If an element is not 0 or 1
    """
    vector = tuple(bits)
    if len(vector) != length:
        raise error(f"{role} must be exactly {length} bits, got {len(vector)}")
    for bit in vector:
        if bit not in (0, 1):
            raise InvalidBitCharacter(f"{role} contains a non-bit value: {bit!r}")
    return tuple(int(bit) for bit in vector)


def permute(bits: Sequence[int], table: PermutationTable) -> BitVector:
    """Reorder ``bits`` according to a 1-based permutation table."""
    return tuple(bits[i - 1] for i in table)


def rotate_left(bits: Sequence[int], shift: int) -> BitVector:
    """
    Circularly rotate a bit vector to the left.

    Args:
        bits: The bits to rotate
        shift: Number of positions to rotate by

    Returns:
        The rotated bits
    """
    shift %= len(bits)
    return tuple(bits[shift:]) + tuple(bits[:shift])


def xor(left: Sequence[int], right: Sequence[int]) -> BitVector:
    # Callers guarantee equal lengths
    return tuple(a ^ b for a, b in zip(left, right))


def split(bits: Sequence[int]) -> Tuple[BitVector, BitVector]:
    """Split a bit vector into equal left and right halves."""
    half = len(bits) // 2
    return tuple(bits[:half]), tuple(bits[half:])


def combine(left: Sequence[int], right: Sequence[int]) -> BitVector:
    return tuple(left) + tuple(right)


def bits_to_int(bits: Sequence[int]) -> int:
    """Interpret a bit vector as an unsigned big-endian integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def int_to_bits(value: int, width: int) -> BitVector:
    """
    Convert an unsigned integer to a big-endian bit vector.

    Args:
        value: Integer in the range [0, 2**width)
        width: Number of bits in the result

    Returns:
        The bits of ``value``, most significant first

    Raises:
        ValueError: If ``value`` does not fit in ``width`` bits
    """
    if value < 0 or value >= 1 << width:
        raise ValueError(f"Value {value} does not fit in {width} bits")
    return tuple((value >> (width - 1 - i)) & 1 for i in range(width))
