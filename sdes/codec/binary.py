"""
Text and Binary Codec

Conversions between human-facing representations ("0"/"1" strings and
character text) and the bit vectors used by the cipher. Multi-block
helpers transform each 8-bit block independently; there is no chaining.
"""

from typing import Iterable, List, Sequence

from ..bitops import BitVector, bits_to_int, int_to_bits
from ..cipher_core.block_cipher import BLOCK_SIZE, SdesCipher
from ..exceptions import InvalidBitCharacter, InvalidBlockLength

# One byte per character, so every ciphertext byte maps to a character
TEXT_ENCODING = 'latin-1'


def from_binary_string(text: str) -> BitVector:
    """
    Parse a string of '0' and '1' characters into a bit vector.

    Length is left to the consumer, which raises the error for its role.

    Args:
        text: The binary string

    Returns:
        The parsed bits

    Raises:
        InvalidBitCharacter: If the string contains anything but '0' and '1'
    """
    for position, char in enumerate(text):
        if char not in '01':
            raise InvalidBitCharacter(f"Invalid binary character {char!r} at position {position}")
    return tuple(int(char) for char in text)


def to_binary_string(bits: Iterable[int]) -> str:
    """Render a bit vector as a string of '0' and '1' characters."""
    return ''.join('1' if bit else '0' for bit in bits)


def split_blocks(bits: Sequence[int]) -> List[BitVector]:
    """
    Cut a bit sequence into consecutive 8-bit blocks.

    Raises:
        InvalidBlockLength: If the length is not a multiple of 8
    """
    if len(bits) % BLOCK_SIZE != 0:
        raise InvalidBlockLength(f"Bit length must be a multiple of {BLOCK_SIZE}, got {len(bits)}")
    return [tuple(bits[i:i + BLOCK_SIZE]) for i in range(0, len(bits), BLOCK_SIZE)]


def text_to_blocks(text: str) -> List[BitVector]:
    """
    Convert text to one 8-bit block per character.

    Raises:
        UnicodeEncodeError: If a character does not fit in one byte
    """
    return [int_to_bits(byte, BLOCK_SIZE) for byte in text.encode(TEXT_ENCODING)]


def blocks_to_text(blocks: Iterable[Sequence[int]]) -> str:
    """Convert 8-bit blocks back to text, one character per block."""
    return bytes(bits_to_int(block) for block in blocks).decode(TEXT_ENCODING)


def encrypt_text(text: str, cipher: SdesCipher) -> str:
    """
    Encrypt text character by character.

    Args:
        text: The plaintext
        cipher: Cipher bound to the key

    Returns:
        The ciphertext as text (often unprintable)
    """
    return blocks_to_text(cipher.encrypt(block) for block in text_to_blocks(text))


def decrypt_text(text: str, cipher: SdesCipher) -> str:
    return blocks_to_text(cipher.decrypt(block) for block in text_to_blocks(text))


def encrypt_binary(bits_text: str, cipher: SdesCipher) -> str:
    """
    Encrypt a binary string whose length is a multiple of 8, block by block.

    Raises:
        InvalidBitCharacter: If the string is not binary
        InvalidBlockLength: If the length is not a multiple of 8
    """
    blocks = split_blocks(from_binary_string(bits_text))
    return ''.join(to_binary_string(cipher.encrypt(block)) for block in blocks)


def decrypt_binary(bits_text: str, cipher: SdesCipher) -> str:
    """Inverse of encrypt_binary."""
    blocks = split_blocks(from_binary_string(bits_text))
    return ''.join(to_binary_string(cipher.decrypt(block)) for block in blocks)
