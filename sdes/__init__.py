"""
SDES - Simplified DES Teaching Cipher Library

This library implements S-DES, a two-round Feistel block cipher with an
8-bit block and a 10-bit key, together with a parallel exhaustive key
search that recovers every key consistent with a known plaintext/ciphertext
pair.

Key Features:
- 10-bit key schedule producing two 8-bit round subkeys
- Round function with expansion, S-box substitution and P4 permutation
- Immutable cipher instances safe to share between threads
- Thread-pool brute force with first-match and all-matches modes
- Bounded search time with a distinct timed-out outcome
- S-box difference and linear approximation tables

"""

from .brute_force import SearchResult, brute_force_all, brute_force_first
from .cipher_core import SdesCipher, decrypt_block, encrypt_block
from .exceptions import (
    InvalidBitCharacter, InvalidBlockLength, InvalidKeyLength, SdesError, SearchTimedOut,
)
from .key_schedule import SubkeyPair, derive_subkeys

__version__ = '0.1.0'

__all__ = ['SearchResult', 'brute_force_all', 'brute_force_first', 'SdesCipher',
           'decrypt_block', 'encrypt_block', 'InvalidBitCharacter', 'InvalidBlockLength',
           'InvalidKeyLength', 'SdesError', 'SearchTimedOut', 'SubkeyPair', 'derive_subkeys']
