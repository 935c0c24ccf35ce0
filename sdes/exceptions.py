"""
Error Types

This module defines the typed failures raised by the cipher, the key
search engine and the text codec. Length and bit errors subclass
``ValueError`` so callers that already catch the built-in keep working.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .brute_force.search import SearchResult


class SdesError(Exception):
    """Base class for every error raised by this package."""


class InvalidKeyLength(SdesError, ValueError):
    """A key or subkey does not have the exact number of bits required."""


class InvalidBlockLength(SdesError, ValueError):
    """A block or half-block does not have the exact number of bits required."""


class InvalidBitCharacter(SdesError, ValueError):
    """A value that should be a bit is neither 0 nor 1."""


class SearchTimedOut(SdesError, TimeoutError):
    """
    The key search deadline passed before the keyspace was exhausted.

    This is distinct from a completed search with zero matches. The partial
    result gathered before the deadline is kept on ``result``.
    """

    def __init__(self, message: str, result: Optional["SearchResult"] = None):
        super().__init__(message)
        self.result = result
