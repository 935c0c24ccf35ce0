"""
Brute-Force Package

This package implements the parallel exhaustive key search that recovers
every key consistent with a known plaintext/ciphertext pair.
"""

from .search import KEYSPACE_SIZE, SearchResult, brute_force_all, brute_force_first, key_matches

__all__ = ['KEYSPACE_SIZE', 'SearchResult', 'brute_force_all', 'brute_force_first', 'key_matches']
