"""
Brute-Force Key Search

This module recovers the keys consistent with a known plaintext/ciphertext
pair by testing the whole 10-bit keyspace on a thread pool.

The 8-bit output space is smaller than the keyspace, so several keys
usually map a given plaintext to the same ciphertext. ``brute_force_all``
returns the complete matching set; ``brute_force_first`` stops at the first
match, which is not necessarily the key that produced the ciphertext.
"""

import logging
import math
import threading
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

import numpy as np

from ..bitops import BitVector, as_bit_vector, int_to_bits
from ..cipher_core.block_cipher import BLOCK_SIZE, encrypt_block
from ..config import load_search_config, resolve_worker_count
from ..exceptions import InvalidBlockLength, SearchTimedOut
from ..key_schedule.sdes_key_schedule import KEY_SIZE, derive_subkeys

logger = logging.getLogger(__name__)

KEYSPACE_SIZE = 1 << KEY_SIZE


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a keyspace search.

    Attributes:
        keys: Every matching key found
        timed_out: True if the deadline stopped the search before every
            candidate was checked
        candidates_checked: Number of candidate keys actually tested
    """
    keys: FrozenSet[BitVector]
    timed_out: bool
    candidates_checked: int

    @property
    def exhausted(self) -> bool:
        """True when every key in the keyspace was tested."""
        return not self.timed_out and self.candidates_checked == KEYSPACE_SIZE

    def raise_for_timeout(self) -> "SearchResult":
        """
        Raise SearchTimedOut if this search did not finish.

        Returns:
            This result, so the call can be chained
        """
        if self.timed_out:
            raise SearchTimedOut(
                f"Key search timed out after checking {self.candidates_checked} "
                f"of {KEYSPACE_SIZE} keys",
                result=self,
            )
        return self


class _FirstMatch:
    """Single-writer slot: the first offered key is kept, later offers are ignored."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._key: Optional[BitVector] = None
        self.found = threading.Event()

    def offer(self, key: BitVector) -> bool:
        with self._lock:
            if self._key is not None:
                return False
            self._key = key
        self.found.set()
        return True

    @property
    def key(self) -> Optional[BitVector]:
        with self._lock:
            return self._key


def key_matches(candidate: Sequence[int], plaintext: Sequence[int], ciphertext: Sequence[int]) -> bool:
    """
    Check one candidate key against a known plaintext/ciphertext pair.

    Subkeys are derived fresh for every candidate.

    Args:
        candidate: 10-bit candidate key
        plaintext: Known 8-bit plaintext
        ciphertext: Known 8-bit ciphertext

    Returns:
        True if the candidate encrypts the plaintext to the ciphertext
    """
    return encrypt_block(plaintext, derive_subkeys(candidate)) == tuple(ciphertext)


def _partition(workers: int) -> List[range]:
    # One contiguous slice of the keyspace per worker
    chunks = np.array_split(np.arange(KEYSPACE_SIZE), workers)
    return [range(int(chunk[0]), int(chunk[-1]) + 1) for chunk in chunks if len(chunk)]


def _search_chunk(candidates: range, plaintext: BitVector, ciphertext: BitVector,
                  stop: threading.Event, slot: Optional[_FirstMatch] = None) -> Tuple[List[BitVector], int]:
    # Matches are kept locally and merged by the caller after the join
    matches = []
    checked = 0
    for value in candidates:
        if stop.is_set():
            break
        candidate = int_to_bits(value, KEY_SIZE)
        checked += 1
        if key_matches(candidate, plaintext, ciphertext):
            logger.debug(f"Key {''.join(map(str, candidate))} matches")
            matches.append(candidate)
            if slot is not None:
                slot.offer(candidate)
                stop.set()
                break
    return matches, checked


def _validate_pair(plaintext: Sequence[int], ciphertext: Sequence[int]) -> Tuple[BitVector, BitVector]:
    return (as_bit_vector(plaintext, BLOCK_SIZE, InvalidBlockLength, "Plaintext"),
            as_bit_vector(ciphertext, BLOCK_SIZE, InvalidBlockLength, "Ciphertext"))


def _resolve_timeout(timeout: Optional[float]) -> float:
    if timeout is None:
        return load_search_config().timeout
    if math.isnan(timeout) or timeout < 0:
        raise ValueError(f"Timeout must be a non-negative number of seconds, got {timeout}")
    return timeout


def _resolve_workers(max_workers: Optional[int]) -> int:
    if max_workers is None:
        max_workers = load_search_config().max_workers
    return resolve_worker_count(max_workers)


def _run(plaintext: BitVector, ciphertext: BitVector, timeout: float, workers: int,
         slot: Optional[_FirstMatch] = None) -> SearchResult:
    stop = threading.Event()
    chunks = _partition(workers)
    executor = ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="sdes-search")
    deadline = time.monotonic() + timeout

    try:
        futures = {executor.submit(_search_chunk, chunk, plaintext, ciphertext, stop, slot)
                   for chunk in chunks}
        pending = futures
        while pending:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            # Lock waits reject timeouts above TIMEOUT_MAX; wait without a bound instead
            wait_for = remaining if remaining <= threading.TIMEOUT_MAX else None
            _, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)
            if slot is not None and slot.found.is_set():
                break
    finally:
        # Stop running chunks at their next candidate; never wait on them here
        stop.set()
        executor.shutdown(wait=False, cancel_futures=True)

    keys = set()
    checked = 0
    for future in futures:
        if future.done() and not future.cancelled():
            matches, count = future.result()
            keys.update(matches)
            checked += count

    found_early = slot is not None and slot.found.is_set()
    timed_out = not found_early and checked < KEYSPACE_SIZE
    return SearchResult(keys=frozenset(keys), timed_out=timed_out, candidates_checked=checked)


def brute_force_all(plaintext: Sequence[int], ciphertext: Sequence[int],
                    timeout: Optional[float] = None,
                    max_workers: Optional[int] = None) -> SearchResult:
    """
    Find every key that encrypts ``plaintext`` to ``ciphertext``.

    All 1024 keys are tested across a thread pool. If the deadline passes
    first, the keys found so far are returned with ``timed_out`` set, which
    is never the same as a completed search with no matches.

    Args:
        plaintext: Known 8-bit plaintext
        ciphertext: Known 8-bit ciphertext
        timeout: Seconds to wait for the workers (default from configuration)
        max_workers: Worker count (default: one per CPU)

    Returns:
        The SearchResult

    Raises:
        InvalidBlockLength: If either block is not exactly 8 bits
        ValueError: If timeout is negative or max_workers is below 1
    """
    plaintext, ciphertext = _validate_pair(plaintext, ciphertext)
    timeout = _resolve_timeout(timeout)
    workers = _resolve_workers(max_workers)

    logger.info(f"Searching {KEYSPACE_SIZE} keys with {workers} workers (timeout {timeout}s)")
    result = _run(plaintext, ciphertext, timeout, workers)

    if result.timed_out:
        logger.warning(f"Key search timed out after {result.candidates_checked} candidates, "
                       f"{len(result.keys)} matches so far")
    else:
        logger.info(f"Key search done: {len(result.keys)} matching keys")
    return result


def brute_force_first(plaintext: Sequence[int], ciphertext: Sequence[int],
                      timeout: Optional[float] = None,
                      max_workers: Optional[int] = None) -> Optional[BitVector]:
    """
    Find any one key that encrypts ``plaintext`` to ``ciphertext``.

    The returned key is consistent with the pair but is not guaranteed to
    be the key that was actually used, nor the same key on every run.

    Args:
        plaintext: Known 8-bit plaintext
        ciphertext: Known 8-bit ciphertext
        timeout: Seconds to wait for the workers (default from configuration)
        max_workers: Worker count (default: one per CPU)

    Returns:
        A matching key, or None if the whole keyspace has no match

    Raises:
        InvalidBlockLength: If either block is not exactly 8 bits
        SearchTimedOut: If the deadline passed with no match found
    """
    plaintext, ciphertext = _validate_pair(plaintext, ciphertext)
    timeout = _resolve_timeout(timeout)
    workers = _resolve_workers(max_workers)

    logger.info(f"Searching for first matching key with {workers} workers (timeout {timeout}s)")
    slot = _FirstMatch()
    result = _run(plaintext, ciphertext, timeout, workers, slot)

    if slot.key is not None:
        logger.info(f"First matching key: {''.join(map(str, slot.key))}")
        return slot.key

    result.raise_for_timeout()
    logger.info("Key search done: no matching key")
    return None
