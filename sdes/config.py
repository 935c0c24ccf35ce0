"""
Configuration

Module-level defaults for the key search and the password-based key
derivation, plus environment overrides for the search settings.
"""

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Defaults for the brute-force key search
SEARCH_DEFAULTS = {
    'timeout': 60.0,      # Seconds to wait for all workers
    'max_workers': None,  # None means one worker per CPU
}

# Default parameters for Argon2id
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'hash_len': 16,       # Output size in bytes
    'salt_len': 16        # Salt size in bytes
}

ENV_SEARCH_TIMEOUT = 'SDES_SEARCH_TIMEOUT'
ENV_MAX_WORKERS = 'SDES_MAX_WORKERS'


@dataclass(frozen=True)
class SearchConfig:
    """Resolved settings for one key search."""
    timeout: float
    max_workers: Optional[int]


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_SEARCH_TIMEOUT} must be a number of seconds, got {raw!r}")
    if math.isnan(timeout) or timeout < 0:
        raise ValueError(f"{ENV_SEARCH_TIMEOUT} must be a non-negative number, got {raw!r}")
    return timeout


def _parse_workers(raw: str) -> int:
    try:
        workers = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_MAX_WORKERS} must be an integer, got {raw!r}")
    if workers < 1:
        raise ValueError(f"{ENV_MAX_WORKERS} must be at least 1, got {raw!r}")
    return workers


def load_search_config(environ: Optional[Mapping[str, str]] = None) -> SearchConfig:
    """
    Build the search configuration from the defaults and the environment.

    Args:
        environ: Mapping to read overrides from (default: ``os.environ``)

    Returns:
        The resolved SearchConfig

    Raises:
        ValueError: If an override is present but malformed
    """
    if environ is None:
        environ = os.environ

    timeout = SEARCH_DEFAULTS['timeout']
    max_workers = SEARCH_DEFAULTS['max_workers']

    if environ.get(ENV_SEARCH_TIMEOUT):
        timeout = _parse_timeout(environ[ENV_SEARCH_TIMEOUT])
    if environ.get(ENV_MAX_WORKERS):
        max_workers = _parse_workers(environ[ENV_MAX_WORKERS])

    return SearchConfig(timeout=timeout, max_workers=max_workers)


def resolve_worker_count(max_workers: Optional[int] = None) -> int:
    """
    Number of workers to run, one per available CPU unless given.

    Args:
        max_workers: Explicit worker count, or None for the hardware default

    Returns:
        A worker count of at least 1
    """
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        return max_workers
    return max(1, os.cpu_count() or 1)
