"""
S-box Analysis

This module computes the difference distribution table and the linear
approximation table of the 4-bit to 2-bit S-DES S-boxes, and summarises
them as resistance scores against differential and linear cryptanalysis.
"""

import logging
from typing import Dict, Sequence

import numpy as np

from ..bitops import bits_to_int, int_to_bits
from ..cipher_core.round_function import sbox_lookup

logger = logging.getLogger(__name__)

INPUT_BITS = 4
OUTPUT_BITS = 2
INPUT_SIZE = 1 << INPUT_BITS    # 16 inputs
OUTPUT_SIZE = 1 << OUTPUT_BITS  # 4 outputs


def _outputs(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    # S-box output for every 4-bit input, indexed by the input value
    return np.array([bits_to_int(sbox_lookup(int_to_bits(x, INPUT_BITS), sbox))
                     for x in range(INPUT_SIZE)], dtype=np.int32)


def _parity(values: np.ndarray) -> np.ndarray:
    parity = np.zeros_like(values)
    for shift in range(INPUT_BITS):
        parity ^= (values >> shift) & 1
    return parity


def difference_distribution_table(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Calculate the difference distribution table of an S-box.

    Entry ``[dx, dy]`` counts the inputs ``x`` for which
    ``S(x) ^ S(x ^ dx) == dy``.

    Args:
        sbox: The 4x4 S-box to evaluate

    Returns:
        A 16x4 integer array
    """
    outputs = _outputs(sbox)
    inputs = np.arange(INPUT_SIZE)

    ddt = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)
    for dx in range(INPUT_SIZE):
        dy = outputs ^ outputs[inputs ^ dx]
        np.add.at(ddt[dx], dy, 1)
    return ddt


def linear_approximation_table(sbox: Sequence[Sequence[int]]) -> np.ndarray:
    """
    Calculate the linear approximation table of an S-box.

    Entry ``[a, b]`` is the number of inputs for which the parity of
    ``x & a`` equals the parity of ``S(x) & b``, minus half the inputs, so
    zero means no bias.

    Args:
        sbox: The 4x4 S-box to evaluate

    Returns:
        A 16x4 integer array
    """
    outputs = _outputs(sbox)
    inputs = np.arange(INPUT_SIZE)

    lat = np.zeros((INPUT_SIZE, OUTPUT_SIZE), dtype=np.int32)
    for input_mask in range(INPUT_SIZE):
        input_parity = _parity(inputs & input_mask)
        for output_mask in range(OUTPUT_SIZE):
            output_parity = _parity(outputs & output_mask)
            lat[input_mask, output_mask] = np.sum(input_parity == output_parity) - INPUT_SIZE // 2
    return lat


def differential_uniformity(sbox: Sequence[Sequence[int]]) -> int:
    """
    Largest DDT entry over non-zero input differences (lower is better).
    """
    return int(np.max(difference_distribution_table(sbox)[1:, :]))


def max_linear_bias(sbox: Sequence[Sequence[int]]) -> float:
    """
    Largest absolute LAT entry over non-zero masks, normalised to [0, 1].
    """
    lat = linear_approximation_table(sbox)
    return float(np.max(np.abs(lat[1:, 1:]))) / (INPUT_SIZE // 2)


def evaluate_sbox(sbox: Sequence[Sequence[int]]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for both)
    """
    scores = {
        'differential': differential_uniformity(sbox),
        'linear': max_linear_bias(sbox),
    }
    logger.debug(f"S-box scores: {scores}")
    return scores
