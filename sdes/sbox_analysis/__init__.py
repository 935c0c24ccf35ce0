"""
S-box Analysis Package

This package evaluates the S-boxes used by the round function against
differential and linear cryptanalysis.
"""

from .tables import (
    difference_distribution_table, linear_approximation_table,
    differential_uniformity, max_linear_bias, evaluate_sbox,
)

__all__ = ['difference_distribution_table', 'linear_approximation_table',
           'differential_uniformity', 'max_linear_bias', 'evaluate_sbox']
