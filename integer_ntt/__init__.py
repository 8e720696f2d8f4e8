"""Exact integer convolution with the number-theoretic transform."""

from .integer import (
    circular_convolve,
    describe_params,
    find_params,
    find_params_and_transform,
    multiply_integers,
    polynomial_multiply,
)
from .integer_dft import (
    TRANSFORM_METHODS,
    bit_reverse_indices,
    forward,
    inverse,
    inverse_transform,
    inverse_transform_radix2,
    transform,
    transform_radix2,
)
from .modulus import find_modulus
from .number_theory import is_prime, sqrt, unique_prime_factors
from .roots import find_generator, find_primitive_root, is_generator, is_primitive_root

__all__ = [
    "TRANSFORM_METHODS",
    "bit_reverse_indices",
    "circular_convolve",
    "describe_params",
    "find_generator",
    "find_modulus",
    "find_params",
    "find_params_and_transform",
    "find_primitive_root",
    "forward",
    "inverse",
    "inverse_transform",
    "inverse_transform_radix2",
    "is_generator",
    "is_prime",
    "is_primitive_root",
    "multiply_integers",
    "polynomial_multiply",
    "sqrt",
    "transform",
    "transform_radix2",
    "unique_prime_factors",
]
