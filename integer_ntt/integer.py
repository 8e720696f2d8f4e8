"""
Exact convolution and multiplication built on the number-theoretic transform.

The working prime is chosen large enough that no convolution sum can wrap
around, so the inverse transform yields the true integer results.
"""

from typing import Tuple

import numpy as np

from .integer_dft import TRANSFORM_METHODS, forward, inverse, transform
from .modulus import find_modulus
from .roots import find_generator, find_primitive_root


def _as_int_vector(vec, name: str) -> list:
    """Convert a 1-D sequence or array to a list of non-negative Python ints."""
    arr = np.asarray(vec, dtype=object)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    values = []
    for i, x in enumerate(arr):
        if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
            raise ValueError(f"{name}[{i}] = {x!r} is not an integer")
        if x < 0:
            raise ValueError(f"{name}[{i}] = {x} is negative")
        values.append(int(x))
    return values


def find_params(veclen: int, minimum: int, verbose: bool = False) -> Tuple[int, int]:
    """
    Choose a prime modulus and a primitive root of unity for an NTT.

    Args:
        veclen: Transform length N
        minimum: Lower bound for the modulus

    Returns:
        (root, mod) where mod ≡ 1 (mod N) is prime and root has order exactly N
    """
    mod = find_modulus(veclen, minimum, verbose=verbose)
    root = find_primitive_root(veclen, mod - 1, mod)
    if verbose:
        print(f"Primitive {veclen}-th root of unity mod {mod}: {root}")
    return root, mod


def find_params_and_transform(vec, minimum: int, verbose: bool = False) -> Tuple[list, int, int]:
    """Pick parameters large enough to hold every element of vec, then transform it."""
    values = _as_int_vector(vec, "vec")
    if not values:
        raise ValueError("Input vector must not be empty")
    minimum = max(minimum, max(values) + 1)
    root, mod = find_params(len(values), minimum, verbose=verbose)
    return transform(values, root, mod), root, mod


def circular_convolve(vec0, vec1, method: str = "direct", verbose: bool = False) -> list:
    """
    Compute the exact circular convolution of two non-negative integer vectors.

    result[i] = sum_j vec0[j] * vec1[(i - j) mod N]

    Args:
        vec0, vec1: Vectors of equal length N >= 1 with non-negative entries
        method: "direct" or "radix2" (radix2 requires N to be a power of 2)
        verbose: Print the chosen parameters

    Returns:
        List of N unreduced integers
    """
    a = _as_int_vector(vec0, "vec0")
    b = _as_int_vector(vec1, "vec1")
    if not a:
        raise ValueError("Input vectors must not be empty")
    if len(a) != len(b):
        raise ValueError(f"Vectors must have the same length, got {len(a)} and {len(b)}")

    n = len(a)
    if method not in TRANSFORM_METHODS:
        raise ValueError(f"Unknown method: {method}. Use 'direct' or 'radix2'")
    if method == "radix2" and n & (n - 1) != 0:
        raise ValueError(f"Length {n} is not a power of 2")

    maxval = max(max(a), max(b))
    # Largest possible output is N * maxval^2
    minmod = maxval * maxval * n + 1

    if verbose:
        print(f"Circular convolution: N={n}, max value={maxval}, minimum modulus={minmod}")

    root, mod = find_params(n, minmod, verbose=verbose)

    A = forward(a, root, mod, method=method)
    B = forward(b, root, mod, method=method)
    C = [(A[i] * B[i]) % mod for i in range(n)]
    result = inverse(C, root, mod, method=method)

    if verbose:
        print(f"Result: {result}")
    return result


def _next_power_of_two(n: int) -> int:
    size = 1
    while size < n:
        size *= 2
    return size


def polynomial_multiply(poly1, poly2, verbose: bool = False) -> list:
    """Multiply two polynomials with non-negative integer coefficients using the radix-2 NTT."""
    a = _as_int_vector(poly1, "poly1")
    b = _as_int_vector(poly2, "poly2")
    if not a or not b:
        raise ValueError("Polynomials must have at least one coefficient")

    # Determine transform size
    min_size = len(a) + len(b) - 1
    N = _next_power_of_two(min_size)

    if verbose:
        print(f"Polynomial product of degree {min_size - 1}, transform size N={N}")

    # Zero padding turns the circular convolution into a linear one
    a = a + [0] * (N - len(a))
    b = b + [0] * (N - len(b))

    result = circular_convolve(a, b, method="radix2", verbose=verbose)
    return result[:min_size]


def _to_digits(x: int, base: int) -> list:
    """Little-endian digits of x in the given base."""
    digits = []
    while x > 0:
        x, d = divmod(x, base)
        digits.append(d)
    return digits or [0]


def multiply_integers(a: int, b: int, base: int = 10, verbose: bool = False) -> int:
    """
    Multiply two non-negative integers by convolving their digit vectors.

    Args:
        a, b: Non-negative integers
        base: Digit base used for the convolution (>= 2)

    Returns:
        a * b
    """
    if base < 2:
        raise ValueError(f"Base must be >= 2, got {base}")
    if a < 0 or b < 0:
        raise ValueError(f"Operands must be non-negative, got {a} and {b}")

    coeffs = polynomial_multiply(_to_digits(a, base), _to_digits(b, base), verbose=verbose)

    # Carry propagation from the least significant digit
    result = 0
    place = 1
    carry = 0
    for c in coeffs:
        carry, digit = divmod(c + carry, base)
        result += digit * place
        place *= base
    result += carry * place
    return result


def describe_params(veclen: int, minimum: int, max_iterations=None, verbose: bool = False) -> dict:
    """Collect modulus, generator and primitive root for transform length veclen."""
    mod = find_modulus(veclen, minimum, max_iterations=max_iterations, verbose=verbose)
    totient = mod - 1
    return {
        'N': veclen,
        'mod': mod,
        'generator': find_generator(totient, mod),
        'root': find_primitive_root(veclen, totient, mod),
    }
