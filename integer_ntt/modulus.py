"""
Search for NTT-friendly prime moduli of the form k*n + 1.
"""

from typing import Optional

from .number_theory import is_prime


def find_modulus(n: int, minimum: int, max_iterations: Optional[int] = None, verbose: bool = False) -> int:
    """
    Find the smallest prime p = k*n + 1 (k >= 1) with p >= minimum.

    Dirichlet's theorem guarantees such a prime exists, but not how far away
    it is, so the search is unbounded unless max_iterations is given.

    Args:
        n: Transform length, n >= 1
        minimum: Lower bound for the modulus, minimum >= 1
        max_iterations: Maximum number of candidates to test (default: no limit)
        verbose: Print search progress

    Returns:
        Prime modulus p with p > n, p >= minimum and p ≡ 1 (mod n)
    """
    if n < 1:
        raise ValueError(f"Transform length must be >= 1, got {n}")
    if minimum < 1:
        raise ValueError(f"Minimum modulus must be >= 1, got {minimum}")
    if max_iterations is not None and max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    # Smallest k with k*n + 1 >= minimum
    k = max(1, (minimum - 1 + n - 1) // n)

    if verbose:
        print(f"Searching for prime p ≡ 1 (mod {n}) with p >= {minimum}")
        print(f"Starting search from k = {k}")

    tested = 0
    while True:
        candidate = k * n + 1
        if is_prime(candidate):
            if verbose:
                print(f"Found suitable prime: p = {candidate} (k = {k}, {candidate.bit_length()} bits)")
            return candidate
        k += 1
        tested += 1

        if max_iterations is not None and tested >= max_iterations:
            raise RuntimeError(f"Could not find prime p ≡ 1 (mod {n}) with p >= {minimum} after {tested} candidates")
