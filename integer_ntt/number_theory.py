"""
Integer utilities for NTT parameter selection: floor square root,
primality testing and unique prime factorization over Python ints.
"""

from sympy import isprime


def sqrt(x: int) -> int:
    """Return floor(sqrt(x)), building the root one bit at a time from the top."""
    if x < 0:
        raise ValueError(f"Square root of negative number: {x}")

    y = 0
    for i in range(x.bit_length() // 2, -1, -1):
        y |= 1 << i
        if y * y > x:
            y &= ~(1 << i)
    return y


def is_prime(n: int) -> bool:
    """
    Check if a number is prime.

    sympy's probabilistic test runs first so that composites are rejected
    early; anything it accepts is confirmed by trial division with odd
    divisors up to floor(sqrt(n)).

    Args:
        n: Integer to test, n >= 2

    Returns:
        True if n is prime
    """
    if n < 2:
        raise ValueError(f"Primality test requires n >= 2, got {n}")
    if not isprime(n):
        return False
    if n % 2 == 0:
        return n == 2

    end = sqrt(n)
    for i in range(3, end + 1, 2):
        if n % i == 0:
            return False
    return True


def unique_prime_factors(n: int) -> list:
    """
    Find the distinct prime factors of n in ascending order.

    Each factor is divided out completely once found, and the trial division
    bound shrinks to floor(sqrt(remaining n)). Whatever is left above 1 at the
    end is itself prime.
    """
    if n < 1:
        raise ValueError(f"Factorization requires n >= 1, got {n}")

    factors = []
    end = sqrt(n)
    i = 2
    while i <= end:
        if n % i == 0:
            factors.append(i)
            while n % i == 0:
                n //= i
            end = sqrt(n)
        i += 1

    if n > 1:
        factors.append(n)
    return factors
