"""
Generators and primitive roots of unity modulo a prime.
"""

from .number_theory import unique_prime_factors


def _has_order(val: int, order: int, mod: int, factors: list) -> bool:
    """True iff val has multiplicative order exactly `order` modulo mod."""
    if pow(val, order, mod) != 1:
        return False
    for p in factors:
        if pow(val, order // p, mod) == 1:
            return False
    return True


def is_generator(val: int, totient: int, mod: int) -> bool:
    """
    Check whether val generates the multiplicative group of order totient.

    The order of val divides totient; if it were a proper divisor it would
    divide totient/p for some prime factor p, so only those cofactors need
    to be tested.
    """
    if not 0 <= val < mod:
        raise ValueError(f"Value {val} out of range [0, {mod})")
    if not 1 <= totient < mod:
        raise ValueError(f"Totient {totient} out of range [1, {mod})")
    return _has_order(val, totient, mod, unique_prime_factors(totient))


def is_primitive_root(val: int, degree: int, mod: int) -> bool:
    """Check whether val is a primitive degree-th root of unity modulo mod."""
    if not 0 <= val < mod:
        raise ValueError(f"Value {val} out of range [0, {mod})")
    if not 1 <= degree < mod:
        raise ValueError(f"Degree {degree} out of range [1, {mod})")
    return _has_order(val, degree, mod, unique_prime_factors(degree))


def find_generator(totient: int, mod: int) -> int:
    """
    Find the smallest generator of the multiplicative group modulo mod.

    Args:
        totient: Order of the group (mod - 1 for a prime mod)
        mod: Modulus

    Returns:
        Smallest g in [1, mod) whose order is exactly totient

    Raises:
        ArithmeticError: If no element has order totient
    """
    if not 1 <= totient < mod:
        raise ValueError(f"Totient {totient} out of range [1, {mod})")

    factors = unique_prime_factors(totient)
    for g in range(1, mod):
        if _has_order(g, totient, mod, factors):
            return g
    raise ArithmeticError(f"No generator of order {totient} exists modulo {mod}")


def find_primitive_root(degree: int, totient: int, mod: int) -> int:
    """Find a primitive degree-th root of unity modulo mod from the group generator."""
    if not 1 <= degree <= totient < mod:
        raise ValueError(f"Need 1 <= degree <= totient < mod, got degree={degree}, totient={totient}, mod={mod}")
    if totient % degree != 0:
        raise ValueError(f"Degree {degree} does not divide totient {totient}")

    gen = find_generator(totient, mod)
    return pow(gen, totient // degree, mod)
