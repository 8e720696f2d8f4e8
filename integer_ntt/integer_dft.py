"""
Number-theoretic transforms over Z_p.

Two algorithms compute the same result: a direct O(N²) evaluation for any
length, and an in-place iterative radix-2 Cooley-Tukey NTT for power-of-two
lengths. All outputs are canonical residues in [0, p).
"""

import numpy as np

TRANSFORM_METHODS = ("direct", "radix2")


def _check_params(n: int, mod: int) -> None:
    if n < 1:
        raise ValueError("Input vector must not be empty")
    if mod < 2:
        raise ValueError(f"Modulus must be >= 2, got {mod}")


def transform(vec, root: int, mod: int) -> list:
    """
    Compute the forward NTT by direct evaluation.

    out[i] = sum_j vec[j] * root^(i*j mod N) mod p

    Args:
        vec: Input coefficients (length N >= 1)
        root: Primitive N-th root of unity modulo mod (not verified)
        mod: Modulus

    Returns:
        List of N transformed values
    """
    n = len(vec)
    _check_params(n, mod)

    values = [int(x) for x in vec]
    powers = [1] * n
    for k in range(1, n):
        powers[k] = (powers[k - 1] * root) % mod

    result = []
    for i in range(n):
        total = 0
        for j, val in enumerate(values):
            total = (total + val * powers[(i * j) % n]) % mod
        result.append(total)
    return result


def inverse_transform(vec, root: int, mod: int) -> list:
    """Compute the inverse NTT: forward transform with root^-1, scaled by N^-1."""
    n = len(vec)
    _check_params(n, mod)

    result = transform(vec, pow(root, -1, mod), mod)
    scaler = pow(n, -1, mod)
    return [(val * scaler) % mod for val in result]


def bit_reverse_indices(n: int) -> np.ndarray:
    """Generate bit-reversed indices for power-of-two size n."""
    if n < 1 or n & (n - 1) != 0:
        raise ValueError(f"Length {n} is not a power of 2")
    levels = n.bit_length() - 1
    indices = np.arange(n, dtype=np.int64)
    reversed_indices = np.zeros(n, dtype=np.int64)
    for _ in range(levels):
        reversed_indices = (reversed_indices << 1) | (indices & 1)
        indices >>= 1
    return reversed_indices


def transform_radix2(vector, root: int, mod: int) -> None:
    """
    Compute the forward NTT in place using the iterative radix-2 algorithm.

    Input: Normal order, values in [0, mod)
    Output: Normal order (bit-reversal is applied on the input side)

    The vector is modified in place; the caller must not hold another
    reference to it for the duration of the call.

    Args:
        vector: Mutable sequence (list or 1-D object array) of length N = 2^k
        root: Primitive N-th root of unity modulo mod (not verified)
        mod: Modulus
    """
    n = len(vector)
    if n < 1 or n & (n - 1) != 0:
        raise ValueError(f"Length {n} is not a power of 2")
    if mod < 2:
        raise ValueError(f"Modulus must be >= 2, got {mod}")

    # Twiddle factors root^i for i in [0, N/2)
    powtable = []
    temp = 1
    for _ in range(n // 2):
        powtable.append(temp)
        temp = (temp * root) % mod

    # Bit-reversal permutation; j > i so each pair is swapped once
    brv = bit_reverse_indices(n)
    for i in range(n):
        j = int(brv[i])
        if j > i:
            vector[i], vector[j] = vector[j], vector[i]

    # Cooley-Tukey butterflies
    size = 2
    while size <= n:
        halfsize = size // 2
        tablestep = n // size
        for start in range(0, n, size):
            k = 0
            for j in range(start, start + halfsize):
                left = vector[j]
                right = (vector[j + halfsize] * powtable[k]) % mod
                vector[j] = (left + right) % mod
                vector[j + halfsize] = (left - right) % mod
                k += tablestep
        size *= 2


def inverse_transform_radix2(vector, root: int, mod: int) -> None:
    """Compute the inverse NTT in place for power-of-two length N."""
    n = len(vector)
    transform_radix2(vector, pow(root, -1, mod), mod)
    scaler = pow(n, -1, mod)
    for i in range(n):
        vector[i] = (vector[i] * scaler) % mod


def forward(vec, root: int, mod: int, method: str = "direct") -> list:
    """Compute the forward NTT.

    Args:
        vec: Input coefficients
        root: Primitive N-th root of unity modulo mod
        mod: Modulus
        method: "direct" for O(N²) evaluation, "radix2" for the O(N log N) in-place algorithm
    """
    if method == "direct":
        return transform(vec, root, mod)
    elif method == "radix2":
        result = [int(x) for x in vec]
        transform_radix2(result, root, mod)
        return result
    else:
        raise ValueError(f"Unknown method: {method}. Use 'direct' or 'radix2'")


def inverse(vec, root: int, mod: int, method: str = "direct") -> list:
    """Compute the inverse NTT with the given method."""
    if method == "direct":
        return inverse_transform(vec, root, mod)
    elif method == "radix2":
        result = [int(x) for x in vec]
        inverse_transform_radix2(result, root, mod)
        return result
    else:
        raise ValueError(f"Unknown method: {method}. Use 'direct' or 'radix2'")
