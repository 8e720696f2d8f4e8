"""Tests for NTT-friendly prime modulus search."""

import pytest
from sympy import isprime

from integer_ntt.modulus import find_modulus


class TestFindModulus:
    """Test search for primes of the form k*n + 1."""

    @pytest.mark.parametrize("n, minimum, expected", [
        (4, 5, 5),
        (1, 1, 2),
        (3, 1, 7),
        (8, 1, 17),
        (4, 257, 257),
        (4, 258, 269),
        (256, 3329, 3329),
        (256, 3330, 7681),
        (1024, 1, 12289),
        (2048, 1, 12289),
    ])
    def test_known_moduli(self, n: int, minimum: int, expected: int) -> None:
        assert find_modulus(n, minimum) == expected

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 6, 12, 16, 100])
    @pytest.mark.parametrize("minimum", [1, 2, 50, 1000, 10**6])
    def test_smallest_valid_prime(self, n: int, minimum: int) -> None:
        mod = find_modulus(n, minimum)
        assert isprime(mod)
        assert mod > n
        assert mod >= minimum
        assert (mod - 1) % n == 0
        # No smaller candidate k*n + 1 qualifies
        for candidate in range(mod - n, 1, -n):
            if candidate < minimum:
                break
            assert not isprime(candidate)

    def test_iteration_cap(self) -> None:
        """The first 11 candidates for n=1024 are composite; 12289 is the 12th."""
        with pytest.raises(RuntimeError):
            find_modulus(1024, 1, max_iterations=11)
        assert find_modulus(1024, 1, max_iterations=12) == 12289

    def test_verbose_output(self, capsys) -> None:
        find_modulus(4, 5, verbose=True)
        out = capsys.readouterr().out
        assert "Searching for prime" in out
        assert "p = 5" in out

    @pytest.mark.parametrize("n, minimum", [(0, 5), (-4, 5), (4, 0), (4, -1)])
    def test_invalid_arguments(self, n: int, minimum: int) -> None:
        with pytest.raises(ValueError):
            find_modulus(n, minimum)

    def test_invalid_iteration_cap(self) -> None:
        with pytest.raises(ValueError):
            find_modulus(4, 5, max_iterations=0)
