"""Tests for the integer-ntt command-line interface."""

import pytest

from integer_ntt.main import main, parse_vector, run_roundtrip_tests


class TestCommands:
    """Test each CLI mode end to end."""

    @pytest.mark.parametrize("method", ["direct", "radix2"])
    def test_convolve(self, capsys, method: str) -> None:
        assert main(["convolve", "1,2,3,4", "5,6,7,8", "--method", method]) == 0
        assert capsys.readouterr().out.strip() == "66,68,66,60"

    def test_polymul(self, capsys) -> None:
        assert main(["polymul", "1,2,3", "4,5"]) == 0
        assert capsys.readouterr().out.strip() == "4,13,22,15"

    def test_multiply(self, capsys) -> None:
        assert main(["multiply", "12345678", "87654321"]) == 0
        assert capsys.readouterr().out.strip() == str(12345678 * 87654321)

    def test_multiply_base(self, capsys) -> None:
        assert main(["multiply", "255", "255", "--base", "2"]) == 0
        assert capsys.readouterr().out.strip() == "65025"

    def test_params(self, capsys) -> None:
        assert main(["params", "4", "257"]) == 0
        out = capsys.readouterr().out
        assert "mod = 257" in out
        assert "generator = 3" in out
        assert "root = 241" in out

    @pytest.mark.parametrize("N, method", [(8, "direct"), (8, "radix2"), (6, "direct"), (1, "radix2")])
    def test_roundtrip(self, capsys, N: int, method: str) -> None:
        args = ["roundtrip", str(N), "--num-tests", "2", "--seed", "1", "--method", method]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "✓ PASS" in out
        assert "✗ FAIL" not in out

    def test_verbose(self, capsys) -> None:
        assert main(["convolve", "1,2", "3,4", "-v"]) == 0
        assert "Searching for prime" in capsys.readouterr().out


class TestErrors:
    """Test error reporting and exit codes."""

    def test_invalid_vector(self, capsys) -> None:
        assert main(["convolve", "1,a", "3,4"]) == 2
        assert "Invalid vector" in capsys.readouterr().err

    def test_mismatched_lengths(self, capsys) -> None:
        assert main(["convolve", "1,2,3", "3,4"]) == 2
        assert "same length" in capsys.readouterr().err

    def test_negative_element(self, capsys) -> None:
        assert main(["convolve", "1,-2", "3,4"]) == 2

    def test_radix2_non_power_of_two(self, capsys) -> None:
        assert main(["roundtrip", "6", "--method", "radix2"]) == 2
        assert "power of 2" in capsys.readouterr().err

    def test_params_iteration_cap(self, capsys) -> None:
        assert main(["params", "1024", "1", "--max-iterations", "3"]) == 1
        assert "Could not find prime" in capsys.readouterr().err

    def test_wrong_operand_count(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["convolve", "1,2"])
        assert exc.value.code == 2

    def test_unknown_mode(self) -> None:
        with pytest.raises(SystemExit):
            main(["fft", "8"])


class TestHelpers:
    """Test argument parsing helpers."""

    def test_parse_vector(self) -> None:
        assert parse_vector("1,2,3") == [1, 2, 3]
        assert parse_vector("1, 2 ,3,") == [1, 2, 3]
        assert parse_vector("42") == [42]

    def test_run_roundtrip_tests_returns_status(self, capsys) -> None:
        assert run_roundtrip_tests(4, 3, method="radix2", max_value=50, seed=3)
        assert "Summary: 3 tests completed" in capsys.readouterr().out
