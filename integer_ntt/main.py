#!/usr/bin/env python3
"""
Command-line interface for the integer NTT toolkit.

Modes:
1. convolve   - exact circular convolution of two vectors
2. polymul    - linear product of two coefficient lists
3. multiply   - product of two non-negative integers via digit convolution
4. params     - modulus, generator and primitive root for a transform length
5. roundtrip  - random forward/inverse and direct vs radix-2 self-test
"""

import argparse
import random
import sys

from .integer import circular_convolve, describe_params, find_params, multiply_integers, polynomial_multiply
from .integer_dft import TRANSFORM_METHODS, forward, inverse

OPERAND_COUNTS = {
    'convolve': 2,
    'polymul': 2,
    'multiply': 2,
    'params': 2,
    'roundtrip': 1,
}


def parse_vector(text: str) -> list:
    """Parse a comma-separated list of integers such as '1,2,3'."""
    try:
        return [int(x) for x in text.split(',') if x.strip()]
    except ValueError:
        raise ValueError(f"Invalid vector: {text!r}") from None


def parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid integer: {text!r}") from None


def generate_random_vector(N, max_value, rng):
    """Generate a random non-negative test vector of size N."""
    return [rng.randint(0, max_value) for _ in range(N)]


def run_roundtrip_tests(N, num_tests, method='direct', max_value=100, seed=None, verbose=False):
    """Round-trip random vectors through the NTT and cross-check both transform methods."""
    rng = random.Random(seed)

    print(f"Testing Integer NTT with {num_tests} random vectors (N={N}, method={method})")
    print("=" * 60)

    root, mod = find_params(N, max_value + 1, verbose=verbose)
    print(f"Using prime p = {mod}, root = {root}")

    cross_check = N & (N - 1) == 0
    all_passed = True

    for i in range(num_tests):
        test_vec = generate_random_vector(N, max_value, rng)

        transformed = forward(test_vec, root, mod, method=method)
        recovered = inverse(transformed, root, mod, method=method)
        success = recovered == test_vec

        if cross_check:
            other = 'radix2' if method == 'direct' else 'direct'
            success = success and transformed == forward(test_vec, root, mod, method=other)

        status = "✓ PASS" if success else "✗ FAIL"
        if not success:
            all_passed = False

        if verbose:
            print(f"Test {i+1}: Random vector {test_vec}, {status}")
            print(f"  NTT:  {transformed}")
        else:
            print(f"Test {i+1}: Random integer vector, {status}")

        if not success:
            print(f"  Expected: {test_vec}")
            print(f"  Got:      {recovered}")

    print(f"\nSummary: {num_tests} tests completed")
    return all_passed


def run(args) -> int:
    ops = args.operands

    if args.mode == 'convolve':
        result = circular_convolve(parse_vector(ops[0]), parse_vector(ops[1]),
                                   method=args.method, verbose=args.verbose)
        print(','.join(str(x) for x in result))
        return 0

    if args.mode == 'polymul':
        result = polynomial_multiply(parse_vector(ops[0]), parse_vector(ops[1]), verbose=args.verbose)
        print(','.join(str(x) for x in result))
        return 0

    if args.mode == 'multiply':
        print(multiply_integers(parse_int(ops[0]), parse_int(ops[1]), base=args.base, verbose=args.verbose))
        return 0

    if args.mode == 'params':
        params = describe_params(parse_int(ops[0]), parse_int(ops[1]),
                                 max_iterations=args.max_iterations, verbose=args.verbose)
        for key, value in params.items():
            print(f"{key} = {value}")
        return 0

    N = parse_int(ops[0])
    if N < 1:
        raise ValueError(f"Transform size must be >= 1, got {N}")
    if args.method == 'radix2' and N & (N - 1) != 0:
        raise ValueError(f"N={N} must be a power of 2 for the radix2 method")
    if args.max_value < 0:
        raise ValueError(f"--max-value must be >= 0, got {args.max_value}")

    success = run_roundtrip_tests(N, args.num_tests, method=args.method, max_value=args.max_value,
                                  seed=args.seed, verbose=args.verbose)
    print("✅ Integer NTT tests passed!" if success else "❌ Integer NTT tests failed!")
    return 0 if success else 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='integer-ntt',
        description='Exact integer convolution with the number-theoretic transform',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s convolve 1,2,3,4 5,6,7,8            # Circular convolution
  %(prog)s convolve 1,2,3,4 5,6,7,8 --method radix2
  %(prog)s polymul 1,2,3 4,5                   # (1+2X+3X^2) * (4+5X)
  %(prog)s multiply 12345678 87654321          # Integer product
  %(prog)s params 16 1000 -v                   # Modulus and roots for N=16
  %(prog)s roundtrip 8 --num-tests 10          # Random round-trip test
        """)

    parser.add_argument('mode', choices=list(OPERAND_COUNTS),
                        help='Operation to run')
    parser.add_argument('operands', nargs='*',
                        help='Operands for the mode (vectors are comma-separated)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print modulus search and transform details')
    parser.add_argument('--method', choices=TRANSFORM_METHODS, default='direct',
                        help='Transform algorithm (default: direct)')
    parser.add_argument('--base', type=int, default=10,
                        help='Digit base for multiply mode (default: 10)')
    parser.add_argument('--max-iterations', type=int,
                        help='Cap on modulus candidates tested in params mode (default: unbounded)')
    parser.add_argument('--num-tests', type=int, default=3,
                        help='Number of random test cases for roundtrip mode (default: 3)')
    parser.add_argument('--max-value', type=int, default=100,
                        help='Largest random element for roundtrip mode (default: 100)')
    parser.add_argument('--seed', type=int,
                        help='Random seed for roundtrip mode')

    args = parser.parse_args(argv)

    expected = OPERAND_COUNTS[args.mode]
    if len(args.operands) != expected:
        parser.error(f"{args.mode} takes {expected} operand(s), got {len(args.operands)}")

    try:
        return run(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
