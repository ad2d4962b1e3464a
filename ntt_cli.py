#!/usr/bin/env python3
"""
Self-check driver for the finite field NTT.

Runs the utility table, verifies the FFT prime table, checks field identities
and pushes the fixed reference vectors and random inputs through both
forward variants.
"""

import argparse
import logging
import random
import sys

from convolution import cyclic_convolution, naive_cyclic_convolution
from fft_primes import FFT_PRIMES, fft_prime
from field_sequence import FieldSequence
from inplace_ntt import FORWARD_METHODS, intt, ntt
from ntt_errors import NTTError
from numeric_utils import ceil_lg, is_2pow
from reference_vectors import REFERENCE_VECTORS

logger = logging.getLogger("ntt_cli")


def format_vec(name, values, n_per_line=16):
    """Format a vector as `name = [a, b, ...]`, wrapping every n_per_line values."""
    parts = []
    for i, v in enumerate(values):
        sep = "" if i == len(values) - 1 else (",\n      " if (i + 1) % n_per_line == 0 else ", ")
        parts.append(f"{int(v)}{sep}")
    return f"{name} = [{''.join(parts)}]"


def check_utils():
    for n in range(12):
        print(f"n= {n:2d}, ceil_lg(n)= {ceil_lg(n)}, is_2pow= {int(is_2pow(n))}")
    return True


def check_primes(widths):
    all_passed = True
    for width in widths:
        params = fft_prime(width)
        print(f"Info for integers with {width} bits:")
        print(f"p    = {params.p}")
        print(f"g    = {params.g}")
        print(f"Base = {params.base}")
        print(f"     = {params.base:#x}")
        try:
            params.verify()
            print("✓ PASS")
        except ValueError as e:
            print(f"✗ FAIL: {e}")
            all_passed = False
    return all_passed


def check_field(width, limit):
    """Check power, sum, quotient and inverse identities for i < limit."""
    F = fft_prime(width).field()
    print(f"Checking Z mod {F.modulus}")
    errors = 0
    lol, one = F(101), F(1)
    for i in range(limit):
        a = lol.pow(i).inverse()
        b = F(i)
        if a != lol.inverse().pow(i):
            print(f"Error: bad power {i}.")
            errors += 1
        if a - b != a + (-b):
            print(f"Error: bad sum {i}.")
            errors += 1
        if b / a != b * a.inverse():
            print(f"Error: bad mul {i}.")
            errors += 1
        if lol.inverse().pow(i) * lol.pow(i) != one:
            print(f"Error: bad inv {i}.")
            errors += 1
        if a * a != -one and (a + a.inverse()).inverse() != a / (a.pow(2) + 1):
            print(f"Error: bad math {i}.")
            errors += 1
    print(f"Summary: {limit} values checked, {errors} errors")
    return errors == 0


def check_reference_vectors(width, methods, verbose=False):
    params = fft_prime(width)
    data = REFERENCE_VECTORS[width]
    n = data["n"]
    F = params.field()
    g = params.root_of_unity(n)
    trace = logger if verbose else None

    print(f"n  = {n}")
    print(f"p  = {params.p}")
    print(f"g  = {params.g}, omega = {g}")

    all_passed = True
    for method in methods:
        print(f"Testing {method}")
        f1 = FieldSequence.from_digits(F, data["in1"], n)
        f2 = FieldSequence.from_digits(F, data["in2"], n)
        ntt(f1, g, check=True, method=method, logger=trace)
        ntt(f2, g, check=True, method=method, logger=trace)
        f3 = f1 * f2
        if verbose:
            print(format_vec("f1", f1.values(), 8))
            print(format_vec("f2", f2.values(), 8))
            print(format_vec("f3", f3.values(), 8))
        intt(f3, g, check=True, method=method, logger=trace)
        if verbose:
            print(format_vec("f3", f3.values(), 8))
        errs = sum(1 for got, want in zip(f3.values(), data["out"]) if got != want)
        if errs:
            print(f"Not OK: {errs} errors")
            all_passed = False
        else:
            print("OK!")
    return all_passed


def check_random_roundtrips(width, methods, length, num_tests, rng, verbose=False):
    params = fft_prime(width)
    F = params.field()
    omega = params.root_of_unity(length)
    trace = logger if verbose else None

    print(f"Testing round trips with {num_tests} random vectors (n={length}, p={params.p})")
    all_passed = True
    for i in range(num_tests):
        test_vec = [rng.randrange(params.p) for _ in range(length)]
        results = []
        for method in methods:
            x = FieldSequence.from_digits(F, test_vec)
            ntt(x, omega, check=True, method=method, logger=trace)
            results.append(x.values())
            intt(x, omega, check=True, method=method, logger=trace)
            ok = x.values() == test_vec
            status = "✓ PASS" if ok else "✗ FAIL"
            print(f"Test {i+1} ({method}): round trip {status}")
            if not ok:
                all_passed = False
                print(f"  Expected: {test_vec}")
                print(f"  Got:      {x.values()}")
        if any(r != results[0] for r in results[1:]):
            print(f"Test {i+1}: forward variants disagree ✗ FAIL")
            all_passed = False
    return all_passed


def check_convolutions(width, methods, num_tests, rng, verbose=False):
    params = fft_prime(width)
    print(f"Testing convolution with {num_tests} random digit vectors (base={params.base}, p={params.p})")
    all_passed = True
    for i in range(num_tests):
        a = [rng.randrange(params.base) for _ in range(rng.randint(1, 12))]
        b = [rng.randrange(params.base) for _ in range(rng.randint(1, 12))]
        for method in methods:
            got = cyclic_convolution(a, b, params, method=method, logger=logger if verbose else None)
            expected = naive_cyclic_convolution(a, b, params.p, len(got))
            ok = got == expected
            print(f"Test {i+1} ({method}): {len(a)} x {len(b)} digits, {'✓ PASS' if ok else '✗ FAIL'}")
            if not ok:
                all_passed = False
                print(f"  Expected: {expected}")
                print(f"  Got:      {got}")
    return all_passed


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Self-checks for the in-place finite field NTT',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s utils                      # ceil_lg / is_2pow table
  %(prog)s primes                     # Print and verify every FFT prime
  %(prog)s field --width 16 --limit 40965  # Field identities over all of Z mod 40961
  %(prog)s ntt --width 64 -v          # Reference vectors with stage traces
  %(prog)s ntt --length 256 --num-tests 10  # Random round trips of length 256
  %(prog)s convolve --method block-major   # Random digit convolutions, variant B only
  %(prog)s all                        # Everything, every width
        """)

    parser.add_argument('mode', choices=['utils', 'primes', 'field', 'ntt', 'convolve', 'all'],
                        help='Which check to run')
    parser.add_argument('--width', type=int, choices=sorted(FFT_PRIMES),
                        help='Integer width selecting the FFT prime (default: all widths)')
    parser.add_argument('--method', choices=list(FORWARD_METHODS) + ['both'], default='both',
                        help='Forward transform variant (default: both)')
    parser.add_argument('--num-tests', type=int, default=3,
                        help='Number of random test cases to run (default: 3)')
    parser.add_argument('--length', type=int,
                        help='Transform length for random round trips (default: reference vector length)')
    parser.add_argument('--limit', type=int, default=1000,
                        help='Number of values checked in field mode (default: 1000)')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed (default: 42)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print intermediate vectors and log every transform stage')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    if args.length is not None and not is_2pow(args.length):
        print(f"Error: length={args.length} must be a power of 2")
        return 1

    widths = [args.width] if args.width is not None else sorted(FFT_PRIMES)
    methods = list(FORWARD_METHODS) if args.method == 'both' else [args.method]
    rng = random.Random(args.seed)

    success = True
    try:
        if args.mode in ['utils', 'all']:
            success &= check_utils()
        if args.mode in ['primes', 'all']:
            success &= check_primes(widths)
        if args.mode in ['field', 'all']:
            for width in widths:
                success &= check_field(width, args.limit)
        if args.mode in ['ntt', 'all']:
            for width in widths:
                print(f"\nINTEGER NTT ({width}-bit)")
                print("-" * 40)
                success &= check_reference_vectors(width, methods, args.verbose)
                length = args.length or REFERENCE_VECTORS[width]["n"]
                success &= check_random_roundtrips(width, methods, length, args.num_tests, rng, args.verbose)
        if args.mode in ['convolve', 'all']:
            for width in widths:
                success &= check_convolutions(width, methods, args.num_tests, rng, args.verbose)
    except NTTError as e:
        print(f"❌ Error: {e}")
        return 1

    print("\n✅ All checks passed!" if success else "\n❌ Some checks failed!")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
