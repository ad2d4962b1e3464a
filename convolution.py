"""
Exact convolution of digit vectors with the in-place NTT.

The digit vectors are little-endian: digits[i] is the coefficient of base**i,
so the convolution of two digit vectors holds the (uncarried) digits of the
product of the integers they represent.
"""

import logging
from typing import List, Optional, Sequence

from fft_primes import PrimeParameters, check_field_matches
from field_sequence import FieldSequence
from finite_field import PrimeField
from inplace_ntt import intt, ntt
from numeric_utils import ceil_lg


def next_transform_length(min_size: int) -> int:
    """Smallest power of 2 that is >= min_size."""
    return 1 << ceil_lg(max(min_size, 1))


def cyclic_convolution(a: Sequence[int], b: Sequence[int], params: PrimeParameters,
                       length: Optional[int] = None, method: str = "twiddle-major",
                       check: bool = True, field: Optional[PrimeField] = None,
                       logger: Optional[logging.Logger] = None) -> List[int]:
    """
    Cyclic convolution of a and b mod params.p through forward/inverse NTT.

    Args:
        a, b: Integer vectors, zero-padded to the transform length.
        params: Prime table entry supplying p and the root generator g.
        length: Transform length. Defaults to the smallest power of 2 (at
            least 2) that holds the full (non-cyclic) convolution, so the
            result is the ordinary convolution.
        method: Forward variant, see inplace_ntt.ntt.
        check: Validate length and root order on every transform.
        field: Field to compute in. Must match params; defaults to params.field().
        logger: Optional logger passed through to the transforms.

    Returns:
        The `length` convolution values, each reduced mod p.
    """
    if field is None:
        field = params.field()
    check_field_matches(field, params)

    if length is None:
        # check_parameters rejects length 1, so never pick it.
        length = next_transform_length(max(len(a) + len(b) - 1, 2))
    omega = params.root_of_unity(length)

    f1 = FieldSequence.from_digits(field, a, length)
    f2 = FieldSequence.from_digits(field, b, length)
    ntt(f1, omega, check, method, logger)
    ntt(f2, omega, check, method, logger)
    f3 = f1.pointwise_mul(f2)
    intt(f3, omega, check, method, logger)
    return f3.values()


def naive_cyclic_convolution(a: Sequence[int], b: Sequence[int], modulus: int,
                             length: Optional[int] = None) -> List[int]:
    """O(n^2) cyclic convolution mod modulus, the reference for the NTT result."""
    if length is None:
        length = max(len(a), len(b))
    result = [0] * length
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            k = (i + j) % length
            result[k] = (result[k] + x * y) % modulus
    return result


def int_to_digits(value: int, base: int, length: Optional[int] = None) -> List[int]:
    """Little-endian base-`base` digits of a non-negative integer, zero-padded to length."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    digits = []
    while value:
        value, d = divmod(value, base)
        digits.append(d)
    if length is not None:
        if len(digits) > length:
            raise ValueError(f"{len(digits)} digits do not fit in length {length}")
        digits.extend([0] * (length - len(digits)))
    return digits


def digits_to_int(digits: Sequence[int], base: int) -> int:
    """Value of a little-endian digit vector. Digits may exceed base (uncarried)."""
    value = 0
    for d in reversed(digits):
        value = value * base + d
    return value
