"""
In-place radix-2 Cooley-Tukey transform over a finite field.

Generalized from Van Loan, "Computational Frameworks for the Fast Fourier
Transform" (SIAM 1992): the sin/cos roots over C are replaced by a primitive
2**t-th root of unity of the field, and the twiddle factors are built with one
exact multiplication per step instead of being recomputed.

All functions are stateless and mutate only the sequence they are given.
Pass a logging.Logger to trace the vector after the permutation and after
every stage.
"""

import logging
from typing import Callable, Optional

from field_sequence import FieldSequence
from finite_field import FieldElement
from ntt_errors import InvalidLengthError, InvalidRootOrderError
from numeric_utils import bit_reverse, ceil_lg, is_2pow

ForwardTransform = Callable[[FieldSequence, FieldElement, bool, Optional[logging.Logger]], None]


def check_parameters(length: int, omega: FieldElement) -> None:
    """
    Check that `length` is a power of 2 and that omega**(length/2) is a
    square root of 1 other than 1 itself.

    omega must be a FieldElement: a plain int carries no modulus. The
    transforms coerce ints into the sequence's field before calling this.

    Raises:
        TypeError: omega is not a FieldElement.
        InvalidLengthError: length is not a power of 2.
        InvalidRootOrderError: omega has the wrong order.
    """
    if not isinstance(omega, FieldElement):
        raise TypeError(f"omega must be a FieldElement, got {type(omega).__name__}")
    if not is_2pow(length):
        raise InvalidLengthError(f"Vector length {length} is not a power of 2")
    o_nby2 = omega.pow(length // 2)
    if o_nby2 == 1 or o_nby2 * o_nby2 != 1:
        raise InvalidRootOrderError(
            f"omega = {omega.value} is the wrong order root: omega^{length // 2} = {o_nby2.value}, "
            f"omega^{length} = {(o_nby2 * o_nby2).value}")


def permute(x: FieldSequence) -> None:
    """In-place bit reversal permutation (Van Loan Algorithm 1.5.2)."""
    n = len(x)
    t = ceil_lg(n)
    for k in range(n):
        j = bit_reverse(k, t)
        if j > k:
            x.swap(j, k)


def _prepare(x: FieldSequence, omega, check: bool, logger: Optional[logging.Logger]):
    omega = x.field.coerce(omega)
    n = len(x)
    if check:
        check_parameters(n, omega)
    permute(x)
    if logger is not None:
        logger.debug("After bit-reversal: %s", x.values())
    return omega, n, ceil_lg(n)


def forward_transform1(x: FieldSequence, omega, check: bool = False,
                       logger: Optional[logging.Logger] = None) -> None:
    """
    In-place forward transform, loops ordered stage / twiddle / block.

    Modified Van Loan Algorithm 1.6.1: each twiddle factor is computed once
    per stage and reused across all r blocks.
    """
    omega, n, t = _prepare(x, omega, check, logger)

    for q in range(1, t + 1):
        L = 1 << q
        r = n // L
        half = L >> 1
        omega_step = omega.pow(r)
        omega_pow = x.field.one()
        for j in range(half):
            if j > 0:
                omega_pow = omega_pow * omega_step
            for k in range(r):
                klj = k * L + j
                tau = omega_pow * x[klj + half]
                x[klj + half] = x[klj] - tau
                x[klj] = x[klj] + tau
        if logger is not None:
            logger.debug("After stage %d (L=%d): %s", q, L, x.values())


def forward_transform2(x: FieldSequence, omega, check: bool = False,
                       logger: Optional[logging.Logger] = None) -> None:
    """
    In-place forward transform, loops ordered stage / block / twiddle.

    Modified Van Loan Algorithm 1.6.2: the twiddle factor is rebuilt inside
    every block, so the inner loop runs with stride 1 and needs no table.
    """
    omega, n, t = _prepare(x, omega, check, logger)

    for q in range(1, t + 1):
        L = 1 << q
        r = n // L
        half = L >> 1
        for k in range(r):
            omega_step = omega.pow(r)
            omega_pow = x.field.one()
            for j in range(half):
                if j > 0:
                    omega_pow = omega_pow * omega_step
                klj = k * L + j
                tau = omega_pow * x[klj + half]
                x[klj + half] = x[klj] - tau
                x[klj] = x[klj] + tau
        if logger is not None:
            logger.debug("After stage %d (L=%d): %s", q, L, x.values())


def inverse_transform(forward: ForwardTransform, x: FieldSequence, omega, check: bool = False,
                      logger: Optional[logging.Logger] = None) -> None:
    """
    In-place inverse transform built from any forward variant.

    Runs `forward` with omega^-1 and scales every element by n^-1.
    """
    omega = x.field.coerce(omega)
    n = len(x)
    n_inv = x.field(n).inverse()

    forward(x, omega.inverse(), check, logger)
    for i in range(n):
        x[i] = n_inv * x[i]
    if logger is not None:
        logger.debug("After scaling by 1/%d: %s", n, x.values())


def inverse_transform1(x: FieldSequence, omega, check: bool = False,
                       logger: Optional[logging.Logger] = None) -> None:
    inverse_transform(forward_transform1, x, omega, check, logger)


def inverse_transform2(x: FieldSequence, omega, check: bool = False,
                       logger: Optional[logging.Logger] = None) -> None:
    inverse_transform(forward_transform2, x, omega, check, logger)


FORWARD_METHODS = {
    "twiddle-major": forward_transform1,
    "block-major": forward_transform2,
}


def _forward_for(method: str) -> ForwardTransform:
    try:
        return FORWARD_METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}. Use one of {list(FORWARD_METHODS)}") from None


def ntt(x: FieldSequence, omega, check: bool = False, method: str = "twiddle-major",
        logger: Optional[logging.Logger] = None) -> None:
    """Forward transform of x in place.

    Args:
        x: Sequence whose length is a power of 2.
        omega: Primitive len(x)-th root of unity (element or int).
        check: Validate length and root order first.
        method: "twiddle-major" (forward_transform1) or "block-major"
            (forward_transform2). Both give identical results.
        logger: Optional logger receiving DEBUG traces.
    """
    _forward_for(method)(x, omega, check, logger)


def intt(x: FieldSequence, omega, check: bool = False, method: str = "twiddle-major",
         logger: Optional[logging.Logger] = None) -> None:
    """Inverse transform of x in place; `omega` is the forward root, not its inverse."""
    inverse_transform(_forward_for(method), x, omega, check, logger)
