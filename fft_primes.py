"""
Parameters for FFT-friendly prime fields.

p = k * 2**n + 1, g**(2**n) = 1 mod p and g**q != 1 for q < 2**n, so g
generates the cyclic subgroup of order 2**n and every power-of-two length up
to 2**n has a primitive root of unity derived from it. `base` is the digit
radix used when a sequence holds big-integer digits; base*base < p.
"""

from dataclasses import dataclass
from typing import Dict

from sympy import isprime

from finite_field import FieldElement, PrimeField
from ntt_errors import ConfigurationMismatchError, InvalidLengthError
from numeric_utils import ceil_lg, is_2pow


@dataclass(frozen=True)
class PrimeParameters:
    width: int
    n: int
    k: int
    p: int
    g: int
    base: int

    def field(self) -> PrimeField:
        return PrimeField(self.p, self.width)

    def root_of_unity(self, length: int) -> FieldElement:
        """
        Primitive `length`-th root of unity, g**(2**(n - lg(length))).

        Args:
            length: Transform length, a power of two no larger than 2**n.

        Raises:
            InvalidLengthError: If no such root exists in this field.
        """
        if not is_2pow(length):
            raise InvalidLengthError(f"length {length} is not a power of 2")
        lg = ceil_lg(length)
        if lg > self.n:
            raise InvalidLengthError(f"length {length} exceeds 2^{self.n} for p = {self.p}")
        return self.field()(self.g).pow(1 << (self.n - lg))

    def verify(self) -> None:
        """Check every invariant of the entry, raising ValueError on the first failure."""
        if self.p != self.k * (1 << self.n) + 1:
            raise ValueError(f"p = {self.p} is not {self.k} * 2^{self.n} + 1")
        if not isprime(self.p):
            raise ValueError(f"p = {self.p} is not prime")
        if self.p.bit_length() > self.width:
            raise ValueError(f"p = {self.p} does not fit in {self.width} bits")
        if self.base * self.base >= self.p:
            raise ValueError(f"base {self.base} is too large: base^2 >= p = {self.p}")
        g = self.field()(self.g)
        if g.pow(1 << self.n) != 1:
            raise ValueError(f"g = {self.g} has g^(2^{self.n}) != 1 mod {self.p}")
        if g.pow(1 << (self.n - 1)) == 1:
            raise ValueError(f"g = {self.g} has order below 2^{self.n} mod {self.p}")


FFT_PRIMES: Dict[int, PrimeParameters] = {
    16: PrimeParameters(width=16, n=13, k=5, p=40961, g=0xc, base=10**2),
    32: PrimeParameters(width=32, n=30, k=3, p=3221225473, g=13, base=1 << 15),
    64: PrimeParameters(width=64, n=57, k=29, p=4179340454199820289, g=21, base=10**9),
}


def fft_prime(width: int) -> PrimeParameters:
    """Table entry for an integer width (16, 32 or 64)."""
    try:
        return FFT_PRIMES[width]
    except KeyError:
        raise ValueError(f"No FFT prime for width {width}. Use one of {sorted(FFT_PRIMES)}") from None


def check_field_matches(field: PrimeField, params: PrimeParameters) -> None:
    if field.modulus != params.p:
        raise ConfigurationMismatchError(
            f"field modulus {field.modulus} does not match p = {params.p} for width {params.width}")
