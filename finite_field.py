"""
Integers modulo M.

PrimeField holds the modulus and the representation width. FieldElement is an
immutable reduced value in [0, modulus). Python ints never overflow, so the
double-width intermediate of a fixed-width implementation is implicit; the
width is still validated so that modulus**2 fits in 2*width bits.
"""

import numbers
from typing import Optional

from ntt_errors import ConfigurationMismatchError, NonInvertibleElementError


class PrimeField:
    """
    Arithmetic context for integers mod `modulus`.

    The modulus is normally an FFT-friendly prime from fft_primes, but
    primality is not enforced here so composite moduli can be used as well.
    """

    def __init__(self, modulus: int, width: Optional[int] = None):
        """
        Args:
            modulus: The modulus, at least 2.
            width: Representation width in bits. Defaults to the bit length
                of the modulus. The modulus must fit in this width.
        """
        if modulus < 2:
            raise ValueError(f"modulus must be >= 2, got {modulus}")
        if width is None:
            width = modulus.bit_length()
        if modulus.bit_length() > width:
            raise ValueError(f"modulus {modulus} does not fit in {width} bits")
        self.modulus = modulus
        self.width = width

    def __call__(self, value: int) -> "FieldElement":
        """Element reduced from any integer."""
        value = int(value)
        if not 0 <= value < self.modulus:
            value %= self.modulus
        return FieldElement(self, value)

    def unchecked(self, value: int) -> "FieldElement":
        """Element from a value the caller guarantees is already reduced."""
        return FieldElement(self, value)

    def zero(self) -> "FieldElement":
        return FieldElement(self, 0)

    def one(self) -> "FieldElement":
        return FieldElement(self, 1)

    def coerce(self, value) -> "FieldElement":
        """Bring an int or an element of an equal field into this field."""
        if isinstance(value, FieldElement):
            if value.field.modulus != self.modulus:
                raise ConfigurationMismatchError(
                    f"element mod {value.field.modulus} used in field mod {self.modulus}")
            return value
        if isinstance(value, numbers.Integral):
            return self(value)
        raise TypeError(f"cannot convert {type(value).__name__} to an element mod {self.modulus}")

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(self.modulus)

    def __repr__(self):
        return f"PrimeField({self.modulus}, width={self.width})"


class FieldElement:
    """An integer mod field.modulus. Every operation returns a new element."""

    __slots__ = ("field", "value")

    def __init__(self, field: PrimeField, value: int):
        # Trusted: value is already in [0, modulus). Use field(v) to reduce.
        self.field = field
        self.value = value

    @property
    def modulus(self) -> int:
        return self.field.modulus

    def _other(self, other):
        if isinstance(other, FieldElement):
            if other.field.modulus != self.field.modulus:
                raise ConfigurationMismatchError(
                    f"cannot combine elements mod {self.field.modulus} and mod {other.field.modulus}")
            return other
        if isinstance(other, numbers.Integral):
            return self.field(other)
        return None

    def __add__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        r = self.value + other.value
        if r >= self.field.modulus:
            r -= self.field.modulus
        return self.field.unchecked(r)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        r = self.value
        if r < other.value:
            r += self.field.modulus
        return self.field.unchecked(r - other.value)

    def __rsub__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        return other - self

    def __neg__(self):
        return self.field.unchecked(self.field.modulus - self.value if self.value else 0)

    def __pos__(self):
        return self

    def __mul__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        return self.field.unchecked((self.value * other.value) % self.field.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._other(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def inverse(self, check: bool = False) -> "FieldElement":
        """
        Multiplicative inverse by the extended Euclidean algorithm.

        Args:
            check: Raise NonInvertibleElementError if the value and the
                modulus are not coprime. Without it the last Bezout
                coefficient is returned as is for such values.
        """
        a, b = self.value, self.field.modulus
        s, t = 1, 0
        while b != 0:
            q, r = divmod(a, b)
            a, b = b, r
            s, t = t, s - q * t
        if check and a != 1:
            raise NonInvertibleElementError(f"{self.value} has no inverse mod {self.field.modulus}")
        if s < 0:
            s += self.field.modulus
        return self.field.unchecked(s)

    def pow(self, exponent: int) -> "FieldElement":
        """Square and multiply, scanning exponent bits from the least significant."""
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        if exponent == 0:
            return self.field.one()
        a = self
        b = self.field.one()
        while exponent > 1:
            if exponent & 1:
                b = a * b
            a = a * a
            exponent >>= 1
        return a * b

    def __pow__(self, exponent):
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self.pow(int(exponent))

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def __eq__(self, other):
        # Ints compare against the reduced value so equality agrees with hash.
        if isinstance(other, FieldElement):
            return self.field.modulus == other.field.modulus and self.value == other.value
        if isinstance(other, numbers.Integral):
            return self.value == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        # Same as hash(int) so that F(3) and 3 land in the same dict slot.
        return hash(self.value)

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"FieldElement({self.value} mod {self.field.modulus})"

    def __str__(self):
        return str(self.value)
