import operator
from typing import Iterable, Iterator, List, Optional

import numpy as np

from finite_field import FieldElement, PrimeField


class FieldSequence:
    """
    Fixed-length vector of field elements, mutated in place by the transforms.

    Elements live in a numpy object array, so indexing is bounds checked and
    the length cannot change after creation.
    """

    def __init__(self, field: PrimeField, length: int):
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self.field = field
        self._data = np.empty(length, dtype=object)
        zero = field.zero()
        for i in range(length):
            self._data[i] = zero

    @classmethod
    def from_digits(cls, field: PrimeField, values: Iterable[int], length: Optional[int] = None) -> "FieldSequence":
        """
        Build a sequence from integers, zero-padded up to `length`.

        Args:
            field: Field the elements belong to.
            values: Integers (e.g. big-integer digits), reduced into the field.
            length: Total length; defaults to len(values).
        """
        values = list(values)
        if length is None:
            length = len(values)
        if len(values) > length:
            raise ValueError(f"{len(values)} values do not fit in a sequence of length {length}")
        seq = cls(field, length)
        for i, v in enumerate(values):
            seq._data[i] = field.coerce(v)
        return seq

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> FieldElement:
        return self._data[operator.index(index)]

    def __setitem__(self, index: int, value) -> None:
        self._data[operator.index(index)] = self.field.coerce(value)

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self._data)

    def swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def copy(self) -> "FieldSequence":
        seq = FieldSequence(self.field, len(self))
        seq._data[:] = self._data
        return seq

    def copy_in(self, other: "FieldSequence") -> None:
        """Copy the common prefix of other into self and zero the rest."""
        lim = min(len(self), len(other))
        for i in range(lim):
            self._data[i] = self.field.coerce(other[i])
        zero = self.field.zero()
        for i in range(lim, len(self)):
            self._data[i] = zero

    def values(self) -> List[int]:
        return [e.value for e in self._data]

    def pointwise_mul(self, other: "FieldSequence") -> "FieldSequence":
        """Elementwise product, as used between two forward transforms."""
        if len(other) != len(self):
            raise ValueError(f"length mismatch: {len(self)} vs {len(other)}")
        seq = FieldSequence(self.field, len(self))
        for i in range(len(self)):
            seq._data[i] = self._data[i] * other[i]
        return seq

    __mul__ = pointwise_mul

    def __eq__(self, other):
        if not isinstance(other, FieldSequence):
            return NotImplemented
        return self.field == other.field and self.values() == other.values()

    __hash__ = None

    def __repr__(self):
        return f"FieldSequence(mod {self.field.modulus}, {self.values()})"
