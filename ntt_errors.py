"""
Exceptions raised by the finite field and NTT modules.

Each one also derives from the builtin exception callers would catch for the
same mistake (ValueError for bad arguments, ZeroDivisionError for a missing
inverse).
"""


class NTTError(Exception):
    """Base class for all transform and field errors."""


class InvalidLengthError(NTTError, ValueError):
    """Sequence length passed to a transform is not a power of two."""


class InvalidRootOrderError(NTTError, ValueError):
    """Root of unity does not have the order required by the sequence length."""


class NonInvertibleElementError(NTTError, ZeroDivisionError):
    """Checked inverse requested for an element sharing a factor with the modulus."""


class ConfigurationMismatchError(NTTError, ValueError):
    """Field modulus does not match the prime parameters it is used with."""
