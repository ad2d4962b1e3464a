import pytest

from fft_primes import FFT_PRIMES, PrimeParameters, check_field_matches, fft_prime
from finite_field import PrimeField
from ntt_errors import ConfigurationMismatchError, InvalidLengthError


@pytest.mark.parametrize("width", [16, 32, 64])
def test_table_entries_verify(width):
    params = fft_prime(width)
    assert params.width == width
    params.verify()
    assert params.p == params.k * 2 ** params.n + 1
    assert params.p < 2 ** width


def test_table_values():
    assert FFT_PRIMES[16] == PrimeParameters(width=16, n=13, k=5, p=40961, g=0xc, base=100)
    assert FFT_PRIMES[32].p == 3221225473 and FFT_PRIMES[32].g == 13
    assert FFT_PRIMES[64].p == 4179340454199820289 and FFT_PRIMES[64].g == 21


def test_unknown_width():
    with pytest.raises(ValueError):
        fft_prime(8)


def test_parameters_are_frozen():
    with pytest.raises(AttributeError):
        FFT_PRIMES[16].g = 3


@pytest.mark.parametrize("bad, message", [
    (PrimeParameters(width=16, n=13, k=5, p=40963, g=12, base=100), "is not"),
    (PrimeParameters(width=8, n=3, k=1, p=9, g=2, base=2), "not prime"),
    (PrimeParameters(width=16, n=13, k=5, p=40961, g=12, base=300), "base"),
    (PrimeParameters(width=16, n=13, k=5, p=40961, g=1, base=100), "order"),
    (PrimeParameters(width=16, n=13, k=5, p=40961, g=12 * 12, base=100), "order"),
    (PrimeParameters(width=8, n=13, k=5, p=40961, g=12, base=100), "bits"),
])
def test_verify_rejects_bad_entries(bad, message):
    with pytest.raises(ValueError, match=message):
        bad.verify()


def test_field():
    params = fft_prime(32)
    F = params.field()
    assert F.modulus == params.p
    assert F.width == 32


@pytest.mark.parametrize("width", [16, 32, 64])
@pytest.mark.parametrize("length", [2, 4, 16, 64, 1024])
def test_root_of_unity_has_exact_order(width, length):
    params = fft_prime(width)
    omega = params.root_of_unity(length)
    assert omega.pow(length) == 1
    assert omega.pow(length // 2) == -params.field().one()


def test_root_of_unity_matches_generator_power():
    params = fft_prime(16)
    assert params.root_of_unity(16) == params.field()(12).pow(1 << (13 - 4))
    assert params.root_of_unity(1 << 13) == 12


def test_root_of_unity_bad_length():
    params = fft_prime(16)
    with pytest.raises(InvalidLengthError):
        params.root_of_unity(12)
    with pytest.raises(InvalidLengthError):
        params.root_of_unity(1 << 14)


def test_check_field_matches():
    check_field_matches(PrimeField(40961), fft_prime(16))
    with pytest.raises(ConfigurationMismatchError):
        check_field_matches(PrimeField(3221225473), fft_prime(16))
