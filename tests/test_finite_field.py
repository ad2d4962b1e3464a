import pytest

from finite_field import FieldElement, PrimeField
from ntt_errors import ConfigurationMismatchError, NonInvertibleElementError

P = 40961


@pytest.fixture
def F():
    return PrimeField(P, 16)


def test_construction_reduces(F):
    assert F(P).value == 0
    assert F(P + 5).value == 5
    assert F(-1).value == P - 1
    assert F(3 * P - 2).value == P - 2


def test_width_must_hold_modulus():
    with pytest.raises(ValueError):
        PrimeField(P, 8)
    with pytest.raises(ValueError):
        PrimeField(1)
    assert PrimeField(P).width == 16


def test_unchecked_keeps_value(F):
    e = F.unchecked(1234)
    assert isinstance(e, FieldElement)
    assert e.value == 1234


def test_add_sub_wraparound(F):
    assert (F(P - 1) + F(1)).value == 0
    assert (F(P - 1) + F(P - 1)).value == P - 2
    assert (F(0) - F(1)).value == P - 1
    assert (F(5) - F(7)).value == P - 2
    assert (F(7) - F(5)).value == 2


def test_negate(F):
    assert (-F(0)).value == 0
    assert (-F(1)).value == P - 1
    assert F(10) + (-F(10)) == 0


def test_mul_and_div(F):
    assert (F(200) * F(300)).value == 60000 % P
    a, b = F(12345), F(678)
    assert (a / b) * b == a
    assert a / b == a * b.inverse()


def test_int_operands_are_coerced(F):
    assert F(3) + 4 == 7
    assert 4 + F(3) == 7
    assert 10 - F(3) == 7
    assert F(3) * 2 == 6
    assert 2 * F(3) == 6
    assert F(6) / 2 == 3
    assert F(3) == 3
    assert F(3) != 4
    # ints are compared with the reduced value, not reduced themselves
    assert F(3) != P + 3


def test_inverse(F):
    for v in [1, 2, 12, 101, 20480, P - 1]:
        a = F(v)
        assert a * a.inverse() == 1
        assert a * a.inverse(check=True) == 1
        assert a.inverse().inverse() == a


def test_checked_inverse_of_zero_raises(F):
    with pytest.raises(NonInvertibleElementError):
        F(0).inverse(check=True)
    # ZeroDivisionError is what callers of plain division would catch
    with pytest.raises(ZeroDivisionError):
        F(0).inverse(check=True)


def test_unchecked_inverse_of_zero_does_not_raise(F):
    result = F(0).inverse()
    assert 0 <= result.value < P


def test_composite_modulus_inverse():
    Z15 = PrimeField(15)
    with pytest.raises(NonInvertibleElementError):
        Z15(6).inverse(check=True)
    with pytest.raises(NonInvertibleElementError):
        Z15(10).inverse(check=True)
    result = Z15(6).inverse()
    assert 0 <= result.value < 15
    assert Z15(7).inverse(check=True) * 7 == 1


def test_pow(F):
    assert F(0).pow(0) == 1
    assert F(5).pow(0) == 1
    assert F(5).pow(1) == 5
    assert F(2).pow(10) == 1024
    assert F(3) ** 5 == 243
    assert F(12).pow(1 << 13) == 1
    assert F(12).pow(1 << 12) == P - 1
    assert F(101).pow(P - 1) == 1
    for e in range(40):
        assert F(7).pow(e).value == pow(7, e, P)


def test_pow_rejects_negative_exponent(F):
    with pytest.raises(ValueError):
        F(3).pow(-1)


def test_field_identities(F):
    lol, one = F(101), F(1)
    for i in range(200):
        a = lol.pow(i).inverse()
        b = F(i)
        assert a == lol.inverse().pow(i)
        assert a - b == a + (-b)
        assert b / a == b * a.inverse()
        assert lol.inverse().pow(i) * lol.pow(i) == one


def test_mixed_fields_raise():
    a = PrimeField(7)(3)
    b = PrimeField(11)(3)
    with pytest.raises(ConfigurationMismatchError):
        a + b
    with pytest.raises(ConfigurationMismatchError):
        a * b


def test_mixed_fields_compare_unequal():
    a = PrimeField(7)(3)
    b = PrimeField(11)(3)
    assert (a == b) is False
    assert a != b
    assert len({a, b}) == 2
    assert {a: "mod 7", b: "mod 11"}[b] == "mod 11"


def test_hash_agrees_with_int_equality(F):
    assert F(3) == 3 and hash(F(3)) == hash(3)
    assert {F(3), 3} == {3}
    assert F(P + 3) in {3}


def test_helpers(F):
    assert F(0).is_zero()
    assert F(1).is_one()
    assert not F(2).is_one()
    assert int(F(99)) == 99
    assert str(F(99)) == "99"
    assert F.zero() == 0 and F.one() == 1
    assert hash(F(5)) == hash(F(P + 5))
    assert F == PrimeField(P)
