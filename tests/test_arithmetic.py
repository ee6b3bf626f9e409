'''
Polar arithmetic tests
'''

import math

import pytest
from pytest import raises

from polarrpn.arithmetic import Arithmetic
from polarrpn.util import DivideByZero, LogOfZero
from polarrpn.values import PolarValue


def polar(ops, magnitude, angle=0):
    return PolarValue(ops.from_str(str(magnitude)), ops.from_str(str(angle)))


def floats(value):
    return tuple(map(float, value))


def test_multiply(arithmetic):
    ops = arithmetic.ops
    product = arithmetic.multiply(polar(ops, 2, 0), polar(ops, 2, 90))
    assert floats(product) == (4, 90)


def test_multiply_wraps_angle(arithmetic):
    ops = arithmetic.ops
    product = arithmetic.multiply(polar(ops, 1, 120), polar(ops, 1, 120))
    assert floats(product) == (1, -120)


def test_multiplicative_identity(arithmetic):
    ops = arithmetic.ops
    value = polar(ops, -3, 200)
    assert arithmetic.multiply(value, polar(ops, 1, 0)) == \
           arithmetic.normalize(value)


def test_divide(arithmetic):
    ops = arithmetic.ops
    quotient = arithmetic.divide(polar(ops, 4, 90), polar(ops, 2, 0))
    assert floats(quotient) == (2, 90)


def test_divide_by_zero(arithmetic):
    ops = arithmetic.ops
    with raises(DivideByZero):
        arithmetic.divide(polar(ops, 4, 90), polar(ops, 0, 0))


def test_add(arithmetic):
    ops = arithmetic.ops
    total = arithmetic.add(polar(ops, 1, 0), polar(ops, 1, 90))
    assert floats(total) == pytest.approx((2 ** .5, 45))


def test_subtract(arithmetic):
    ops = arithmetic.ops
    difference = arithmetic.subtract(polar(ops, 1, 0), polar(ops, 1, 90))
    assert floats(difference) == pytest.approx((2 ** .5, -45))


@pytest.mark.parametrize('magnitude, angle', [(1, 0), (2, 30), (5, -170)])
def test_additive_inverse(arithmetic, magnitude, angle):
    ops = arithmetic.ops
    value = polar(ops, magnitude, angle)
    inverse = arithmetic.subtract(polar(ops, 0, 0), value)
    total = arithmetic.add(value, inverse)
    assert float(total.magnitude) == pytest.approx(0, abs=1e-9)


def test_power_real(arithmetic):
    ops = arithmetic.ops
    result = arithmetic.power(polar(ops, 2, 0), polar(ops, 3, 0))
    assert floats(result) == pytest.approx((8, 0))


def test_power_i_to_the_i(arithmetic):
    ops = arithmetic.ops
    i = polar(ops, 1, 90)
    result = arithmetic.power(i, i)
    assert float(result.magnitude) == pytest.approx(math.exp(-math.pi / 2))
    assert float(result.angle) == pytest.approx(0, abs=1e-9)


def test_power_square_root(arithmetic):
    ops = arithmetic.ops
    result = arithmetic.power(polar(ops, 4, 90), polar(ops, 0.5, 0))
    assert floats(result) == pytest.approx((2, 45))


def test_power_of_zero(arithmetic):
    ops = arithmetic.ops
    with raises(LogOfZero):
        arithmetic.power(polar(ops, 0, 0), polar(ops, 2, 0))


def test_insert_angle(arithmetic):
    ops = arithmetic.ops
    result = arithmetic.insert_angle(polar(ops, 5, 0), polar(ops, 30, 0))
    assert floats(result) == (5, 30)


def test_insert_angle_normalizes(arithmetic):
    ops = arithmetic.ops
    result = arithmetic.insert_angle(polar(ops, 5, 0), polar(ops, 270, 45))
    assert floats(result) == (5, -90)


def test_operator_lookup(arithmetic):
    assert arithmetic.operator('mul') == arithmetic.multiply
    assert arithmetic.operator('angle') == arithmetic.insert_angle
    assert arithmetic.operator('nope') is None


def test_basic_has_no_extras(ops):
    basic = Arithmetic(ops, extended=False)
    assert basic.operator('add') == basic.add
    assert basic.operator('pow') is None
    assert basic.operator('angle') is None
    zero = ops.from_int(0)
    assert float(basic.to_polar(basic.to_rectangular(
        PolarValue(zero, zero))).magnitude) == 0
