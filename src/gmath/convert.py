# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversion of foreign numbers into the components of gmath values.

Each function is a single generic entry point dispatching on the numeric
tower defined in module `numbers`, so new numeric types participate by
registering with the appropriate ABC (or with the dispatcher itself).
"""

from __future__ import annotations

from decimal import Decimal
from functools import singledispatch
from math import gcd, inf, isfinite
from numbers import Complex, Integral, Rational, Real
from typing import Any, Tuple


__all__ = ['ratio_of', 'float_of', 'components_of']


@singledispatch
def ratio_of(value: Any) -> Tuple[int, int]:
    """Return exact integer ratio equal to `value`.

    The ratio is not necessarily in lowest terms, but its denominator is
    always positive.

    Raises:
        TypeError: `value` is not a real number
        ValueError: `value` is infinite or NaN
    """
    raise TypeError(f"Can't convert {value!r} to Rational.")


@ratio_of.register(Integral)
def _ratio_of_integral(value: Integral) -> Tuple[int, int]:
    return int(value), 1


@ratio_of.register(Rational)
def _ratio_of_rational(value: Rational) -> Tuple[int, int]:
    return int(value.numerator), int(value.denominator)


@ratio_of.register(Decimal)
def _ratio_of_decimal(value: Decimal) -> Tuple[int, int]:
    if not value.is_finite():
        raise ValueError(f"Can't convert {value!r} to Rational.")
    sign, digits, exp = value.as_tuple()
    coeff = 0
    for digit in digits:
        coeff = coeff * 10 + digit
    if sign:
        coeff = -coeff
    if exp >= 0:
        return coeff * 10 ** exp, 1
    scale = 10 ** -exp
    # strip trailing zeros
    div = gcd(coeff, scale)
    return coeff // div, scale // div


@ratio_of.register(Real)
def _ratio_of_real(value: Real) -> Tuple[int, int]:
    flt = float(value)
    if not isfinite(flt):
        raise ValueError(f"Can't convert {value!r} to Rational.")
    # exact decimal expansion of the binary value
    return _ratio_of_decimal(Decimal(flt))


@ratio_of.register(float)
def _ratio_of_float(value: float) -> Tuple[int, int]:
    if not isfinite(value):
        raise ValueError(f"Can't convert {value!r} to Rational.")
    return _ratio_of_decimal(Decimal(value))


def _float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        # beyond float range
        return inf if value > 0 else -inf


@singledispatch
def float_of(value: Any) -> float:
    """Return `value` as float.

    Values beyond the range of float are converted to +/- infinity.

    Raises:
        TypeError: `value` is not a real number
    """
    raise TypeError(f"Can't convert {value!r} to float.")


@float_of.register(Real)
@float_of.register(Decimal)
def _float_of_real(value) -> float:
    return _float(value)


@singledispatch
def components_of(value: Any) -> Tuple[float, float]:
    """Return real and imaginary part of `value` as floats.

    Parts beyond the range of float are converted to +/- infinity.

    Raises:
        TypeError: `value` is not a number
    """
    raise TypeError(f"Can't convert {value!r} to Complex.")


@components_of.register(Complex)
def _components_of_complex(value: Complex) -> Tuple[float, float]:
    return _float(value.real), _float(value.imag)


@components_of.register(Real)
@components_of.register(Decimal)
def _components_of_real(value) -> Tuple[float, float]:
    return _float(value), 0.0
