# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'gmath' (rounding)."""

from decimal import Decimal, getcontext
from fractions import Fraction

import pytest
from hypothesis import given, strategies

from gmath import (
    Rational, Rounding, divide_rounded, get_dflt_rounding_mode,
    set_dflt_rounding_mode)


ctx = getcontext()
ctx.prec = 3350


def test_dflt_rounding_mode():
    assert get_dflt_rounding_mode() is Rounding.ROUND_HALF_EVEN


@pytest.mark.parametrize("rounding", ("ROUND_HALF_UP", 7, None),
                         ids=("str", "int", "None"))
def test_set_wrong_rounding_mode(rounding):
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        set_dflt_rounding_mode(rounding)


def test_set_dflt_rounding_mode(restore_dflt_rounding):
    set_dflt_rounding_mode(Rounding.ROUND_UP)
    assert get_dflt_rounding_mode() is Rounding.ROUND_UP


def test_divide_rounded_wrong_rounding_mode():
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        divide_rounded(7, 2, "ROUND_UP")


@pytest.mark.parametrize(("num", "den"),
                         ((7, 2), (-7, 2), (5, 2), (-5, 2), (27, 4),
                          (-27, 4), (1, 3), (-2, 3), (51, 10), (-56, 10),
                          (12, 4), (-7, -2), (7, -2), (5, -2), (-27, -4),
                          (12, -4)),
                         ids=lambda p: str(p))
def test_divide_rounded(rnd, num, den):
    quot = divide_rounded(num, den, rnd)
    # compute equivalent Decimal
    eq_dec = (Decimal(num) / Decimal(den)).quantize(1, rnd.name)
    assert quot == int(eq_dec)


@given(num=strategies.integers(),
       den=strategies.integers().filter(lambda x: x != 0))
def test_divide_rounded_hypo(rnd, num, den):
    quot = divide_rounded(num, den, rnd)
    eq_dec = (Decimal(num) / Decimal(den)).quantize(1, rnd.name)
    assert quot == int(eq_dec)


@pytest.mark.parametrize("num", (7, 0, -7), ids=("7", "0", "-7"))
def test_divide_rounded_by_zero(num):
    with pytest.raises(ZeroDivisionError):
        divide_rounded(num, 0, Rounding.ROUND_HALF_UP)


def test_divide_rounded_dflt(restore_dflt_rounding):
    assert divide_rounded(5, 2) == 2
    set_dflt_rounding_mode(Rounding.ROUND_HALF_UP)
    assert divide_rounded(5, 2) == 3


@pytest.mark.parametrize("value",
                         (Fraction(-17849, 1000),
                          Fraction(int("1" * 3297 + "4" * 33), 10 ** 33),
                          Fraction(15, 100000),
                          Fraction(16, 3)),
                         ids=("compact", "large", "less1", "fraction"))
@pytest.mark.parametrize("prec", (0, -1, -3, 4), ids=lambda p: str(p))
def test_round_to_prec(value, prec):
    rn = Rational(value)
    adj = round(rn, prec)
    assert isinstance(adj, Rational)
    assert adj.as_fraction() == round(value, prec)


@given(value=strategies.fractions(),
       prec=strategies.integers(min_value=-100, max_value=100))
def test_round_to_prec_hypo(value, prec):
    rn = Rational(value)
    adj = round(rn, prec)
    assert isinstance(adj, Rational)
    assert adj.as_fraction() == round(value, prec)


@pytest.mark.parametrize("value",
                         (Fraction(-17849, 1000),
                          Fraction(int("1" * 3297 + "4" * 33), 10 ** 33),
                          Fraction(15, 100000),
                          Fraction(99999999999999999967, 100),
                          Fraction(5, 2)),
                         ids=("compact", "large", "fraction", "carry",
                              "tie"))
def test_round_to_int(value):
    rn = Rational(value)
    adj = round(rn)
    assert isinstance(adj, int)
    assert adj == round(value)


@given(value=strategies.fractions())
def test_round_to_int_hypo(value):
    rn = Rational(value)
    adj = round(rn)
    assert isinstance(adj, int)
    assert adj == round(value)


def test_round_with_dflt_rounding_mode(with_round_half_up):
    assert round(Rational(5, 2)) == 3
    assert round(Rational(-5, 2)) == -3
    assert round(Rational(1, 8), 2) == Rational(13, 100)


@pytest.mark.parametrize("n_digits", ("5", 7.5, Fraction(5, 1)),
                         ids=("'5'", "7.5", "Fraction(5, 1)"))
def test_round_wrong_n_digits_type(n_digits):
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        round(Rational(39, 8), n_digits)


@pytest.mark.parametrize("quant", (Fraction(1, 7),
                                   Decimal("-0.3"),
                                   0.25,
                                   3,
                                   1),
                         ids=("1/7",
                              "Decimal -0.3",
                              "0.25",
                              "3",
                              "1"))
@pytest.mark.parametrize("value",
                         (Fraction(17849, 1000),
                          Fraction(int("1" * 2259 + "4" * 33), 10 ** 33),
                          Fraction(25, 10000),
                          Fraction(12345678901234567 * 10 ** 12)),
                         ids=("compact", "large", "fraction", "int"))
def test_quantize_dflt_round(value, quant):
    rn = Rational(value)
    adj = rn.quantize(quant)
    # compute equivalent Fraction
    quot = Fraction(quant)
    equiv = round(value / quot) * quot
    assert adj.as_integer_ratio() == equiv.as_integer_ratio()


@pytest.mark.parametrize("quant", (Decimal("0.025"),
                                   Decimal("-0.3"),
                                   Decimal(3),
                                   Decimal(1)),
                         ids=("Decimal 0.025",
                              "Decimal -0.3",
                              "3",
                              "1"))
@pytest.mark.parametrize("value",
                         (Decimal("17.849"),
                          Decimal(".".join(("1" * 2259, "4" * 33))),
                          Decimal("0.0000000025"),
                          Decimal("12345678901234567e12")),
                         ids=("compact",
                              "large",
                              "fraction",
                              "int"))
def test_quantize_round(rnd, value, quant):
    rn = Rational(value)
    adj = rn.quantize(quant, rnd)
    # compute equivalent Decimal
    eq_dec = (value / quant).quantize(1, rnd.name) * quant
    assert adj.as_integer_ratio() == eq_dec.as_integer_ratio()


@given(value=strategies.decimals(min_value=-10 ** 20, max_value=10 ** 20,
                                 allow_nan=False, allow_infinity=False,
                                 places=6),
       quant=strategies.decimals(min_value=-100, max_value=100,
                                 allow_nan=False, allow_infinity=False,
                                 places=3).filter(lambda x: x != 0))
def test_quantize_decimal_hypo(rnd, value, quant):
    rn = Rational(value)
    adj = rn.quantize(quant, rnd)
    # compute equivalent Decimal
    eq_dec = (value / quant).quantize(1, rnd.name) * quant
    assert adj.as_integer_ratio() == eq_dec.as_integer_ratio()


@given(value=strategies.fractions(),
       quant=strategies.fractions().filter(lambda x: x != 0))
def test_quantize_frac_hypo(value, quant):
    rn = Rational(value)
    adj = rn.quantize(quant)
    # compute equivalent Fraction
    equiv = round(value / quant) * quant
    assert adj.numerator == equiv.numerator
    assert adj.denominator == equiv.denominator


@pytest.mark.parametrize("quant", ["0.5", 7.5 + 3j, Fraction],
                         ids=("quant='0.5'", "quant=7.5+3j",
                              "quant=Fraction"))
def test_quantize_wrong_quant_type(quant):
    rn = Rational(78, 25)
    with pytest.raises(TypeError):
        rn.quantize(quant)


@pytest.mark.parametrize("quant", [float('inf'), Decimal('-inf'),
                                   float('nan'), Decimal('NaN'),
                                   0, Decimal(0), Fraction(0, 1)],
                         ids=("quant='inf'", "quant='-inf'",
                              "quant='nan'", "quant='NaN'",
                              "quant=0", "quant=Decimal(0)",
                              "quant=Fraction(0,1)"))
def test_quantize_incompat_quant_value(quant):
    rn = Rational(78, 25)
    with pytest.raises(ValueError):
        rn.quantize(quant)
