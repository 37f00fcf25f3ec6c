# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational number type with exact arithmetic."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
import numbers
import operator
import sys
from typing import Any, Callable, Optional, Tuple, Union

from .convert import float_of, ratio_of
from .rounding import Rounding, divide_rounded


__all__ = [
    'ConstructionError',
    'DivisionByZeroError',
    'Rational',
    'as_rational',
]


_PyHASH_MODULUS = sys.hash_info.modulus
_PyHASH_INF = sys.hash_info.inf


class ConstructionError(ValueError):
    """Raised when a Rational is to be created with a zero denominator."""


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a Rational is divided by a zero Rational."""


def _reduced(num: int, den: int) -> Tuple[int, int]:
    if den == 0:
        raise ConstructionError("Denominator must be non-zero.")
    if den < 0:
        num, den = -num, -den
    div = math.gcd(num, den)
    if div > 1:
        return num // div, den // div
    return num, den


class Rational:

    """Rational number with numerator and denominator in lowest terms.

    Args:
        numerator (numbers.Real or decimal.Decimal): numerator of the
            resulting Rational, or its full value if no denominator is
            given (default: 0)
        denominator (numbers.Rational): denominator of the resulting
            Rational (default: 1)

    A single float or Decimal is converted exactly via its decimal
    expansion. If both numerator and denominator are given, both must be
    exact rational numbers.

    The denominator of the resulting Rational is always positive and
    shares no common factor with the numerator, i.e. Rational(6, -4) is
    stored as -3/2.

    Raises:
        TypeError: type of given value(s) not supported
        ValueError: given float or Decimal is infinite or NaN
        ConstructionError: given denominator is zero
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator: Any = None,
                denominator: Any = None) -> Rational:
        if denominator is None:
            if numerator is None:
                return cls._new(0, 1)
            if type(numerator) is cls:
                return numerator
            return cls._new(*_reduced(*ratio_of(numerator)))
        if not (isinstance(numerator, numbers.Rational) and
                isinstance(denominator, numbers.Rational)):
            raise TypeError("Both numerator and denominator must be "
                            "rational numbers.")
        num_n, num_d = ratio_of(numerator)
        den_n, den_d = ratio_of(denominator)
        return cls._new(*_reduced(num_n * den_d, num_d * den_n))

    @classmethod
    def _new(cls, numerator: int, denominator: int) -> Rational:
        # numerator and denominator must already be normalized
        rn = object.__new__(cls)
        rn._numerator = numerator
        rn._denominator = denominator
        return rn

    @classmethod
    def from_decimal(cls, value: Union[Decimal, numbers.Integral]) \
            -> Rational:
        """Convert a finite Decimal or Integral to a Rational.

        Raises:
            TypeError: `value` is neither a Decimal nor an Integral
            ValueError: `value` is infinite or NaN
        """
        if isinstance(value, (Decimal, numbers.Integral)):
            return cls._new(*_reduced(*ratio_of(value)))
        raise TypeError(f"{value!r} is not a Decimal or Integral.")

    @classmethod
    def from_float(cls, value: Union[float, numbers.Integral]) -> Rational:
        """Convert a finite float or Integral to a Rational.

        The float is converted exactly via its decimal expansion.

        Raises:
            TypeError: `value` is neither a float nor an Integral
            ValueError: `value` is infinite or NaN
        """
        if isinstance(value, (float, numbers.Integral)):
            return cls._new(*_reduced(*ratio_of(value)))
        raise TypeError(f"{value!r} is not a float or Integral.")

    @property
    def numerator(self) -> int:
        """Numerator of `self` (in lowest terms, carries the sign)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (in lowest terms, always > 0)."""
        return self._denominator

    @property
    def real(self) -> Rational:
        """Real part of `self`."""
        return self

    @property
    def imag(self) -> int:
        """Imaginary part of `self` (always 0)."""
        return 0

    def conjugate(self) -> Rational:
        """Return complex conjugate of `self`, i.e. `self`."""
        return self

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(self._numerator, self._denominator)

    # arithmetic

    def plus(self, other: Any) -> Rational:
        """Return `self` + `other`."""
        other = as_rational(other)
        if self._denominator == other._denominator:
            return self._new(*_reduced(self._numerator + other._numerator,
                                       self._denominator))
        return self._new(*_reduced(
            self._numerator * other._denominator +
            other._numerator * self._denominator,
            self._denominator * other._denominator))

    def minus(self, other: Any) -> Rational:
        """Return `self` - `other`."""
        return self.plus(as_rational(other).negative())

    def multiply(self, other: Any) -> Rational:
        """Return `self` * `other`."""
        other = as_rational(other)
        return self._new(*_reduced(self._numerator * other._numerator,
                                   self._denominator * other._denominator))

    def div(self, other: Any) -> Rational:
        """Return `self` / `other`.

        Raises:
            DivisionByZeroError: `other` is zero
        """
        other = as_rational(other)
        if other._numerator == 0:
            raise DivisionByZeroError("Division by zero.")
        return self._new(*_reduced(self._numerator * other._denominator,
                                   self._denominator * other._numerator))

    def mod(self, other: Any) -> Rational:
        """Return remainder of `self` / `other`, truncating the quotient.

        The quotient is truncated towards zero, so the result takes the sign
        of `self`, not that of `other`:

        >>> Rational(-7, 2).mod(2)
        Rational(-3, 2)

        The quotient is truncated via its float value; if it exceeds the
        range of float, it is truncated exactly.

        Raises:
            DivisionByZeroError: `other` is zero
        """
        other = as_rational(other)
        quot = self.div(other)
        try:
            quot = math.trunc(float(quot))
        except OverflowError:
            # beyond float range, truncate exactly
            quot = math.trunc(quot)
        return self.minus(other.multiply(quot))

    def inverse(self) -> Rational:
        """Return 1 / `self`.

        Raises:
            DivisionByZeroError: `self` is zero
        """
        if self._numerator == 0:
            raise DivisionByZeroError("Zero has no inverse.")
        return self._new(*_reduced(self._denominator, self._numerator))

    def negative(self) -> Rational:
        """Return -`self`."""
        return self._new(-self._numerator, self._denominator)

    def positive(self) -> Rational:
        """Return +`self`."""
        return self

    def power(self, other: Any) -> float:
        """Return float(`self`) ** float(`other`).

        Rational bases raised to rational exponents are in general
        irrational, so the result is a float approximation.

        Raises:
            ValueError: result is not a real number (e.g. negative base with
                fractional exponent) or base is zero and exponent negative
            OverflowError: result is too large for a float
        """
        return math.pow(float(self), float_of(other))

    # operator protocol

    def __add__(self, other: Any) -> Rational:
        """self + other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Any) -> Rational:
        """other + self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> Rational:
        """self - other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Any) -> Rational:
        """other - self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.negative().plus(other)

    def __mul__(self, other: Any) -> Rational:
        """self * other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Rational:
        """other * self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Rational:
        """self / other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Rational:
        """other / self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.inverse().multiply(other)

    def __floordiv__(self, other: Any) -> int:
        """self // other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return math.floor(self.div(other))

    def __rfloordiv__(self, other: Any) -> int:
        """other // self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return math.floor(other.div(self))

    def __mod__(self, other: Any) -> Rational:
        """self % other (truncating, see `mod`)"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other: Any) -> float:
        """other % self (as float, truncating)"""
        if not _is_operand(other):
            return NotImplemented
        if self._numerator == 0:
            raise DivisionByZeroError("Division by zero.")
        return math.fmod(float(other), float(self))

    def __pow__(self, other: Any, mod: Any = None) -> float:
        """self ** other"""
        if mod is not None or not _is_operand(other):
            return NotImplemented
        return self.power(other)

    def __rpow__(self, other: Any, mod: Any = None) -> float:
        """other ** self"""
        if mod is not None or not _is_operand(other):
            return NotImplemented
        return math.pow(float(other), float(self))

    def __neg__(self) -> Rational:
        """-self"""
        return self.negative()

    def __pos__(self) -> Rational:
        """+self"""
        return self.positive()

    def __abs__(self) -> Rational:
        """abs(self)"""
        if self._numerator < 0:
            return self.negative()
        return self

    # comparison

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, Rational):
            return (self._numerator == other._numerator and
                    self._denominator == other._denominator)
        if isinstance(other, numbers.Rational):
            return (self._numerator == other.numerator and
                    self._denominator == other.denominator)
        if isinstance(other, float):
            return math.isfinite(other) and self == Rational(other)
        if isinstance(other, Decimal):
            return other.is_finite() and self == Rational(other)
        if isinstance(other, numbers.Real):
            return self == float(other)
        if isinstance(other, numbers.Complex):
            return other.imag == 0 and self == other.real
        return NotImplemented

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> bool:
        if isinstance(other, float):
            if not math.isfinite(other):
                return op(0.0, other)
        elif isinstance(other, Decimal):
            if not other.is_finite():
                return op(0, other)
        elif not isinstance(other, numbers.Real):
            return NotImplemented
        other = as_rational(other)
        if self._denominator == other._denominator:
            return op(self._numerator, other._numerator)
        return op(self._numerator * other._denominator,
                  other._numerator * self._denominator)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        """hash(self)"""
        # same algorithm as used for int, float and Fraction, so that equal
        # values give equal hashes
        try:
            dinv = pow(self._denominator, -1, _PyHASH_MODULUS)
        except ValueError:
            # denominator is a multiple of the modulus
            hash_ = _PyHASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    # conversion

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __int__(self) -> int:
        """int(self)"""
        return self.__trunc__()

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        num, den = self._numerator, self._denominator
        if num < 0:
            return -(-num // den)
        return num // den

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def __float__(self) -> float:
        """float(self)"""
        return self._numerator / self._denominator

    def __complex__(self) -> complex:
        """complex(self)"""
        return complex(float(self))

    def __round__(self, n_digits: Optional[int] = None) \
            -> Union[int, Rational]:
        """round(self [, n_digits])

        Round `self` to a given precision in decimal digits, using the
        current default rounding mode.

        Args:
            n_digits (int): number of fractional digits to be kept; may be
                negative to round to tens, hundreds etc.

        Returns:
            int: if `n_digits` is None
            Rational: otherwise
        """
        num, den = self._numerator, self._denominator
        if n_digits is None:
            return divide_rounded(num, den)
        if not isinstance(n_digits, numbers.Integral):
            raise TypeError("Number of digits must be an Integral, not "
                            f"{type(n_digits).__name__}.")
        n_digits = int(n_digits)
        if n_digits >= 0:
            shift = 10 ** n_digits
            return self._new(*_reduced(divide_rounded(num * shift, den),
                                       shift))
        shift = 10 ** -n_digits
        return self._new(divide_rounded(num, den * shift) * shift, 1)

    def quantize(self, quant: Any,
                 rounding: Optional[Rounding] = None) -> Rational:
        """Return integer multiple of `quant` closest to `self`.

        Args:
            quant (numbers.Real or decimal.Decimal): quantum to get a
                multiple from
            rounding (Rounding): rounding mode (default: None)

        If no `rounding` is given, the current default rounding mode is
        used.

        Raises:
            TypeError: `quant` is not a real number
            ValueError: `quant` is zero, infinite or NaN
        """
        quant = as_rational(quant)
        if quant._numerator == 0:
            raise ValueError("Quantum must not be zero.")
        num = self._numerator * quant._denominator
        den = self._denominator * quant._numerator
        return quant.multiply(divide_rounded(num, den, rounding))

    # representation

    def __str__(self) -> str:
        """str(self)"""
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        """repr(self)"""
        if self._denominator == 1:
            return f"{self.__class__.__name__}({self._numerator})"
        return f"{self.__class__.__name__}({self._numerator}, " \
               f"{self._denominator})"

    # immutable instances

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    def __reduce__(self) -> Tuple[type, Tuple[int, int]]:
        return self.__class__, (self._numerator, self._denominator)


numbers.Rational.register(Rational)


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Rational, numbers.Real, Decimal))


def _as_operand(value: Any) -> Optional[Rational]:
    if isinstance(value, Rational):
        return value
    if _is_operand(value):
        return Rational(value)
    return None


def as_rational(value: Any) -> Rational:
    """Return `value` converted to a Rational.

    A Rational is returned unchanged, other exact numbers are converted
    exactly, floats via their exact decimal expansion.

    Raises:
        TypeError: `value` is not a real number
        ValueError: `value` is infinite or NaN
    """
    if isinstance(value, Rational):
        return value
    return Rational(value)
