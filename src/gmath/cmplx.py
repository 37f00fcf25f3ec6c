# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Complex number type with IEEE-754-aware arithmetic.

Exceptional results never raise: they are absorbed into the sentinels
`Complex.NAN` and `Complex.INF`. All NaN values are considered equal to
each other, and any operation involving a NaN operand results in NaN.
"""

from __future__ import annotations

from decimal import Decimal
import math
import numbers
import sys
from typing import Any, Optional, Tuple

from .convert import components_of, float_of


__all__ = ['Complex', 'as_complex']


_NAN_HASH = sys.hash_info.nan


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _log(x: float) -> float:
    # x >= 0
    return math.log(x) if x > 0.0 else -math.inf


def _cos(x: float) -> float:
    return math.cos(x) if math.isfinite(x) else math.nan


def _sin(x: float) -> float:
    return math.sin(x) if math.isfinite(x) else math.nan


class Complex:

    """Complex number with float components.

    Args:
        real (numbers.Complex or decimal.Decimal): real part of the
            resulting Complex, or its full value if no imaginary part is
            given (default: 0.0)
        imaginary (numbers.Real or decimal.Decimal): imaginary part of the
            resulting Complex (default: 0.0)

    Raises:
        TypeError: type of given value(s) not supported
    """

    __slots__ = ('_real', '_imag')

    ZERO: Complex
    ONE: Complex
    I: Complex
    NAN: Complex
    INF: Complex

    def __new__(cls, real: Any = 0.0, imaginary: Any = None) -> Complex:
        if imaginary is None:
            if type(real) is cls:
                return real
            return cls._new(*components_of(real))
        return cls._new(float_of(real), float_of(imaginary))

    @classmethod
    def _new(cls, real: float, imag: float) -> Complex:
        z = object.__new__(cls)
        z._real = real
        z._imag = imag
        return z

    @property
    def real(self) -> float:
        """Real part of `self`."""
        return self._real

    @property
    def imaginary(self) -> float:
        """Imaginary part of `self`."""
        return self._imag

    imag = imaginary

    def is_nan(self) -> bool:
        """Return True if at least one component of `self` is NaN."""
        return math.isnan(self._real) or math.isnan(self._imag)

    def is_infinite(self) -> bool:
        """Return True if `self` is not NaN and has an infinite component."""
        return not self.is_nan() and (math.isinf(self._real) or
                                      math.isinf(self._imag))

    def _has_inf_part(self) -> bool:
        return math.isinf(self._real) or math.isinf(self._imag)

    # arithmetic

    def plus(self, other: Any) -> Complex:
        """Return `self` + `other`."""
        other = as_complex(other)
        if self.is_nan() or other.is_nan():
            return Complex.NAN
        return self._new(self._real + other._real, self._imag + other._imag)

    def minus(self, other: Any) -> Complex:
        """Return `self` - `other`."""
        other = as_complex(other)
        if self.is_nan() or other.is_nan():
            return Complex.NAN
        return self.plus(other.negative())

    def multiply(self, other: Any) -> Complex:
        """Return `self` * `other`.

        If any component of either operand is infinite, the result is
        `Complex.INF`; the product is not computed componentwise, which
        would give NaN parts for inf * 0.
        """
        other = as_complex(other)
        if self.is_nan() or other.is_nan():
            return Complex.NAN
        if self._has_inf_part() or other._has_inf_part():
            return Complex.INF
        a, b = self._real, self._imag
        c, d = other._real, other._imag
        return self._new(a * c - b * d, a * d + b * c)

    def div(self, other: Any) -> Complex:
        """Return `self` / `other`.

        Division by zero results in `Complex.NAN`, division of a finite
        value by an infinite one in `Complex.ZERO`.

        Uses Smith's algorithm: the quotient is scaled by the component of
        the divisor with the larger magnitude, so that intermediate results
        do not overflow.
        """
        other = as_complex(other)
        if self.is_nan() or other.is_nan():
            return Complex.NAN
        a, b = self._real, self._imag
        c, d = other._real, other._imag
        if c == 0.0 and d == 0.0:
            return Complex.NAN
        if other.is_infinite() and not self.is_infinite():
            return Complex.ZERO
        if abs(c) < abs(d):
            q = c / d
            den = c * q + d
            return self._new((a * q + b) / den, (b * q - a) / den)
        q = d / c
        den = d * q + c
        return self._new((b * q + a) / den, (b - a * q) / den)

    def reciprocal(self) -> Complex:
        """Return 1 / `self`.

        The reciprocal of zero is `Complex.INF`, that of an infinite value
        is `Complex.ZERO`.
        """
        if self.is_nan():
            return Complex.NAN
        a, b = self._real, self._imag
        if a == 0.0 and b == 0.0:
            return Complex.INF
        if self.is_infinite():
            return Complex.ZERO
        if abs(a) < abs(b):
            q = a / b
            scale = 1.0 / (a * q + b)
            return self._new(scale * q, -scale)
        q = b / a
        scale = 1.0 / (b * q + a)
        return self._new(scale, -scale * q)

    def abs(self) -> float:
        """Return the magnitude of `self`.

        Computed as |x| * sqrt(1 + (y / x) ** 2) with x being the component
        with the larger magnitude, which avoids overflow and underflow of
        the squares.
        """
        if self.is_nan():
            return math.nan
        if self.is_infinite():
            return math.inf
        a, b = self._real, self._imag
        if abs(a) < abs(b):
            q = a / b
            return abs(b) * math.sqrt(1.0 + q * q)
        if a == 0.0:
            return abs(b)
        q = b / a
        return abs(a) * math.sqrt(1.0 + q * q)

    def log(self) -> Complex:
        """Return the principal value of the natural logarithm of `self`."""
        if self.is_nan():
            return Complex.NAN
        return self._new(_log(self.abs()),
                         math.atan2(self._imag, self._real))

    def exp(self) -> Complex:
        """Return e ** `self`."""
        if self.is_nan():
            return Complex.NAN
        exp_real = _exp(self._real)
        return self._new(exp_real * _cos(self._imag),
                         exp_real * _sin(self._imag))

    def power(self, other: Any) -> Complex:
        """Return `self` ** `other`, i.e. exp(`other` * log(`self`)).

        Integral exponents are not special-cased, so that for example
        0 ** 0 results in `Complex.NAN`.
        """
        return self.log().multiply(other).exp()

    def negative(self) -> Complex:
        """Return -`self`."""
        if self.is_nan():
            return Complex.NAN
        return self._new(-self._real, -self._imag)

    def positive(self) -> Complex:
        """Return +`self`."""
        return self

    def conjugate(self) -> Complex:
        """Return complex conjugate of `self`."""
        if self.is_nan():
            return Complex.NAN
        return self._new(self._real, -self._imag)

    # operator protocol

    def __add__(self, other: Any) -> Complex:
        """self + other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Any) -> Complex:
        """other + self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return other.plus(self)

    def __sub__(self, other: Any) -> Complex:
        """self - other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Any) -> Complex:
        """other - self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return other.minus(self)

    def __mul__(self, other: Any) -> Complex:
        """self * other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Complex:
        """other * self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: Any) -> Complex:
        """self / other"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Complex:
        """other / self"""
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __pow__(self, other: Any, mod: Any = None) -> Complex:
        """self ** other"""
        other = _as_operand(other)
        if mod is not None or other is None:
            return NotImplemented
        return self.power(other)

    def __rpow__(self, other: Any, mod: Any = None) -> Complex:
        """other ** self"""
        other = _as_operand(other)
        if mod is not None or other is None:
            return NotImplemented
        return other.power(self)

    def __neg__(self) -> Complex:
        """-self"""
        return self.negative()

    def __pos__(self) -> Complex:
        """+self"""
        return self.positive()

    def __abs__(self) -> float:
        """abs(self)"""
        return self.abs()

    # comparison

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, Complex):
            if other.is_nan():
                return self.is_nan()
            return self._real == other._real and self._imag == other._imag
        if isinstance(other, (numbers.Real, Decimal)):
            # let real numbers compare themselves exactly to a float
            return self._imag == 0.0 and other == self._real
        if isinstance(other, numbers.Complex):
            return self._real == other.real and self._imag == other.imag
        return NotImplemented

    # Complex numbers have no meaningful total order, so the ordering
    # operators are left undefined and raise TypeError.

    def __hash__(self) -> int:
        """hash(self)"""
        if self.is_nan():
            return _NAN_HASH
        # equal to the hash of numerically equal int, float or complex
        return hash(complex(self._real, self._imag))

    # conversion

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._real != 0.0 or self._imag != 0.0

    def __complex__(self) -> complex:
        """complex(self)"""
        return complex(self._real, self._imag)

    def as_tuple(self) -> Tuple[float, float]:
        """Return the pair of real and imaginary part of `self`."""
        return self._real, self._imag

    # representation

    def __str__(self) -> str:
        """str(self)

        Both parts are shown in Python's float notation, joined by '+'
        unless the text of the imaginary part already starts with '-'.
        So the sign follows the float text, not the value: a negative zero
        imaginary part is shown as '-0.0' and a NaN one as '+nan':

        >>> print(Complex(0.0, -0.0))
        0.0-0.0i
        >>> print(Complex.NAN)
        nan+nani
        """
        imag = repr(self._imag)
        sign = '' if imag.startswith('-') else '+'
        return f"{self._real!r}{sign}{imag}i"

    def __repr__(self) -> str:
        """repr(self)"""
        return f"{self.__class__.__name__}({self._real!r}, {self._imag!r})"

    # immutable instances

    def __copy__(self) -> Complex:
        return self

    def __deepcopy__(self, memo: Any) -> Complex:
        return self

    def __reduce__(self) -> Tuple[type, Tuple[float, float]]:
        return self.__class__, (self._real, self._imag)


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
Complex.NAN = Complex(math.nan, math.nan)
Complex.INF = Complex(math.inf, math.inf)

numbers.Complex.register(Complex)


def _as_operand(value: Any) -> Optional[Complex]:
    if isinstance(value, Complex):
        return value
    if isinstance(value, (numbers.Complex, Decimal)):
        return Complex(value)
    return None


def as_complex(value: Any) -> Complex:
    """Return `value` converted to a Complex.

    A Complex is returned unchanged; other numbers are converted to a pair
    of floats.

    Raises:
        TypeError: `value` is not a number
    """
    if isinstance(value, Complex):
        return value
    return Complex(value)
