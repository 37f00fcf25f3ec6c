# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for rational number arithmetic."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Optional


__all__ = [
    'Rounding',
    'divide_rounded',
    'get_dflt_rounding_mode',
    'set_dflt_rounding_mode',
]


# rounding modes equivalent to those defined in standard lib module 'decimal'
@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> Rounding:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_05UP = (1, 'Round away from zero if last digit after rounding '
                     'towards zero would have been 0 or 5; otherwise round '
                     'towards zero.')
    ROUND_CEILING = (2, 'Round towards Infinity.')
    ROUND_DOWN = (3, 'Round towards zero.')
    ROUND_FLOOR = (4, 'Round towards -Infinity.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'integer.')
    ROUND_HALF_UP = (7, 'Round to nearest with ties going away from zero.')
    ROUND_UP = (8, 'Round away from zero.')


_dflt_rounding: ContextVar[Rounding] = \
    ContextVar("dflt_rounding", default=Rounding.ROUND_HALF_EVEN)


def get_dflt_rounding_mode() -> Rounding:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: Rounding) -> Token:
    """Set default rounding mode.

    Args:
        rounding (Rounding): rounding mode to be set as default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


def divide_rounded(num: int, den: int,
                   rounding: Optional[Rounding] = None) -> int:
    """Return `num` / `den` rounded to an integer.

    Args:
        num (int): dividend
        den (int): divisor, must not be zero
        rounding (Rounding): rounding mode to be applied; if None, the
            current default rounding mode is used

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
        ZeroDivisionError: `den` is zero
    """
    if rounding is None:
        rounding = get_dflt_rounding_mode()
    elif not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    if den == 0:
        raise ZeroDivisionError("Division by zero.")
    if den < 0:
        num, den = -num, -den
    sign = -1 if num < 0 else 1
    # quot is the result of rounding towards zero
    quot, rem = divmod(abs(num), den)
    if rem == 0:
        return sign * quot
    if rounding is Rounding.ROUND_DOWN:
        pass
    elif rounding is Rounding.ROUND_UP:
        quot += 1
    elif rounding is Rounding.ROUND_CEILING:
        quot += sign > 0
    elif rounding is Rounding.ROUND_FLOOR:
        quot += sign < 0
    elif rounding is Rounding.ROUND_05UP:
        quot += quot % 5 == 0
    else:
        twice_rem = 2 * rem
        if twice_rem > den:
            quot += 1
        elif twice_rem == den:
            if rounding is Rounding.ROUND_HALF_UP:
                quot += 1
            elif rounding is Rounding.ROUND_HALF_EVEN:
                quot += quot & 1
    return sign * quot
