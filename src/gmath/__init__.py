# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational and IEEE-aware complex number arithmetic."""

from .cmplx import Complex, as_complex
from .rational import (
    ConstructionError, DivisionByZeroError, Rational, as_rational)
from .rounding import (
    Rounding, divide_rounded, get_dflt_rounding_mode, set_dflt_rounding_mode)
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'Complex',
    'ConstructionError',
    'DivisionByZeroError',
    'Rational',
    'Rounding',
    'as_complex',
    'as_rational',
    'divide_rounded',
    'get_dflt_rounding_mode',
    'set_dflt_rounding_mode',
]
