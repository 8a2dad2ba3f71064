#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Implementation based on the Extended Euclidean Algorithm, see
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from typing import Optional, Tuple

from eccproto.exceptions import EccValueError
from eccproto.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def try_mod_inv(a: int, m: int) -> Optional[int]:
    """Return the inverse of a (mod m), or None if it does not exist.

    m does not have to be a prime: the inverse exists
    if and only if gcd(a, m) == 1.
    The non-existence of the inverse is a legitimate result,
    while a < 1 or m < 2 are invalid arguments.
    """

    if a < 1:
        raise EccValueError(f"a not in 1..: {int_repr(a)}")
    if m < 2:
        raise EccValueError(f"m not in 2..: {int_repr(m)}")

    _, x, _ = xgcd(a, m)
    x %= m
    # a*x != 1 (mod m) if gcd(a, m) != 1
    return x if a * x % m == 1 else None


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    Differently from try_mod_inv, a is reduced mod m and
    an Error is raised if the inverse does not exist.
    """

    if m < 2:
        raise EccValueError(f"m not in 2..: {int_repr(m)}")
    a %= m
    inv = try_mod_inv(a, m) if a else None
    if inv is None:
        raise EccValueError(f"No inverse for {int_repr(a)} mod {int_repr(m)}")
    return inv
