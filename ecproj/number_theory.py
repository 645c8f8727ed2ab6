#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Modular inverse by the Extended Euclidean Algorithm.

https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
"""

from typing import Tuple

from ecproj.exceptions import DivisionByZero
from ecproj.utils import int_repr


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    "Return (g, x, y) such that a*x + b*y = g = gcd(a, b)."

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime.

    DivisionByZero is raised if a is not invertible,
    i.e. if a and m are not coprime.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise DivisionByZero(f"No inverse for {int_repr(a)} mod {int_repr(m)}")

