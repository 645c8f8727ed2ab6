#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Arithmetic in the prime field Fp.

Every result is reduced into the canonical range [0, p-1],
so that intermediate values never grow beyond p^2.
"""

from ecproj.exceptions import DivisionByZero
from ecproj.number_theory import mod_inv
from ecproj.utils import int_repr


class PrimeField:
    """The finite field Z/pZ, p being a prime.

    Elements are plain ints; inputs do not have to be reduced,
    outputs always are.
    """

    __slots__ = ("p",)

    def __init__(self, p: int) -> None:
        self.p = p

    def __repr__(self) -> str:
        return f"PrimeField({int_repr(self.p)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self) -> int:
        return hash(self.p)

    def reduce(self, x: int) -> int:
        return x % self.p

    def is_zero(self, x: int) -> bool:
        return x % self.p == 0

    def add(self, x: int, y: int) -> int:
        return (x + y) % self.p

    def sub(self, x: int, y: int) -> int:
        # Python % is never negative for a positive modulus
        return (x - y) % self.p

    def neg(self, x: int) -> int:
        return -x % self.p

    def mul(self, x: int, y: int) -> int:
        return (x * y) % self.p

    def sqr(self, x: int) -> int:
        return (x * x) % self.p

    def inverse(self, x: int) -> int:
        """Return the multiplicative inverse of x.

        As p is prime, zero is the only non-invertible element:
        DivisionByZero is raised for it.
        """
        if x % self.p == 0:
            raise DivisionByZero(f"zero has no inverse mod {int_repr(self.p)}")
        return mod_inv(x, self.p)

    def div(self, x: int, y: int) -> int:
        return self.mul(x, self.inverse(y))

