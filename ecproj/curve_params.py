#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Elliptic curve parameters.

A short Weierstrass curve y^2 = x^3 + a*x + b over Fp is
fully described by (p, a, b); the generator G, its order n,
and the cofactor h are optional here, as point arithmetic
does not need them.

Parameters are configuration: they are injected into
ecproj.projective.ProjectiveCurve, never hard-coded there.
They can be (de)serialized to/from json, integers being
written as hex-strings, as in SEC 2 v.2:
http://www.secg.org/sec2-v2.pdf
"""

import json
import logging
from dataclasses import InitVar, dataclass, field
from math import isqrt
from os import path
from typing import Any, Dict, List, Optional

from dataclasses_json import DataClassJsonMixin, config

from ecproj.alias import Integer, Point
from ecproj.exceptions import ECProjTypeError, ECProjValueError
from ecproj.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr

logger = logging.getLogger(__name__)

datadir = path.join(path.dirname(__file__), "data")


def _is_probable_prime(i: int) -> bool:
    # Fermat test will do as _probabilistic_ primality test...
    return i == 2 or (i > 2 and i % 2 == 1 and pow(2, i - 1, i) == 1)


def _encode_optional_int(i: Optional[int]) -> Optional[str]:
    return None if i is None else hex_string(i)


def _decode_optional_int(i: Optional[Integer]) -> Optional[int]:
    return None if i is None else int_from_integer(i)


def _encode_point(Q: Optional[Point]) -> Optional[List[str]]:
    return None if Q is None else [hex_string(Q[0]), hex_string(Q[1])]


def _decode_point(Q: Optional[List[Integer]]) -> Optional[Point]:
    if Q is None:
        return None
    if len(Q) != 2:
        raise ECProjValueError("Generator must be a sequence[int, int]")
    return int_from_integer(Q[0]), int_from_integer(Q[1])


_INT_CODEC = config(encoder=hex_string, decoder=int_from_integer)


@dataclass(frozen=True)
class CurveParams(DataClassJsonMixin):
    """Parameters of the short Weierstrass curve y^2 = x^3 + a*x + b over Fp.

    The constants a, b must satisfy the relationship
    4 a^3 + 27 b^2 ≠ 0 (mod p).
    Parameters are checked according to SEC 1 v.2 3.1.1.2.1,
    as far as they are provided.
    """

    p: int = field(metadata=_INT_CODEC)
    a: int = field(metadata=_INT_CODEC)
    b: int = field(metadata=_INT_CODEC)
    G: Optional[Point] = field(
        default=None, metadata=config(encoder=_encode_point, decoder=_decode_point)
    )
    n: Optional[int] = field(
        default=None,
        metadata=config(encoder=_encode_optional_int, decoder=_decode_optional_int),
    )
    h: int = 1
    name: str = ""
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        # accept any Integer representation, store int
        for name_ in ("p", "a", "b"):
            object.__setattr__(self, name_, int_from_integer(getattr(self, name_)))
        object.__setattr__(self, "n", _decode_optional_int(self.n))
        if self.G is not None:
            if len(self.G) != 2:
                raise ECProjValueError("Generator must be a sequence[int, int]")
            G = int_from_integer(self.G[0]), int_from_integer(self.G[1])
            object.__setattr__(self, "G", G)
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        # 1. check that p is an odd prime
        if self.p == 2 or not _is_probable_prime(self.p):
            raise ECProjValueError(f"p is not prime: {int_repr(self.p)}")

        # 2. check that a and b are integers in the interval [0, p−1]
        for coeff, value in (("a", self.a), ("b", self.b)):
            if value < 0:
                raise ECProjValueError(f"negative {coeff}: {value}")
            if self.p <= value:
                err_msg = f"p <= {coeff}: {int_repr(self.p)} <= {int_repr(value)}"
                raise ECProjValueError(err_msg)

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * self.a * self.a * self.a + 27 * self.b * self.b) % self.p == 0:
            raise ECProjValueError("zero discriminant")

        # 4. check that G is on curve
        if self.G is not None and not self.is_on_curve(self.G):
            raise ECProjValueError("Generator is not on the curve")

        if self.h < 1:
            raise ECProjValueError(f"invalid cofactor: {self.h}")

        if self.n is not None:
            # 5. Check that n is prime.
            if not _is_probable_prime(self.n):
                raise ECProjValueError(f"n is not prime: {int_repr(self.n)}")
            # 6. Hasse theorem: |n*h - (p+1)| <= 2*sqrt(p)
            delta = isqrt(4 * self.p)
            if abs(self.n * self.h - self.p - 1) > delta:
                err_msg = "n*h not in p+1-delta..p+1+delta: "
                err_msg += f"{int_repr(self.n)}*{self.h}"
                raise ECProjValueError(err_msg)

    def __str__(self) -> str:
        big = max(self.p, self.a, self.b) > HEX_THRESHOLD
        fmt = hex_string if big else str
        result = f"Curve {self.name}" if self.name else "Curve"
        result += f"\n p   = {fmt(self.p)}"
        result += f"\n a   = {fmt(self.a)}"
        result += f"\n b   = {fmt(self.b)}"
        if self.G is not None:
            result += f"\n x_G = {fmt(self.G[0])}"
            result += f"\n y_G = {fmt(self.G[1])}"
        if self.n is not None:
            result += f"\n n   = {fmt(self.n)}"
            result += f"\n h   = {self.h}"
        return result

    def y2(self, x: int) -> int:
        "Return y^2 = x^3 + a*x + b (mod p)."
        return ((x * x + self.a) * x + self.b) % self.p

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the affine point is on the curve."
        if len(Q) != 2:
            raise ECProjTypeError("point must be a tuple[int, int]")
        if not (0 <= Q[0] < self.p and 0 <= Q[1] < self.p):
            return False
        return self.y2(Q[0]) == Q[1] * Q[1] % self.p


def curves_from_dict(data: Dict[str, Dict[str, Any]]) -> Dict[str, CurveParams]:
    "Return curves from a {name: parameters} dictionary."
    curves: Dict[str, CurveParams] = {}
    for ec_name, params in data.items():
        params = dict(params)
        if not params.get("name"):
            params["name"] = ec_name
        curves[ec_name] = CurveParams.from_dict(params)
    return curves


def load_curves(filename: str) -> Dict[str, CurveParams]:
    "Return curves from a json file of {name: parameters}."
    with open(filename, "r", encoding="ascii") as file_:
        curves = curves_from_dict(json.load(file_))
    logger.debug("loaded %d curve(s) from %s", len(curves), filename)
    return curves


def save_curves(curves: Dict[str, CurveParams], filename: str) -> None:
    "Write curves to a json file as {name: parameters}."
    data = {ec_name: ec.to_dict() for ec_name, ec in curves.items()}
    with open(filename, "w", encoding="ascii") as file_:
        json.dump(data, file_, indent=4)


CURVES = load_curves(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]
