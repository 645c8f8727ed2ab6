#!/usr/bin/env python3

# Copyright (C) 2023 The ecproj developers
#
# This file is part of ecproj. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecproj including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Elliptic curve point arithmetic in homogeneous projective coordinates.

A projective point (X, Y, Z) with Z ≠ 0 represents
the affine point (X/Z, Y/Z);
any (X, Y, Z) with Z = 0 represents the point at infinity,
i.e. the identity element of the curve group.

Projective coordinates avoid the field inversion
required by every affine addition or doubling:
a single inversion is needed only when converting back
to affine coordinates.

Formulas are from
https://en.wikibooks.org/wiki/Cryptography/Prime_Curve/Standard_Projective_Coordinates

No attempt is made at constant-time execution:
this code must not be used with secret data
where side-channel attacks are a concern.
"""

from typing import NamedTuple

from ecproj.alias import Point
from ecproj.curve_params import CurveParams, secp256k1
from ecproj.exceptions import ECProjTypeError, ECProjValueError, PointAtInfinity
from ecproj.field import PrimeField


class ProjPoint(NamedTuple):
    "Elliptic curve point in homogeneous projective coordinates."

    x: int
    y: int
    z: int


# canonical representation of the point at infinity;
# it can be checked with 'P.z == 0' for reduced points
INFP = ProjPoint(0, 1, 0)


class ProjectiveCurve:
    """Group law of a short Weierstrass curve in projective coordinates.

    Curve parameters are injected at construction.
    Input points are not required to be reduced mod p,
    returned points always are.
    Input points are assumed to be on curve:
    use require_on_curve when in doubt.
    """

    def __init__(self, ec: CurveParams) -> None:
        self.ec = ec
        self.F = PrimeField(ec.p)
        self.p = ec.p

    def __repr__(self) -> str:
        return f"ProjectiveCurve({self.ec.name or repr(self.ec)})"

    @property
    def infinity(self) -> ProjPoint:
        return INFP

    @property
    def generator(self) -> ProjPoint:
        if self.ec.G is None:
            raise ECProjValueError("curve has no generator")
        return self.from_affine(self.ec.G)

    def point(self, x: int, y: int, z: int = 1) -> ProjPoint:
        "Return the reduced projective point (x, y, z)."
        F = self.F
        if F.is_zero(z):
            return INFP
        return ProjPoint(F.reduce(x), F.reduce(y), F.reduce(z))

    def from_affine(self, Q: Point) -> ProjPoint:
        """Return the projective representation (x, y, 1) of the affine point.

        The input point is not checked to be on curve.
        """
        if len(Q) != 2:
            raise ECProjTypeError("not an affine point")
        return self.point(Q[0], Q[1], 1)

    def to_affine(self, P: ProjPoint) -> Point:
        "Return the affine coordinates (X/Z, Y/Z) of the projective point."
        if len(P) != 3:
            raise ECProjTypeError("not a projective point")
        F = self.F
        if F.is_zero(P[2]):
            raise PointAtInfinity("INF has no affine coordinates")
        Z_inv = F.inverse(P[2])
        return F.mul(P[0], Z_inv), F.mul(P[1], Z_inv)

    def is_infinity(self, P: ProjPoint) -> bool:
        return self.F.is_zero(P[2])

    def negate(self, P: ProjPoint) -> ProjPoint:
        "Return the opposite point (X, -Y, Z)."
        if self.is_infinity(P):
            return INFP
        F = self.F
        return ProjPoint(F.reduce(P[0]), F.neg(P[1]), F.reduce(P[2]))

    def equal(self, P: ProjPoint, Q: ProjPoint) -> bool:
        """Return True if the projective points are the same curve point.

        Different projective representations of the same point
        are equal, i.e. (X1, Y1, Z1) ~ (X2, Y2, Z2)
        if X1*Z2 = X2*Z1 and Y1*Z2 = Y2*Z1.
        """
        F = self.F
        P_inf, Q_inf = F.is_zero(P[2]), F.is_zero(Q[2])
        if P_inf or Q_inf:
            return P_inf and Q_inf
        if F.mul(P[0], Q[2]) != F.mul(Q[0], P[2]):
            return False
        return F.mul(P[1], Q[2]) == F.mul(Q[1], P[2])

    def is_on_curve(self, P: ProjPoint) -> bool:
        """Return True if the point is on the curve.

        The homogeneous curve equation is used:
        Y^2*Z = X^3 + a*X*Z^2 + b*Z^3
        """
        if len(P) != 3:
            raise ECProjTypeError("not a projective point")
        if self.is_infinity(P):
            return True
        F = self.F
        X, Y, Z = P
        Z2 = F.sqr(Z)
        lhs = F.mul(F.sqr(Y), Z)
        rhs = F.mul(F.add(F.sqr(X), F.mul(self.ec.a, Z2)), X)
        return lhs == F.add(rhs, F.mul(self.ec.b, F.mul(Z2, Z)))

    def require_on_curve(self, P: ProjPoint) -> None:
        if not self.is_on_curve(P):
            raise ECProjValueError("point not on curve")

    def double(self, P: ProjPoint) -> ProjPoint:
        """Return 2P.

        T = 3*X^2 + a*Z^2, U = 2*Y*Z, V = 2*U*X*Y, W = T^2 - 2*V
        X3 = U*W
        Y3 = T*(V - W) - 2*(U*Y)^2
        Z3 = U^3
        """
        F = self.F
        X1, Y1, Z1 = P
        if F.is_zero(Z1):
            return INFP

        T = F.mul(3, F.sqr(X1))
        if self.ec.a:
            T = F.add(T, F.mul(self.ec.a, F.sqr(Z1)))
        U = F.mul(2, F.mul(Y1, Z1))
        # Y1 = 0: the tangent is vertical, P has order two
        if U == 0:
            return INFP
        V = F.mul(2, F.mul(U, F.mul(X1, Y1)))
        W = F.sub(F.sqr(T), F.mul(2, V))

        X3 = F.mul(U, W)
        Y3 = F.sub(F.mul(T, F.sub(V, W)), F.mul(2, F.sqr(F.mul(U, Y1))))
        Z3 = F.mul(U, F.sqr(U))
        return ProjPoint(X3, Y3, Z3)

    def add(self, P: ProjPoint, Q: ProjPoint) -> ProjPoint:
        """Return P + Q.

        T0 = Y1*Z2, T1 = Y2*Z1, T = T0 - T1
        U0 = X1*Z2, U1 = X2*Z1, U = U0 - U1
        V = Z1*Z2, W = T^2*V - U^2*(U0 + U1)
        X3 = U*W
        Y3 = T*(U0*U^2 - W) - T0*U^3
        Z3 = U^3*V
        """
        F = self.F
        X1, Y1, Z1 = P
        X2, Y2, Z2 = Q
        if F.is_zero(Z1):
            return self.point(X2, Y2, Z2)
        if F.is_zero(Z2):
            return self.point(X1, Y1, Z1)

        T0 = F.mul(Y1, Z2)
        T1 = F.mul(Y2, Z1)
        T = F.sub(T0, T1)
        U0 = F.mul(X1, Z2)
        U1 = F.mul(X2, Z1)
        U = F.sub(U0, U1)

        # same affine x-coordinate
        if U == 0:
            # the generic formula would yield (0, 0, 0)
            if T == 0:
                return self.double(P)
            # opposite points
            return INFP

        U2 = F.sqr(U)
        U3 = F.mul(U, U2)
        V = F.mul(Z1, Z2)
        W = F.sub(F.mul(F.sqr(T), V), F.mul(U2, F.add(U0, U1)))

        X3 = F.mul(U, W)
        Y3 = F.sub(F.mul(T, F.sub(F.mul(U0, U2), W)), F.mul(T0, U3))
        Z3 = F.mul(U3, V)
        return ProjPoint(X3, Y3, Z3)


_SECP256K1 = ProjectiveCurve(secp256k1)


def double(P: ProjPoint, curve: ProjectiveCurve = _SECP256K1) -> ProjPoint:
    "Return 2P on the given curve (default secp256k1)."
    return curve.double(P)


def add(P: ProjPoint, Q: ProjPoint, curve: ProjectiveCurve = _SECP256K1) -> ProjPoint:
    "Return P + Q on the given curve (default secp256k1)."
    return curve.add(P, Q)


def to_affine(P: ProjPoint, curve: ProjectiveCurve = _SECP256K1) -> Point:
    "Return the affine coordinates of P on the given curve (default secp256k1)."
    return curve.to_affine(P)


def from_affine(Q: Point, curve: ProjectiveCurve = _SECP256K1) -> ProjPoint:
    "Return the projective representation of Q (default secp256k1)."
    return curve.from_affine(Q)
