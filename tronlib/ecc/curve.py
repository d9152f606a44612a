#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime order elliptic curve group used by TRON accounts.

Points of y^2 = x^3 + a*x + b over Fp: affine (x, y) at the boundaries,
Jacobian (X, Y, Z) with x = X/Z^2, y = Y/Z^3 inside scalar
multiplications, so that a single modular inversion is needed
at the end of each of them.

TRON keys live on secp256k1 (SEC 2 v.2):
http://www.secg.org/sec2-v2.pdf
"""

import json
from os import path
from typing import Dict, Optional

from tronlib.alias import INF, INFJ, JacPoint, Point
from tronlib.ecc.number_theory import mod_inv, mod_sqrt
from tronlib.exceptions import TronlibValueError


def _is_probable_prime(i: int) -> bool:
    # Fermat test: curve parameters are public, not adversarial
    return i > 2 and i % 2 == 1 and pow(2, i - 1, i) == 1


def jac_from_aff(Q: Point) -> JacPoint:
    "Return the Jacobian representation of an affine point (INF included)."
    return (Q[0], Q[1], 1) if Q[1] else INFJ


class Curve:
    "Cyclic group of prime order n generated by G on an elliptic curve over Fp."

    def __init__(
        self,
        p: int,
        a: int,
        b: int,
        G: Point,
        n: int,
        name: Optional[str] = None,
    ) -> None:

        if not _is_probable_prime(p):
            raise TronlibValueError(f"p is not prime: {hex(p)}")
        if not 0 <= a < p:
            raise TronlibValueError(f"a not in 0..p-1: {hex(a)}")
        if not 0 <= b < p:
            raise TronlibValueError(f"b not in 0..p-1: {hex(b)}")
        if (4 * a**3 + 27 * b**2) % p == 0:
            raise TronlibValueError("zero discriminant")
        self.p = p
        self.a = a
        self.b = b
        self.p_size = (p.bit_length() + 7) // 8

        if len(G) != 2:
            raise TronlibValueError("generator must be a tuple[int, int]")
        if G[1] == 0:
            raise TronlibValueError("INF point cannot be a generator")
        if not self.is_on_curve(G):
            raise TronlibValueError("generator is not on the curve")
        self.G = G[0], G[1]
        self.GJ = G[0], G[1], 1

        if not _is_probable_prime(n):
            raise TronlibValueError(f"n is not prime: {hex(n)}")
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = (self.nlen + 7) // 8
        if _mult(n, self.GJ, self)[2] != 0:
            raise TronlibValueError(f"n is not the group order: {hex(n)}")

        self.name = name

    def __repr__(self) -> str:
        if self.name is not None:
            return f"Curve({self.name})"
        return f"Curve({self.p}, {self.a}, {self.b}, {self.G}, {self.n})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.p, self.a, self.b, self.G, self.n) == (
            other.p,
            other.a,
            other.b,
            other.G,
            other.n,
        )

    def __hash__(self) -> int:
        return hash((self.p, self.a, self.b, self.G, self.n))

    def y(self, x: int) -> int:
        "Return one of the two y-coordinates of the points with abscissa x."

        if not 0 <= x < self.p:
            raise TronlibValueError(f"x-coordinate not in 0..p-1: {hex(x)}")
        y2 = (x * x * x + self.a * x + self.b) % self.p
        try:
            return mod_sqrt(y2, self.p)
        except TronlibValueError as e:
            raise TronlibValueError(f"invalid x-coordinate: {hex(x)}") from e

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the affine point (INF included) is on the curve."

        if not isinstance(Q, tuple) or len(Q) != 2:
            raise TronlibValueError("point must be a tuple[int, int]")
        x, y = Q
        if y == 0:
            return True
        if not 0 <= x < self.p:
            raise TronlibValueError(f"x-coordinate not in 0..p-1: {hex(x)}")
        if not 0 < y < self.p:
            raise TronlibValueError(f"y-coordinate not in 1..p-1: {hex(y)}")
        return (x * x * x + self.a * x + self.b - y * y) % self.p == 0

    def require_on_curve(self, Q: Point) -> None:
        if not self.is_on_curve(Q):
            raise TronlibValueError("point not on curve")

    def aff_from_jac(self, QJ: JacPoint) -> Point:
        X, Y, Z = QJ
        if Z == 0:
            return INF
        z_inv = mod_inv(Z, self.p)
        z_inv2 = z_inv * z_inv
        return X * z_inv2 % self.p, Y * z_inv2 * z_inv % self.p

    def double_jac(self, QJ: JacPoint) -> JacPoint:
        X, Y, Z = QJ
        if Z == 0 or Y == 0:
            return INFJ
        p = self.p
        YY = Y * Y % p
        S = 4 * X * YY % p
        ZZ = Z * Z % p
        M = (3 * X * X + self.a * ZZ * ZZ) % p
        X3 = (M * M - 2 * S) % p
        Y3 = (M * (S - X3) - 8 * YY * YY) % p
        Z3 = 2 * Y * Z % p
        return X3, Y3, Z3

    def add_jac(self, QJ: JacPoint, RJ: JacPoint) -> JacPoint:
        if QJ[2] == 0:
            return RJ
        if RJ[2] == 0:
            return QJ
        p = self.p
        X1, Y1, Z1 = QJ
        X2, Y2, Z2 = RJ
        Z1Z1 = Z1 * Z1 % p
        Z2Z2 = Z2 * Z2 % p
        U1 = X1 * Z2Z2 % p
        U2 = X2 * Z1Z1 % p
        S1 = Y1 * Z2 * Z2Z2 % p
        S2 = Y2 * Z1 * Z1Z1 % p
        H = (U2 - U1) % p
        R = (S2 - S1) % p
        if H == 0:
            # same abscissa: either the same point or opposite points
            return self.double_jac(QJ) if R == 0 else INFJ
        HH = H * H % p
        HHH = H * HH % p
        V = U1 * HH % p
        X3 = (R * R - HHH - 2 * V) % p
        Y3 = (R * (V - X3) - S1 * HHH) % p
        Z3 = Z1 * Z2 * H % p
        return X3, Y3, Z3


def _mult(m: int, QJ: JacPoint, ec: Curve) -> JacPoint:
    """Return m*Q with a Montgomery ladder.

    Every bit of m costs one addition and one doubling.
    m must be non-negative; it is not reduced mod n.
    """

    if m < 0:
        raise TronlibValueError(f"negative m: {hex(m)}")

    R0, R1 = INFJ, QJ
    for bit in bin(m)[2:]:
        if bit == "1":
            R0, R1 = ec.add_jac(R0, R1), ec.double_jac(R1)
        else:
            R0, R1 = ec.double_jac(R0), ec.add_jac(R0, R1)
    return R0


def _double_mult(u: int, HJ: JacPoint, v: int, QJ: JacPoint, ec: Curve) -> JacPoint:
    """Return u*H + v*Q sharing the doublings (Shamir's trick).

    Signature verification and public key recovery are
    double scalar multiplications.
    """

    if u < 0:
        raise TronlibValueError(f"negative first coefficient: {hex(u)}")
    if v < 0:
        raise TronlibValueError(f"negative second coefficient: {hex(v)}")

    addends = {1: HJ, 2: QJ, 3: ec.add_jac(HJ, QJ)}
    R = INFJ
    for i in reversed(range(max(u.bit_length(), v.bit_length()))):
        R = ec.double_jac(R)
        digit = (u >> i & 1) | (v >> i & 1) << 1
        if digit:
            R = ec.add_jac(R, addends[digit])
    return R


CURVES: Dict[str, Curve] = {}
_filename = path.join(path.dirname(__file__), "..", "_data", "curves.json")
with open(_filename, "r", encoding="ascii") as file_:
    for ec_name, params in json.load(file_).items():
        CURVES[ec_name] = Curve(
            int(params["p"], 16),
            int(params["a"], 16),
            int(params["b"], 16),
            (int(params["Gx"], 16), int(params["Gy"], 16)),
            int(params["n"], 16),
            ec_name,
        )

secp256k1 = CURVES["secp256k1"]
