#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `tronlib.ecc.curve` module."

import secrets
from typing import List

import coincurve
import pytest

from tronlib.alias import INF, INFJ, JacPoint
from tronlib.ecc.curve import (
    CURVES,
    Curve,
    _double_mult,
    _mult,
    jac_from_aff,
    secp256k1,
)
from tronlib.ecc.sec_point import point_from_octets
from tronlib.exceptions import TronlibValueError

# low cardinality curves, both p = 1 and p = 3 (mod 4)
ec13_11 = Curve(13, 7, 6, (1, 1), 11)
ec19_23 = Curve(19, 2, 9, (0, 16), 23)
ec23_31 = Curve(23, 5, 1, (0, 1), 31)
SMALL_CURVES = (ec13_11, ec19_23, ec23_31)


def _multiples(QJ: JacPoint, ec: Curve) -> List[JacPoint]:
    "Return [0*Q, 1*Q, ..., n*Q] by repeated addition."
    multiples = [INFJ]
    for _ in range(ec.n):
        multiples.append(ec.add_jac(multiples[-1], QJ))
    return multiples


def test_secp256k1() -> None:
    ec = secp256k1
    assert CURVES == {"secp256k1": ec}
    assert ec.name == "secp256k1"
    assert repr(ec) == "Curve(secp256k1)"
    assert ec.p == 2**256 - 2**32 - 977
    assert (ec.a, ec.b) == (0, 7)
    assert ec.n == 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    assert ec.G[0] == 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
    assert ec.G[1] == 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
    assert ec.GJ == ec.G + (1,)
    assert (ec.p_size, ec.n_size, ec.nlen) == (32, 32, 256)
    assert ec.is_on_curve(ec.G)


def test_scalar_multiples() -> None:
    ec = secp256k1
    two_G = ec.aff_from_jac(_mult(2, ec.GJ, ec))
    assert two_G[0] == 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
    assert two_G == ec.aff_from_jac(ec.double_jac(ec.GJ))
    assert _mult(0, ec.GJ, ec) == INFJ
    assert _mult(ec.n, ec.GJ, ec)[2] == 0
    assert ec.aff_from_jac(_mult(ec.n - 1, ec.GJ, ec)) == (ec.G[0], ec.p - ec.G[1])

    for _ in range(8):
        prv_key = coincurve.PrivateKey()
        q = int.from_bytes(prv_key.secret, byteorder="big")
        exp = point_from_octets(prv_key.public_key.format(compressed=False))
        assert ec.aff_from_jac(_mult(q, ec.GJ, ec)) == exp

    with pytest.raises(TronlibValueError, match="negative m: "):
        _mult(-1, ec.GJ, ec)


def test_ladder_on_small_curves() -> None:
    for ec in SMALL_CURVES:
        HJ = _mult(3, ec.GJ, ec)
        for QJ in (ec.GJ, HJ):
            for m, RJ in enumerate(_multiples(QJ, ec)):
                assert ec.aff_from_jac(_mult(m, QJ, ec)) == ec.aff_from_jac(RJ)
        # the scalar is not reduced mod n
        assert ec.aff_from_jac(_mult(ec.n + 2, ec.GJ, ec)) == ec.aff_from_jac(
            _mult(2, ec.GJ, ec)
        )


def test_double_mult() -> None:
    ec = ec23_31
    HJ = _mult(5, ec.GJ, ec)
    u_multiples = _multiples(HJ, ec)
    v_multiples = _multiples(ec.GJ, ec)
    for u in range(ec.n):
        for v in range(ec.n):
            exp = ec.aff_from_jac(ec.add_jac(u_multiples[u], v_multiples[v]))
            assert ec.aff_from_jac(_double_mult(u, HJ, v, ec.GJ, ec)) == exp

    ec = secp256k1
    q = 1 + secrets.randbelow(ec.n - 1)
    QJ = _mult(q, ec.GJ, ec)
    RJ = _double_mult(3, ec.GJ, 4, QJ, ec)
    assert ec.aff_from_jac(RJ) == ec.aff_from_jac(_mult(3 + 4 * q, ec.GJ, ec))
    assert _double_mult(0, ec.GJ, 0, QJ, ec) == INFJ

    with pytest.raises(TronlibValueError, match="negative first coefficient: "):
        _double_mult(-1, ec.GJ, 1, ec.GJ, ec)
    with pytest.raises(TronlibValueError, match="negative second coefficient: "):
        _double_mult(1, ec.GJ, -1, ec.GJ, ec)


def test_jacobian_coordinates() -> None:
    for ec in SMALL_CURVES + (secp256k1,):
        Q = ec.aff_from_jac(_mult(7, ec.GJ, ec))
        QJ = jac_from_aff(Q)
        assert QJ == Q + (1,)
        # any non-zero Z represents the same affine point
        for z in (2, 3, ec.p - 1):
            scaled = Q[0] * z * z % ec.p, Q[1] * z * z * z % ec.p, z
            assert ec.aff_from_jac(scaled) == Q

        assert jac_from_aff(INF) == INFJ
        assert ec.aff_from_jac(INFJ) == INF
        assert ec.add_jac(QJ, INFJ) == QJ
        assert ec.add_jac(INFJ, QJ) == QJ
        assert ec.double_jac(INFJ) == INFJ
        # opposite points
        minus_QJ = Q[0], ec.p - Q[1], 1
        assert ec.add_jac(QJ, minus_QJ)[2] == 0
        # same point
        assert ec.aff_from_jac(ec.add_jac(QJ, QJ)) == ec.aff_from_jac(
            ec.double_jac(QJ)
        )


def test_invalid_curves() -> None:
    Curve(13, 0, 2, (1, 9), 19)

    with pytest.raises(TronlibValueError, match="p is not prime: "):
        Curve(15, 0, 2, (1, 9), 19)
    with pytest.raises(TronlibValueError, match="a not in 0..p-1: "):
        Curve(13, 13, 2, (1, 9), 19)
    with pytest.raises(TronlibValueError, match="b not in 0..p-1: "):
        Curve(13, 0, -2, (1, 9), 19)
    with pytest.raises(TronlibValueError, match="zero discriminant"):
        Curve(11, 7, 7, (1, 9), 19)
    with pytest.raises(TronlibValueError, match="generator must be a tuple"):
        Curve(13, 0, 2, (1, 9, 1), 19)  # type: ignore
    with pytest.raises(TronlibValueError, match="INF point cannot be a generator"):
        Curve(13, 0, 2, INF, 19)
    with pytest.raises(TronlibValueError, match="generator is not on the curve"):
        Curve(13, 0, 2, (2, 9), 19)
    with pytest.raises(TronlibValueError, match="n is not prime: "):
        Curve(13, 0, 2, (1, 9), 20)
    with pytest.raises(TronlibValueError, match="n is not the group order: "):
        Curve(13, 0, 2, (1, 9), 17)


def test_points() -> None:
    ec = secp256k1
    Q = ec.aff_from_jac(_mult(11, ec.GJ, ec))
    assert ec.y(Q[0]) in (Q[1], ec.p - Q[1])
    assert ec.is_on_curve(Q)
    assert ec.is_on_curve(INF)
    ec.require_on_curve(Q)

    assert not ec.is_on_curve((Q[0], Q[1] + 1))
    with pytest.raises(TronlibValueError, match="point not on curve"):
        ec.require_on_curve((Q[0], Q[1] + 1))

    with pytest.raises(TronlibValueError, match="point must be a tuple"):
        ec.is_on_curve(ec.GJ)  # type: ignore
    with pytest.raises(TronlibValueError, match="x-coordinate not in 0..p-1: "):
        ec.is_on_curve((ec.p, 1))
    with pytest.raises(TronlibValueError, match="y-coordinate not in 1..p-1: "):
        ec.is_on_curve((Q[0], ec.p))

    with pytest.raises(TronlibValueError, match="x-coordinate not in 0..p-1: "):
        ec.y(ec.p)
    # INF x-coordinate is chosen not to be a valid one
    with pytest.raises(TronlibValueError, match="invalid x-coordinate: "):
        ec.y(INF[0])


def test_repr_eq_hash() -> None:
    assert repr(ec13_11) == "Curve(13, 7, 6, (1, 1), 11)"
    assert ec13_11 == Curve(13, 7, 6, (1, 1), 11)
    assert hash(ec13_11) == hash(Curve(13, 7, 6, (1, 1), 11))
    assert ec13_11 != ec19_23

    ec = secp256k1
    unnamed = Curve(ec.p, ec.a, ec.b, ec.G, ec.n)
    assert repr(unnamed).startswith("Curve(1157920892")
    assert unnamed == ec
    assert hash(unnamed) == hash(ec)
    assert ec.__eq__("secp256k1") is NotImplemented
