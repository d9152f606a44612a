#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `tronlib.ecc.number_theory` module."

import pytest

from tronlib.ecc.curve import secp256k1
from tronlib.ecc.number_theory import _tonelli, legendre_symbol, mod_inv, mod_sqrt
from tronlib.exceptions import TronlibValueError

# odd primes with p = 3 (mod 4) and p = 1 (mod 4), the latter
# with a large power of two in p - 1 to exercise Tonelli-Shanks
PRIMES = (3, 7, 11, 13, 17, 19, 23, 29, 41, 97, 257)


def test_mod_inv() -> None:
    for m in (2, 9, 13, 22, 255, secp256k1.p, secp256k1.n):
        for a in (1, 3, 5, 7, 12, m - 1, m + 1, 3 * m + 5):
            try:
                inv = mod_inv(a, m)
            except TronlibValueError:
                # only non-coprime values have no inverse
                assert any(a % d == 0 and m % d == 0 for d in range(2, 14))
                continue
            assert 0 < inv < m
            assert a * inv % m == 1 % m

    with pytest.raises(TronlibValueError, match="No inverse for 0x0 mod 0xd"):
        mod_inv(0, 13)
    with pytest.raises(TronlibValueError, match="No inverse for 0x6 mod 0x16"):
        mod_inv(6, 22)
    # negative values are reduced first
    assert mod_inv(-1, 13) == 12


def test_legendre_symbol() -> None:
    for p in PRIMES:
        squares = {x * x % p for x in range(1, p)}
        assert legendre_symbol(0, p) == 0
        for a in range(1, p):
            assert legendre_symbol(a, p) == (1 if a in squares else -1)


def test_mod_sqrt() -> None:
    for p in PRIMES:
        squares = {x * x % p for x in range(p)}
        for a in range(p):
            if a in squares:
                root = mod_sqrt(a, p)
                assert root * root % p == a
                assert mod_sqrt(a + p, p) in (root, p - root)
            else:
                with pytest.raises(TronlibValueError, match="no root for "):
                    mod_sqrt(a, p)


def test_tonelli() -> None:
    for p in (13, 17, 41, 97, 257, 65537):
        for x in range(1, 64):
            a = x * x % p
            root = _tonelli(a, p)
            assert root in (x % p, p - x % p)
    assert _tonelli(0, 17) == 0

    with pytest.raises(TronlibValueError, match="no root for 0x3 mod 0x11"):
        _tonelli(3, 17)


def test_secp256k1_field() -> None:
    p = secp256k1.p
    assert p % 4 == 3
    x = secp256k1.G[0]
    y2 = (x * x * x + 7) % p
    assert mod_sqrt(y2, p) in (secp256k1.G[1], p - secp256k1.G[1])
