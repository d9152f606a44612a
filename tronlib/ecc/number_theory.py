#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular inverse and modular square root over prime fields.

The square root is what decompresses SEC points and recovers the
ephemeral point R of a signature from its x-coordinate.
"""

from tronlib.exceptions import TronlibValueError


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise TronlibValueError(f"No inverse for {hex(a % m)} mod {hex(m)}") from e


def legendre_symbol(a: int, p: int) -> int:
    "Return 1 if a is a non-zero square mod p, -1 if it is not, 0 if p | a."

    ls = pow(a, (p - 1) // 2, p)
    return -1 if ls == p - 1 else ls


def mod_sqrt(a: int, p: int) -> int:
    """Return a square root of a (mod p), p being an odd prime.

    The other root is p minus the returned one.
    """

    a %= p
    if p % 4 == 3:
        # secp256k1 case: a single exponentiation
        root = pow(a, (p + 1) // 4, p)
    else:
        root = _tonelli(a, p)

    if root * root % p != a:
        raise TronlibValueError(f"no root for {hex(a)} mod {hex(p)}")
    return root


def _tonelli(a: int, p: int) -> int:
    # Tonelli-Shanks, for the p = 1 (mod 4) fields of small test curves

    if a == 0:
        return 0
    if legendre_symbol(a, p) != 1:
        raise TronlibValueError(f"no root for {hex(a)} mod {hex(p)}")

    # p - 1 = odd * 2^e
    odd, e = p - 1, 0
    while odd % 2 == 0:
        odd //= 2
        e += 1

    non_residue = next(z for z in range(2, p) if legendre_symbol(z, p) == -1)
    g = pow(non_residue, odd, p)
    root = pow(a, (odd + 1) // 2, p)
    fudge = pow(a, odd, p)
    while fudge != 1:
        # smallest m such that fudge^(2^m) = 1
        m, t = 0, fudge
        while t != 1:
            t = t * t % p
            m += 1
        b = pow(g, 1 << (e - m - 1), p)
        root = root * b % p
        g = b * b % p
        fudge = fudge * g % p
        e = m
    return root
