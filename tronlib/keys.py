#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Functions for private/public key conversions."

import secrets
from typing import Optional, Tuple, Union

from tronlib.alias import Point
from tronlib.ecc import libsecp256k1
from tronlib.ecc.curve import Curve, _mult, secp256k1
from tronlib.ecc.sec_point import bytes_from_point
from tronlib.exceptions import InvalidKeyError, TronlibTypeError
from tronlib.utils import bytes_from_hex

# private key inputs:
# integer as int,
# 32 raw bytes (big endian),
# or hex-string (with or without 0x prefix)
PrvKey = Union[int, bytes, str]


def int_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> int:
    """Return a verified-as-valid private key integer.

    Malformed hex-strings raise FormatError, unsupported types
    raise TronlibTypeError; any other invalid key raises InvalidKeyError.
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        if isinstance(prv_key, str):
            prv_key = bytes_from_hex(prv_key)
        if not isinstance(prv_key, bytes):
            raise TronlibTypeError(f"not a private key: {prv_key!r}")
        if len(prv_key) != ec.n_size:
            err_msg = f"invalid private key size: {len(prv_key)} bytes"
            err_msg += f" instead of {ec.n_size}"
            raise InvalidKeyError(err_msg)
        q = int.from_bytes(prv_key, byteorder="big", signed=False)

    if not 0 < q < ec.n:
        raise InvalidKeyError(f"private key not in 1..n-1: {hex(q).upper()}")

    return q


def bytes_from_prv_key(prv_key: PrvKey, ec: Curve = secp256k1) -> bytes:
    "Return the verified-as-valid private key as n_size big endian bytes."
    q = int_from_prv_key(prv_key, ec)
    return q.to_bytes(ec.n_size, byteorder="big", signed=False)


def gen_keys(
    prv_key: Optional[PrvKey] = None, ec: Curve = secp256k1
) -> Tuple[int, Point]:
    """Return a private/public (int, Point) key-pair.

    If no private key is provided, a new one is generated
    using the operating system CSPRNG.
    """
    if prv_key is None:
        # q in the range [1, ec.n-1]
        q = 1 + secrets.randbelow(ec.n - 1)
    else:
        q = int_from_prv_key(prv_key, ec)

    QJ = _mult(q, ec.GJ, ec)
    Q = ec.aff_from_jac(QJ)
    return q, Q


def pub_key_from_prv_key(
    prv_key: PrvKey, compressed: bool = False, ec: Curve = secp256k1
) -> bytes:
    """Return the SEC public key of the private key.

    The default is the 65 bytes uncompressed form (0x04 + X + Y)
    used for TRON account derivation.
    libsecp256k1 is used, when available, for secp256k1 keys.
    """
    if ec == secp256k1 and libsecp256k1.is_available():
        q = int_from_prv_key(prv_key, ec)
        return libsecp256k1.pubkey_from_prvkey(q, compressed)

    _, Q = gen_keys(prv_key, ec)
    return bytes_from_point(Q, ec, compressed)
