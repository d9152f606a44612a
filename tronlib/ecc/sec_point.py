#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC 1 v.2 (section 2.3.3 and 2.3.4) public key encoding.

TRON account ids are computed on the 65 bytes uncompressed form
(0x04 + X + Y); the 33 bytes compressed form (0x02/0x03 + X)
is accepted on input and decompressed.
"""

from tronlib.alias import Octets, Point
from tronlib.ecc.curve import Curve, secp256k1
from tronlib.exceptions import TronlibValueError
from tronlib.utils import bytes_from_octets


def bytes_from_point(Q: Point, ec: Curve = secp256k1, compressed: bool = True) -> bytes:
    "Return the SEC encoding of a curve point."

    ec.require_on_curve(Q)
    if Q[1] == 0:
        raise TronlibValueError("no bytes representation for infinity point")

    x_bytes = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    if compressed:
        return bytes([0x02 | Q[1] & 1]) + x_bytes
    y_bytes = Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)
    return b"\x04" + x_bytes + y_bytes


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    "Return the curve point of a compressed or uncompressed SEC public key."

    pub_key = bytes_from_octets(pub_key, (ec.p_size + 1, 2 * ec.p_size + 1))
    prefix, body = pub_key[0], pub_key[1:]
    x = int.from_bytes(body[: ec.p_size], byteorder="big", signed=False)

    if prefix in (0x02, 0x03) and len(body) == ec.p_size:
        try:
            y = ec.y(x)
        except TronlibValueError as e:
            raise TronlibValueError(f"invalid x-coordinate: {hex(x)}") from e
        # the prefix carries the parity of y
        return (x, y) if y & 1 == prefix & 1 else (x, ec.p - y)

    if prefix == 0x04 and len(body) == 2 * ec.p_size:
        Q = x, int.from_bytes(body[ec.p_size :], byteorder="big", signed=False)
        if Q[1] == 0:
            raise TronlibValueError("no bytes representation for infinity point")
        if not ec.is_on_curve(Q):
            raise TronlibValueError(f"point not on curve: {Q}")
        return Q

    err_msg = f"not a SEC public key: prefix {hex(prefix)}"
    err_msg += f" with {len(pub_key)} bytes"
    raise TronlibValueError(err_msg)
