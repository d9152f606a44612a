#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

With the optional 'secp256k1' extra installed (coincurve),
public key derivation and signing run in constant time in
libsecp256k1; the pure python code is used otherwise.
Both produce the very same bytes.
"""

import contextlib

from tronlib.exceptions import TronlibRuntimeError

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from coincurve import PrivateKey

    LIBSECP256K1_AVAILABLE = True

_SECRET_SIZE = 32


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def pubkey_from_prvkey(q: int, compressed: bool = True) -> bytes:
    "Return the SEC public key of a valid private key integer."

    secret = q.to_bytes(_SECRET_SIZE, byteorder="big", signed=False)
    return PrivateKey(secret).public_key.format(compressed=compressed)


def ecdsa_sign_recoverable_(digest: bytes, q: int) -> bytes:
    """Return the 65 bytes r‖s‖v signature of a 32 bytes digest.

    The digest is not hashed again; libsecp256k1 uses
    the RFC6979 nonce and low-s normalization.
    """

    secret = q.to_bytes(_SECRET_SIZE, byteorder="big", signed=False)
    sig = PrivateKey(secret).sign_recoverable(digest, hasher=None)
    if len(sig) != 65:
        raise TronlibRuntimeError("secp256k1_ecdsa_sign_recoverable failed")
    return sig

