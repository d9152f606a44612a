#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic ECDSA nonce (RFC6979 section 3.2) with HMAC-SHA256.

https://tools.ietf.org/html/rfc6979

Reusing a nonce with the same private key on two distinct digests
reveals the private key. The RFC6979 nonce is an HMAC-DRBG output
seeded with the private key and the digest: distinct digests get
distinct nonces and no entropy is needed at signing time.

It is also the default nonce of libsecp256k1, so that TRON signatures
are reproducible byte for byte across wallets.
"""

import hmac
from hashlib import sha256

from tronlib.alias import Octets
from tronlib.ecc.curve import Curve, secp256k1
from tronlib.keys import PrvKey, int_from_prv_key
from tronlib.utils import bytes_from_octets, int_from_bits

DIGEST_SIZE = 32


def _hmac_sha256(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, sha256).digest()


def challenge_(digest: Octets, ec: Curve = secp256k1) -> int:
    "Return the 32 bytes digest as an integer mod n (SEC 1 v.2 4.1.3.5)."

    digest = bytes_from_octets(digest, DIGEST_SIZE)
    return int_from_bits(digest, ec.nlen) % ec.n


def _rfc6979_nonce_(c: int, q: int, ec: Curve = secp256k1) -> int:
    # c is the challenge in 0..n-1, q the private key in 1..n-1

    seed = q.to_bytes(ec.n_size, byteorder="big", signed=False)
    seed += c.to_bytes(ec.n_size, byteorder="big", signed=False)

    K = b"\x00" * DIGEST_SIZE
    V = b"\x01" * DIGEST_SIZE
    for separator in (b"\x00", b"\x01"):
        K = _hmac_sha256(K, V + separator + seed)
        V = _hmac_sha256(K, V)

    while True:
        T = b""
        while len(T) < ec.n_size:
            V = _hmac_sha256(K, V)
            T += V
        # candidates out of range are discarded, not reduced mod n
        k = int_from_bits(T, ec.nlen)
        if 0 < k < ec.n:
            return k
        K = _hmac_sha256(K, V + b"\x00")
        V = _hmac_sha256(K, V)


def rfc6979_nonce_(digest: Octets, prv_key: PrvKey, ec: Curve = secp256k1) -> int:
    "Return the RFC6979 nonce for signing a 32 bytes digest."

    c = challenge_(digest, ec)
    q = int_from_prv_key(prv_key, ec)
    return _rfc6979_nonce_(c, q, ec)
