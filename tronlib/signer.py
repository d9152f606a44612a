#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Recoverable ECDSA signatures over TRON transaction ids.

A TRON transaction is signed by signing its txID, the 32 bytes
sha256 of the raw transaction, with no additional hashing.
The wire format is the 65 bytes

    r (32 bytes, big endian) | s (32 bytes, big endian) | v (1 byte)

where v is the recovery id in the 0..3 range of libsecp256k1
(no 27/28 shift as in Ethereum or Bitcoin message signing):

* bit 0 is the parity of the y-coordinate of the ephemeral point R
* bit 1 is set when the x-coordinate of R is not less than n,
  i.e. r = x_R - n (a very unlikely event for secp256k1)

The nonce is generated according to RFC6979 and s is normalized
to the lower half of the scalar range, exactly as libsecp256k1 does:
signatures are reproducible byte for byte across implementations.
When the optional libsecp256k1 bindings are installed
(see tronlib.ecc.libsecp256k1) secp256k1 signing is delegated to them.
"""

from dataclasses import InitVar, dataclass
from typing import Union

from tronlib.alias import JacPoint, Octets, Point
from tronlib.ecc import libsecp256k1
from tronlib.ecc.curve import Curve, _double_mult, _mult, secp256k1
from tronlib.ecc.number_theory import mod_inv
from tronlib.ecc.rfc6979_nonce import _rfc6979_nonce_, challenge_
from tronlib.ecc.sec_point import point_from_octets
from tronlib.exceptions import (
    InvalidDigestError,
    TronlibRuntimeError,
    TronlibValueError,
)
from tronlib.keys import PrvKey, int_from_prv_key
from tronlib.utils import bytes_from_hex, bytes_from_octets

DIGEST_SIZE = 32
SIG_SIZE = 65


@dataclass(frozen=True)
class Sig:
    """Recoverable ECDSA signature in the r‖s‖v TRON serialization."""

    # 32 bytes scalar, 0 < r < ec.n
    r: int
    # 32 bytes scalar, 0 < s < ec.n
    s: int
    # recovery id, 0 <= v <= 3
    v: int
    ec: Curve = secp256k1
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not 0 < self.r < self.ec.n:
            err_msg = "scalar r not in 1..n-1: "
            err_msg += hex(self.r)
            raise TronlibValueError(err_msg)
        if not 0 < self.s < self.ec.n:
            err_msg = "scalar s not in 1..n-1: "
            err_msg += hex(self.s)
            raise TronlibValueError(err_msg)
        # a larger value would not fit the recovery id semantic
        if not 0 <= self.v <= 3:
            raise TronlibValueError(f"invalid recovery id: {self.v} not in 0..3")

    def serialize(self, check_validity: bool = True) -> bytes:
        "Return the 65 bytes r‖s‖v serialization."

        if check_validity:
            self.assert_valid()

        out = self.r.to_bytes(self.ec.n_size, byteorder="big", signed=False)
        out += self.s.to_bytes(self.ec.n_size, byteorder="big", signed=False)
        return out + bytes([self.v])

    @classmethod
    def parse(cls, data: Octets, check_validity: bool = True) -> "Sig":
        "Return a Sig from its 65 bytes r‖s‖v serialization."

        data = bytes_from_octets(data, SIG_SIZE)
        r = int.from_bytes(data[:32], byteorder="big", signed=False)
        s = int.from_bytes(data[32:64], byteorder="big", signed=False)
        return cls(r, s, data[64], secp256k1, check_validity)

    def hex(self) -> str:
        "Return the 130 hex-digits (lowercase, no 0x) serialization."
        return self.serialize().hex()


def _digest_from_octets(digest: Octets) -> bytes:

    digest = bytes_from_octets(digest)
    if len(digest) != DIGEST_SIZE:
        err_msg = f"invalid digest size: {len(digest)} bytes"
        err_msg += f" instead of {DIGEST_SIZE}"
        raise InvalidDigestError(err_msg)
    return digest


def _sign_(c: int, q: int, nonce: int, ec: Curve) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible value of the challenge c (for low-cardinality curves).
    # It assume that c is in [0, n-1], while q and nonce are in [1, n-1]

    # Steps numbering follows SEC 1 v.2 section 4.1.3

    KJ = _mult(nonce, ec.GJ, ec)  # 1

    K = ec.aff_from_jac(KJ)
    r = K[0] % ec.n  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the private key
        raise TronlibRuntimeError("failed to sign: r = 0")

    s = mod_inv(nonce, ec.n) * (c + r * q) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise TronlibRuntimeError("failed to sign: s = 0")

    v = (K[1] & 1) | (2 if K[0] >= ec.n else 0)

    # low-s normalization negates R too
    if s > ec.n // 2:
        s = ec.n - s
        v ^= 1

    return Sig(r, s, v, ec)


def sign_(digest: Octets, prv_key: PrvKey, ec: Curve = secp256k1) -> Sig:
    """Sign a 32 bytes digest, returning a recoverable signature.

    The digest is signed as it is, without additional hashing.
    Invalid private keys raise InvalidKeyError, digests not
    exactly 32 bytes long raise InvalidDigestError.
    """

    q = int_from_prv_key(prv_key, ec)
    digest = _digest_from_octets(digest)

    if ec == secp256k1 and libsecp256k1.is_available():
        return Sig.parse(libsecp256k1.ecdsa_sign_recoverable_(digest, q))

    c = challenge_(digest, ec)
    nonce = _rfc6979_nonce_(c, q, ec)
    return _sign_(c, q, nonce, ec)


def sign(tx_id: str, prv_key: PrvKey) -> str:
    """Return the hex signature of a TRON transaction id.

    The transaction id is the hex txID returned by the node
    (with or without 0x prefix); the result is the 130 lowercase
    hex-digits r‖s‖v signature to be added to the transaction
    'signature' list.
    """

    digest = bytes_from_hex(tx_id)
    return sign_(digest, prv_key).hex()


def _recover_pub_key_(c: int, sig: Sig) -> JacPoint:

    ec = sig.ec
    x_R = sig.r + (sig.v >> 1) * ec.n
    if x_R >= ec.p:
        raise TronlibValueError(f"invalid recovery id: {sig.v}")
    y_R = ec.y(x_R)
    if y_R & 1 != sig.v & 1:
        y_R = ec.p - y_R
    RJ = x_R, y_R, 1

    # Q = r^-1 * (s*R - c*G)
    r_1 = mod_inv(sig.r, ec.n)
    r1s = r_1 * sig.s % ec.n
    r1e = -r_1 * c % ec.n
    QJ = _double_mult(r1s, RJ, r1e, ec.GJ, ec)
    if QJ[2] == 0:
        raise TronlibRuntimeError("invalid (INF) key")
    return QJ


def recover_pub_key_(digest: Octets, sig: Union[Sig, Octets]) -> Point:
    "Return the public key Point recovered from the signature of a digest."

    if not isinstance(sig, Sig):
        sig = Sig.parse(sig)
    digest = _digest_from_octets(digest)
    c = challenge_(digest, sig.ec)
    return sig.ec.aff_from_jac(_recover_pub_key_(c, sig))


def assert_as_valid_(
    digest: Octets, pub_key: Union[Point, Octets], sig: Union[Sig, Octets]
) -> None:
    # It raises Errors, while verify should always return True or False

    if isinstance(sig, Sig):
        sig.assert_valid()
    else:
        sig = Sig.parse(sig)
    ec = sig.ec

    if sig.s > ec.n // 2:
        raise TronlibValueError("not a low s")

    if isinstance(pub_key, tuple):
        ec.require_on_curve(pub_key)
        Q = pub_key
    else:
        Q = point_from_octets(pub_key, ec)

    digest = _digest_from_octets(digest)
    c = challenge_(digest, ec)

    w = mod_inv(sig.s, ec.n)
    u = c * w % ec.n
    v = sig.r * w % ec.n
    KJ = _double_mult(v, (Q[0], Q[1], 1), u, ec.GJ, ec)
    if KJ[2] == 0:
        raise TronlibRuntimeError("invalid (INF) key")
    if sig.r != ec.aff_from_jac(KJ)[0] % ec.n:
        raise TronlibRuntimeError("signature verification failed")

    # the recovery id must also point to the same key
    if ec.aff_from_jac(_recover_pub_key_(c, sig)) != Q:
        raise TronlibRuntimeError("recovery id does not match the public key")


def verify_(
    digest: Octets, pub_key: Union[Point, Octets], sig: Union[Sig, Octets]
) -> bool:
    "Verify a recoverable signature of a 32 bytes digest."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(digest, pub_key, sig)
    except Exception:  # pylint: disable=broad-except
        return False

    return True
