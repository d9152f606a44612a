#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `tronlib.ecc.rfc6979_nonce` module."

import hashlib
import secrets

import pytest

from tronlib.ecc.curve import secp256k1
from tronlib.ecc.rfc6979_nonce import challenge_, rfc6979_nonce_
from tronlib.exceptions import FormatError, InvalidKeyError


def test_rfc6979() -> None:
    # source: https://bitcointalk.org/index.php?topic=285142.40
    msg = "Satoshi Nakamoto".encode()
    msg_hash = hashlib.sha256(msg).digest()
    x = 0x1
    k = 0x8F8A276C19F4149656B280621E358CCE24F5F52542772691EE69063B74F15D15
    assert k == rfc6979_nonce_(msg_hash, x)
    assert k == rfc6979_nonce_(msg_hash.hex(), x)


def test_rfc6979_example() -> None:
    class _helper:  # pylint: disable=too-few-public-methods
        def __init__(self, n: int) -> None:
            self.n = n
            self.nlen = n.bit_length()
            self.n_size = (self.nlen + 7) // 8

    # source: https://tools.ietf.org/html/rfc6979 section A.1
    fake_ec = _helper(0x4000000000000000000020108A2E0CC0D99F8A5EF)
    x = 0x09A4D6792295A7F730FC3F2B49CBC0F62E862272F
    msg = "sample".encode()
    msg_hash = hashlib.sha256(msg).digest()
    k = 0x23AF4074C90A02B3FE61D286D5C87F425E6BDD81B
    assert k == rfc6979_nonce_(msg_hash, x, fake_ec)  # type: ignore


def test_distinct_nonces() -> None:
    q = 1 + secrets.randbelow(secp256k1.n - 1)
    nonces = set()
    for i in range(32):
        msg_hash = hashlib.sha256(i.to_bytes(4, byteorder="big")).digest()
        nonce = rfc6979_nonce_(msg_hash, q)
        assert 0 < nonce < secp256k1.n
        # deterministic
        assert nonce == rfc6979_nonce_(msg_hash, q)
        nonces.add(nonce)
    assert len(nonces) == 32

    # distinct keys, same digest
    msg_hash = b"\x01" * 32
    assert rfc6979_nonce_(msg_hash, 1) != rfc6979_nonce_(msg_hash, 2)


def test_challenge() -> None:
    msg_hash = b"\xff" * 32
    assert challenge_(msg_hash) == (2**256 - 1) % secp256k1.n
    assert challenge_(b"\x00" * 32) == 0

    with pytest.raises(FormatError, match="invalid size: "):
        challenge_(b"\x01" * 31)


def test_invalid_keys() -> None:
    msg_hash = b"\x01" * 32
    for q in (0, secp256k1.n):
        with pytest.raises(InvalidKeyError):
            rfc6979_nonce_(msg_hash, q)
