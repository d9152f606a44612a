#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58Check encoding and decoding functions.

TRON represents its 21 bytes binary addresses (0x41 prefix + 20 bytes
account id) as 34 characters 'T...' Base58Check strings.

Base58 is the Bitcoin alphabet: digits and letters without
0 (zero), O (capital o), I (capital i), and l (lower case L),
so that addresses can be read aloud and copied by hand.
Each leading zero byte is written as a leading '1'.

Base58Check appends the first four bytes of hash256(payload) before
encoding; decoding verifies them, so that any externally supplied
address must go through b58decode before being trusted.

As in the python3 base64 module, encoding returns ASCII bytes, while
decoding accepts ASCII bytes or str.
"""

from typing import Optional

from tronlib.alias import Octets, String
from tronlib.exceptions import ChecksumError, FormatError
from tronlib.hashes import hash256
from tronlib.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_DIGIT = {char: i for i, char in enumerate(_ALPHABET)}
_CHECKSUM_SIZE = 4


def _b58encode(v: bytes) -> bytes:
    "Return the plain Base58 encoding (no checksum)."

    zeros = len(v) - len(v.lstrip(b"\x00"))
    i = int.from_bytes(v, byteorder="big", signed=False)
    digits = bytearray()
    while i:
        i, digit = divmod(i, 58)
        digits.append(_ALPHABET[digit])
    digits.extend(_ALPHABET[:1] * zeros)
    digits.reverse()
    return bytes(digits)


def _b58decode(v: bytes) -> bytes:
    "Return the bytes of a plain Base58 encoding (no checksum)."

    i = 0
    for char in v:
        if char not in _DIGIT:
            raise FormatError(f"invalid Base58 character: {chr(char)!r}")
        i = i * 58 + _DIGIT[char]
    zeros = len(v) - len(v.lstrip(_ALPHABET[:1]))
    return b"\x00" * zeros + i.to_bytes((i.bit_length() + 7) // 8, byteorder="big")


def b58encode(v: Octets, in_size: Optional[int] = None) -> bytes:
    "Encode a bytes-like object (or hex-string) using Base58Check."

    v = bytes_from_octets(v, in_size)
    return _b58encode(v + hash256(v)[:_CHECKSUM_SIZE])


def b58decode(v: String, out_size: Optional[int] = None) -> bytes:
    """Decode a Base58Check encoded bytes-like object or ASCII string.

    Blanks are not stripped.
    Optionally, it also ensures required output size.
    """

    if isinstance(v, str):
        try:
            v = v.encode("ascii")
        except UnicodeEncodeError as e:
            raise FormatError(f"non-ASCII Base58 string: {v!r}") from e

    data = _b58decode(v)
    if len(data) < _CHECKSUM_SIZE:
        err_msg = f"decoded size too short for a checksum: {len(data)} bytes"
        raise FormatError(err_msg)

    payload, checksum = data[:-_CHECKSUM_SIZE], data[-_CHECKSUM_SIZE:]
    expected = hash256(payload)[:_CHECKSUM_SIZE]
    if checksum != expected:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{expected.hex()}"
        raise ChecksumError(err_msg)

    if out_size is not None and len(payload) != out_size:
        err_msg = "valid checksum, invalid decoded size: "
        err_msg += f"{len(payload)} bytes instead of {out_size}"
        raise FormatError(err_msg)
    return payload
