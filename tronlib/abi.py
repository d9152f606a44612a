#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""ABI encoding of the multisig contract constructor parameters.

This is not a general ABI encoder: it only lays out the
(address, address[], uint256) constructor signature

    constructor(address _usdt, address[] _owners, uint256 _threshold)

as 32 bytes words:

    token | offset | threshold | len(owners) | owner_0 | ... | owner_k-1

The head has one word per parameter; the dynamic owners array is
replaced in the head by the byte offset of its tail, right after the head.
Addresses are encoded as the 20 bytes account id (the 0x41 prefix dropped)
left-padded with zeros.
"""

from typing import Sequence

from tronlib.address import address_from_b58address
from tronlib.alias import String
from tronlib.exceptions import (
    AddressError,
    ChecksumError,
    FormatError,
    ThresholdError,
    TronlibValueError,
)

WORD_SIZE = 32

# token, offset of owners, threshold
_HEAD_WORDS = 3


def encode_uint256(i: int) -> bytes:
    "Return the 32 bytes big endian word of a uint256."

    if i < 0:
        raise TronlibValueError(f"negative uint256: {i}")
    if i.bit_length() > 8 * WORD_SIZE:
        raise TronlibValueError(f"too large for uint256: {hex(i)}")
    return i.to_bytes(WORD_SIZE, byteorder="big", signed=False)


def encode_address(b58address: String) -> bytes:
    """Return the 32 bytes word of a Base58Check address.

    Any failure in decoding the address raises AddressError.
    """

    try:
        address = address_from_b58address(b58address)
    except (FormatError, ChecksumError) as e:
        raise AddressError(f"invalid address {b58address!r}: {e}") from e
    # drop the network prefix, keep the 20 bytes account id
    return address[1:].rjust(WORD_SIZE, b"\x00")


def encode_constructor_params(
    token_address: String, owners: Sequence[String], threshold: int
) -> str:
    """Return the lowercase hex (no 0x) constructor parameters.

    The threshold must be in 1..len(owners): this is checked
    before decoding any address and raises ThresholdError.
    """

    if not 1 <= threshold <= len(owners):
        err_msg = f"invalid threshold: {threshold}, "
        err_msg += f"not in 1..{len(owners)} (number of owners)"
        raise ThresholdError(err_msg)

    token_word = encode_address(token_address)
    owner_words = [encode_address(owner) for owner in owners]

    offset = _HEAD_WORDS * WORD_SIZE
    head = token_word + encode_uint256(offset) + encode_uint256(threshold)
    tail = encode_uint256(len(owners)) + b"".join(owner_words)
    return (head + tail).hex()
