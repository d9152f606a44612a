#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Byte and integer conversions shared by the codecs and the signer.

Keys, addresses, digests and signatures are accepted either as bytes
or as hex-strings (see tronlib.alias.Octets).
"""

from typing import Iterable, Optional, Union

from tronlib.alias import Octets
from tronlib.exceptions import FormatError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string or bytes.

    Bytes go untouched; out_size, if given, is the required size
    or the collection of the allowed ones.
    """

    if isinstance(octets, str):
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise FormatError(f"invalid hex-string: {octets!r}") from e

    if out_size is None:
        return octets
    allowed = (out_size,) if isinstance(out_size, int) else tuple(out_size)
    if len(octets) not in allowed:
        err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
        raise FormatError(err_msg)
    return octets


def bytes_from_hex(hex_str: str, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string with or without '0x' prefix.

    Leading/trailing blanks are stripped: this is meant for
    user supplied keys, addresses, and transaction ids.
    """

    hex_str = hex_str.strip()
    if hex_str[:2] in ("0x", "0X"):
        hex_str = hex_str[2:]
    if len(hex_str) % 2:
        raise FormatError(f"odd-length hex-string: {len(hex_str)} digits")
    return bytes_from_octets(hex_str, out_size)


def int_from_bits(octets: Octets, nlen: int) -> int:
    """Return the integer of the leftmost nlen bits of octets.

    See SEC 1 v.2 section 4.1.3 (5) and RFC6979 section 2.3.2:
    no reduction mod n is performed here.
    """

    octets = bytes_from_octets(octets)
    excess_bits = max(len(octets) * 8 - nlen, 0)
    return int.from_bytes(octets, byteorder="big", signed=False) >> excess_bits
