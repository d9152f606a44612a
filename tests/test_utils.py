#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `tronlib.utils` module."

# Third party imports
import pytest

# Library imports
from tronlib.exceptions import FormatError
from tronlib.utils import bytes_from_hex, bytes_from_octets, int_from_bits


def test_bytes_from_octets() -> None:
    assert bytes_from_octets(b"\x41\x00") == b"\x41\x00"
    assert bytes_from_octets("4100") == b"\x41\x00"
    assert bytes_from_octets("41 00", 2) == b"\x41\x00"
    assert bytes_from_octets("4100", (2, 21)) == b"\x41\x00"

    with pytest.raises(FormatError, match="invalid size: "):
        bytes_from_octets("4100", 21)
    with pytest.raises(FormatError, match="invalid size: "):
        bytes_from_octets("4100", (20, 21))
    with pytest.raises(FormatError, match="invalid hex-string: "):
        bytes_from_octets("41zz")


def test_bytes_from_hex() -> None:
    exp = bytes.fromhex("417e5f4552091a69125d5dfcb7b8c2659029395bdf")
    for hex_str in (
        "417e5f4552091a69125d5dfcb7b8c2659029395bdf",
        "0x417e5f4552091a69125d5dfcb7b8c2659029395bdf",
        "0X417E5F4552091A69125D5DFCB7B8C2659029395BDF",
        " 417e5f4552091a69125d5dfcb7b8c2659029395bdf\n",
    ):
        assert bytes_from_hex(hex_str) == exp
        assert bytes_from_hex(hex_str, 21) == exp

    with pytest.raises(FormatError, match="odd-length hex-string: "):
        bytes_from_hex("0x417")
    with pytest.raises(FormatError, match="invalid hex-string: "):
        bytes_from_hex("0xg1")
    with pytest.raises(FormatError, match="invalid size: "):
        bytes_from_hex("0x41", 21)
    assert bytes_from_hex("0x") == b""


def test_int_from_bits() -> None:
    octets = b"\xff" * 32
    assert int_from_bits(octets, 256) == 2**256 - 1
    assert int_from_bits(octets, 255) == 2**255 - 1
    # shorter input is not shifted
    assert int_from_bits(b"\x01", 256) == 1
