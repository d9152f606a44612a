#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "41 7e5f4552091a69125d5dfcb7b8c2659029395bdf"
#
# use tronlib.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for private keys (32 bytes), binary addresses (21 bytes),
# transaction digests (32 bytes), uncompressed public keys (65 bytes),
# r‖s‖v recoverable signatures (65 bytes), etc.
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for 'ascii' strings like base58 addresses:
# "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"
#
# b58decode will take care of encoding them to bytes;
# leading/trailing blanks are not stripped by the codec:
# callers accepting user input should strip them
#     if isinstance(b58address, str):
#         b58address = b58address.strip()
String = Union[bytes, str]

# Elliptic curve point in affine coordinates.
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, int]

# Note that the infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is preferred
# because it is not a valid x-coordinate in secp256k1
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INF = (int, int, 0).
# It can be checked with 'INF[2] == 0'
INFJ = 7, 0, 0
