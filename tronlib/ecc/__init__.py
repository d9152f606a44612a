#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module tronlib.ecc."""

from tronlib.ecc.curve import CURVES, Curve, secp256k1
from tronlib.ecc.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "CURVES",
    "Curve",
    "secp256k1",
    "bytes_from_point",
    "point_from_octets",
]
