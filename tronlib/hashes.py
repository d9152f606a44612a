#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from Crypto.Hash import keccak

from tronlib.alias import Octets
from tronlib.utils import bytes_from_octets


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash256(octets: Octets) -> bytes:
    """Return the SHA256(SHA256(*)) of the input octet sequence."""
    return sha256(sha256(octets))


def keccak256(octets: Octets) -> bytes:
    """Return the KECCAK256(*) of the input octet sequence.

    This is the original Keccak submission (as used by the EVM),
    not the NIST standardized SHA3-256: the padding differs,
    so hashlib.sha3_256 would give a different digest.
    """
    octets = bytes_from_octets(octets)
    return keccak.new(data=octets, digest_bits=256).digest()
