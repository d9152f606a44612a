#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""TRON account address functions.

A TRON account is identified by the last 20 bytes of the Keccak-256
hash of the uncompressed public key (without its 0x04 SEC prefix),
the same account id used by Ethereum.
The 21 bytes binary address prepends the 0x41 network-version byte;
its Base58Check encoding is the 34 characters 'T...' string,
while the node HTTP API uses the 42 hex-digits '41...' form.
"""

from tronlib.alias import Octets, String
from tronlib.base58 import b58decode, b58encode
from tronlib.ecc.curve import secp256k1
from tronlib.ecc.sec_point import bytes_from_point, point_from_octets
from tronlib.exceptions import AddressError
from tronlib.hashes import keccak256
from tronlib.keys import PrvKey, pub_key_from_prv_key
from tronlib.network import ADDRESS_PREFIX
from tronlib.utils import bytes_from_hex

ACCOUNT_ID_SIZE = 20
ADDRESS_SIZE = len(ADDRESS_PREFIX) + ACCOUNT_ID_SIZE


def account_id_from_pub_key(pub_key: Octets) -> bytes:
    """Return the 20 bytes account id of a SEC public key.

    Compressed keys are accepted too: the account id is always
    computed on the uncompressed form.
    """

    Q = point_from_octets(pub_key, secp256k1)
    # drop the 0x04 prefix
    uncompressed = bytes_from_point(Q, secp256k1, compressed=False)[1:]
    return keccak256(uncompressed)[-ACCOUNT_ID_SIZE:]


def address_from_pub_key(pub_key: Octets) -> bytes:
    "Return the 21 bytes binary address of a SEC public key."
    return ADDRESS_PREFIX + account_id_from_pub_key(pub_key)


def address_from_prv_key(prv_key: PrvKey) -> bytes:
    """Return the 21 bytes binary address of a private key.

    Invalid private keys raise InvalidKeyError.
    """
    pub_key = pub_key_from_prv_key(prv_key, compressed=False)
    return address_from_pub_key(pub_key)


def _check_address(address: bytes) -> bytes:

    if len(address) != ADDRESS_SIZE:
        err_msg = f"invalid address size: {len(address)} bytes"
        err_msg += f" instead of {ADDRESS_SIZE}"
        raise AddressError(err_msg)
    if address[:1] != ADDRESS_PREFIX:
        err_msg = f"invalid address prefix: 0x{address[:1].hex()}"
        err_msg += f" instead of 0x{ADDRESS_PREFIX.hex()}"
        raise AddressError(err_msg)
    return address


def b58address_from_address(address: Octets) -> str:
    "Return the Base58Check 'T...' string of a 21 bytes binary address."

    if isinstance(address, str):
        address = bytes_from_hex(address)
    address = _check_address(address)
    return b58encode(address).decode("ascii")


def address_from_b58address(b58address: String) -> bytes:
    """Return the 21 bytes binary address from a Base58Check string.

    Malformed strings raise FormatError, checksum mismatches
    raise ChecksumError; a valid Base58Check payload that is not
    a 21 bytes 0x41-prefixed address raises AddressError.
    """

    address = b58decode(b58address)
    return _check_address(address)


def b58address_from_prv_key(prv_key: PrvKey) -> str:
    "Return the Base58Check 'T...' address of a private key."
    return b58address_from_address(address_from_prv_key(prv_key))


def hex_from_b58address(b58address: String) -> str:
    "Return the '41...' hex address used by the node HTTP API."
    return address_from_b58address(b58address).hex()


def b58address_from_hex(hex_address: str) -> str:
    "Return the Base58Check address of a '41...' hex address (0x optional)."
    return b58address_from_address(bytes_from_hex(hex_address))
