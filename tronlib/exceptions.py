#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by tronlib from those raised by other codebase.

All value errors derive from TronlibValueError and, in turn,
from the regular ValueError: users not interested in the
specific failure are better off just dealing with ValueError.
"""


class TronlibValueError(ValueError):
    pass


class TronlibTypeError(TypeError):
    pass


class TronlibRuntimeError(RuntimeError):
    pass


class FormatError(TronlibValueError):
    "Malformed base58 or hex text, or wrong byte length."


class ChecksumError(TronlibValueError):
    "Base58Check checksum mismatch: a typo or tampered address."


class AddressError(TronlibValueError):
    "Invalid address argument (bad encoding, checksum, size, or prefix)."


class InvalidKeyError(TronlibValueError):
    "Private key not in 1..n-1."


class InvalidDigestError(TronlibValueError):
    "Signing message that is not a 32 bytes digest."


class ThresholdError(TronlibValueError):
    "Multisig threshold not in 1..len(owners)."


class NodeError(TronlibRuntimeError):
    "Failure reported by the remote node."
