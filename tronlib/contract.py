#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Multisig contract artifact and deploy request.

The contract bytecode comes from a forge build artifact, i.e. a json
file with a {"bytecode": {"object": "..."}} entry; the bytecode is
forwarded to the node as it is, without any interpretation.
The contract ABI sent along with the deploy request is shipped in
the _data folder.
"""

import json
from dataclasses import dataclass
from os import PathLike, path
from typing import Union

from dataclasses_json import DataClassJsonMixin

from tronlib.exceptions import FormatError

# forge default output location, relative to the tron-utils folder
DEFAULT_ARTIFACT = path.join("..", "out", "Multisig.sol", "USDTMultisig.json")

CONTRACT_NAME = "USDTMultisig"
# maximum energy the deployer provides for each contract call
ORIGIN_ENERGY_LIMIT = 10_000_000

_datadir = path.join(path.dirname(__file__), "_data")
with open(path.join(_datadir, "multisig_abi.json"), "r", encoding="ascii") as file_:
    # compact json text, as the node expects the abi as a string
    MULTISIG_ABI = json.dumps(json.load(file_), separators=(",", ":"))


def bytecode_from_artifact(filename: Union[str, "PathLike[str]"]) -> str:
    """Return the hex bytecode (no 0x) of a forge build artifact.

    A missing bytecode entry raises FormatError.
    """

    with open(filename, "r", encoding="utf-8") as file_:
        try:
            artifact = json.load(file_)
        except json.JSONDecodeError as e:
            raise FormatError(f"invalid contract json: {filename}") from e

    try:
        bytecode = artifact["bytecode"]["object"]
    except (KeyError, TypeError) as e:
        raise FormatError(f"no bytecode.object in contract json: {filename}") from e
    if not isinstance(bytecode, str):
        raise FormatError(f"invalid bytecode.object in contract json: {filename}")

    if bytecode[:2] in ("0x", "0X"):
        bytecode = bytecode[2:]
    return bytecode


@dataclass(frozen=True)
class DeployContractRequest(DataClassJsonMixin):
    """Body of the /wallet/deploycontract node API call.

    Addresses are in the '41...' hex form, amounts in sun.
    """

    owner_address: str
    fee_limit: int
    abi: str
    bytecode: str
    # ABI encoded constructor parameters
    parameter: str
    call_value: int = 0
    # the caller pays for all the energy consumed by the contract
    consume_user_resource_percent: int = 100
    origin_energy_limit: int = ORIGIN_ENERGY_LIMIT
    name: str = CONTRACT_NAME
