#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Deployment of the USDT multisig contract."

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from dataclasses_json import DataClassJsonMixin

from tronlib.abi import encode_constructor_params
from tronlib.address import (
    address_from_prv_key,
    b58address_from_address,
    b58address_from_hex,
)
from tronlib.alias import String
from tronlib.contract import MULTISIG_ABI, DeployContractRequest
from tronlib.exceptions import TronlibValueError
from tronlib.keys import PrvKey
from tronlib.node import Node
from tronlib.signer import sign

logger = logging.getLogger(__name__)

# 1000 TRX, in sun
DEFAULT_FEE_LIMIT = 1_000_000_000


@dataclass(frozen=True)
class DeployResult(DataClassJsonMixin):
    # base58 address of the deployer account
    deployer: str
    tx_id: str
    # base58 address, if returned by the node
    contract_address: Optional[str] = None


def deploy_multisig(
    node: Node,
    prv_key: PrvKey,
    token_address: String,
    owners: Sequence[String],
    threshold: int,
    bytecode: str,
    fee_limit: int = DEFAULT_FEE_LIMIT,
) -> DeployResult:
    """Deploy the multisig contract, returning the transaction id.

    Every local check (private key, addresses, threshold) is
    performed before contacting the node.
    """

    address = address_from_prv_key(prv_key)
    deployer = b58address_from_address(address)
    logger.info("deployer: %s", deployer)

    parameter = encode_constructor_params(token_address, owners, threshold)
    logger.info("owners: %s, threshold: %d", list(owners), threshold)
    logger.info("bytecode size: %d bytes", len(bytecode) // 2)

    if fee_limit <= 0:
        raise TronlibValueError(f"invalid fee limit: {fee_limit}")

    request = DeployContractRequest(
        owner_address=address.hex(),
        fee_limit=fee_limit,
        abi=MULTISIG_ABI,
        bytecode=bytecode,
        parameter=parameter,
    )

    logger.info("creating deployment transaction")
    transaction, response = node.deploy_contract(request)
    tx_id = transaction["txID"]
    logger.info("transaction id: %s", tx_id)

    signed_tx = dict(transaction)
    signed_tx["signature"] = [sign(tx_id, prv_key)]

    logger.info("broadcasting transaction")
    node.broadcast_transaction(signed_tx)

    contract_address = None
    hex_address = response.get("contract_address")
    if isinstance(hex_address, str):
        try:
            contract_address = b58address_from_hex(hex_address)
        except TronlibValueError:
            logger.warning("invalid contract address: %s", hex_address)
            contract_address = hex_address
    logger.info("contract address: %s", contract_address)

    return DeployResult(deployer, tx_id, contract_address)
