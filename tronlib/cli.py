#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line interface.

    tronlib generate-key [--json]
    tronlib address --private-key HEX
    tronlib to-base58 --hex HEX
    tronlib to-hex --address B58
    tronlib sign --tx-id HEX --private-key HEX
    tronlib deploy (--network NAME | --rpc-url URL) --private-key HEX
        --usdt B58 --owners A,B,C --threshold N
        [--contract-json PATH] [--fee-limit SUN] [--json]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from tronlib import __version__
from tronlib.address import (
    b58address_from_hex,
    b58address_from_prv_key,
    hex_from_b58address,
)
from tronlib.contract import DEFAULT_ARTIFACT, bytecode_from_artifact
from tronlib.deploy import DEFAULT_FEE_LIMIT, deploy_multisig
from tronlib.exceptions import TronlibRuntimeError, TronlibValueError
from tronlib.keys import bytes_from_prv_key, gen_keys
from tronlib.network import NETWORKS, network_from_api_url
from tronlib.node import Node
from tronlib.signer import sign

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _generate_key(args: argparse.Namespace) -> None:

    q, _ = gen_keys()
    prv_key = bytes_from_prv_key(q).hex()
    address = b58address_from_prv_key(q)
    if args.json:
        print(json.dumps({"privateKey": prv_key, "address": address}, indent=2))
    else:
        print(f"Private Key: {prv_key}")
        print(f"Address:     {address}")


def _address(args: argparse.Namespace) -> None:
    print(f"TRON Address: {b58address_from_prv_key(args.private_key)}")


def _to_base58(args: argparse.Namespace) -> None:
    print(f"TRON Address: {b58address_from_hex(args.hex)}")


def _to_hex(args: argparse.Namespace) -> None:
    print(f"Hex: {hex_from_b58address(args.address.strip())}")


def _sign(args: argparse.Namespace) -> None:
    print(sign(args.tx_id, args.private_key))


def _deploy(args: argparse.Namespace) -> None:

    if args.rpc_url is not None:
        api_url = args.rpc_url
        network_name = network_from_api_url(api_url)
    else:
        network_name = args.network
        api_url = NETWORKS[network_name].api_url

    owners = [owner.strip() for owner in args.owners.split(",")]
    bytecode = bytecode_from_artifact(args.contract_json)

    with Node(api_url) as node:
        result = deploy_multisig(
            node,
            args.private_key,
            args.usdt.strip(),
            owners,
            args.threshold,
            bytecode,
            args.fee_limit,
        )

    if args.json:
        print(result.to_json(indent=2))
        return

    print(f"Deployer:    {result.deployer}")
    print(f"Transaction: {result.tx_id}")
    print(f"Contract:    {result.contract_address or '(check the explorer)'}")
    if network_name is not None:
        print(f"Explorer:    {NETWORKS[network_name].tx_url(result.tx_id)}")


def _parser() -> argparse.ArgumentParser:

    parser = argparse.ArgumentParser(
        prog="tronlib",
        description="TRON keys, addresses, signatures, and multisig deployment",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    cmd = subparsers.add_parser("generate-key", help="generate a new key pair")
    cmd.add_argument("--json", action="store_true", help="json output")
    cmd.set_defaults(func=_generate_key)

    cmd = subparsers.add_parser("address", help="address of a private key")
    cmd.add_argument("--private-key", required=True, help="hex private key")
    cmd.set_defaults(func=_address)

    cmd = subparsers.add_parser("to-base58", help="hex address to base58")
    cmd.add_argument("--hex", required=True, help="41... hex address")
    cmd.set_defaults(func=_to_base58)

    cmd = subparsers.add_parser("to-hex", help="base58 address to hex")
    cmd.add_argument("--address", required=True, help="T... base58 address")
    cmd.set_defaults(func=_to_hex)

    cmd = subparsers.add_parser("sign", help="sign a transaction id")
    cmd.add_argument("--tx-id", required=True, help="hex transaction id")
    cmd.add_argument("--private-key", required=True, help="hex private key")
    cmd.set_defaults(func=_sign)

    cmd = subparsers.add_parser("deploy", help="deploy the USDT multisig contract")
    target = cmd.add_mutually_exclusive_group()
    target.add_argument(
        "--network", choices=sorted(NETWORKS), default="nile", help="TRON network"
    )
    target.add_argument("--rpc-url", default=None, help="full node HTTP API url")
    cmd.add_argument("--private-key", required=True, help="hex private key")
    cmd.add_argument("--usdt", required=True, help="USDT token base58 address")
    cmd.add_argument("--owners", required=True, help="comma separated owners")
    cmd.add_argument("--threshold", type=int, required=True, help="approvals")
    cmd.add_argument(
        "--contract-json", default=DEFAULT_ARTIFACT, help="forge build artifact"
    )
    cmd.add_argument(
        "--fee-limit", type=int, default=DEFAULT_FEE_LIMIT, help="fee limit in sun"
    )
    cmd.add_argument("--json", action="store_true", help="json output")
    cmd.set_defaults(func=_deploy)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    "Command line entry point, returning the exit status."

    args = _parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        args.func(args)
    except (TronlibValueError, TronlibRuntimeError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
