#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Minimal client of the TRON full node HTTP API.

Only the two calls needed to deploy a contract are supported:

* /wallet/deploycontract creates the unsigned deploy transaction
* /wallet/broadcasttransaction broadcasts the signed transaction

Failed calls are not retried.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from tronlib.contract import DeployContractRequest
from tronlib.exceptions import NodeError

logger = logging.getLogger(__name__)

Json = Dict[str, Any]


def decode_hex_message(msg: str) -> str:
    """Return the UTF-8 text of a hex-encoded node message.

    Node error messages are usually hex-encoded; anything that is not
    hex-encoded UTF-8 text is returned unchanged.
    """

    try:
        return bytes.fromhex(msg).decode("utf-8")
    except ValueError:
        return msg


class Node:
    "TRON full node HTTP API client."

    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:

        self.api_url = api_url.rstrip("/")
        if client is None:
            client = httpx.Client(
                timeout=timeout,
                headers={"Content-Type": "application/json"},
            )
        self._client = client

    def __repr__(self) -> str:
        return f"Node({self.api_url!r})"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Node":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _post(self, endpoint: str, body: Json) -> Json:

        url = f"{self.api_url}{endpoint}"
        logger.debug("POST %s", url)
        try:
            resp = self._client.post(url, json=body)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise NodeError(f"{endpoint} request failed: {e}") from e

        try:
            result = resp.json()
        except ValueError as e:
            raise NodeError(f"invalid json response: {resp.text!r}") from e
        if not isinstance(result, dict):
            raise NodeError(f"unexpected response: {result!r}")
        logger.debug("%s response: %s", endpoint, result)
        return result

    def deploy_contract(self, request: DeployContractRequest) -> Tuple[Json, Json]:
        """Return the unsigned deploy transaction and the whole node response.

        The transaction includes the 'txID' to be signed. It is either
        the response itself or nested under its 'transaction' key;
        the 'contract_address' (hex) of the contract being deployed,
        when returned, is at the root of the response.
        """

        response = self._post("/wallet/deploycontract", request.to_dict())

        result = response.get("result")
        if isinstance(result, dict) and result.get("result") is False:
            msg = result.get("message")
            msg = decode_hex_message(msg) if isinstance(msg, str) else "unknown error"
            raise NodeError(f"failed to create transaction: {msg}")

        # some API versions use this
        if "Error" in response:
            raise NodeError(f"API error: {response['Error']}")

        # transaction fields are usually at root level
        if "transaction" in response:
            transaction = response["transaction"]
        elif "txID" in response:
            transaction = dict(response)
        else:
            raise NodeError(f"no transaction in response: {response}")

        if not isinstance(transaction, dict) or "txID" not in transaction:
            raise NodeError(f"no txID in transaction: {transaction}")
        return transaction, response

    def broadcast_transaction(self, signed_tx: Json) -> Json:
        "Broadcast a signed transaction, returning the node response."

        response = self._post("/wallet/broadcasttransaction", signed_tx)
        if response.get("result") is not True:
            code = response.get("code", "")
            msg = response.get("message")
            msg = decode_hex_message(msg) if isinstance(msg, str) else "unknown error"
            raise NodeError(f"broadcast failed [{code}]: {msg}")
        return response
