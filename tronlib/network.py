#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions.

Network parameters are loaded from the json files in the _data folder.
All TRON networks share the same 0x41 address prefix:
the network only tells which node and explorer to talk to.
"""

import json
from dataclasses import InitVar, dataclass
from os import path
from typing import Dict, Optional

from dataclasses_json import DataClassJsonMixin

from tronlib.exceptions import TronlibValueError

# network-version byte of every 21 bytes binary address
ADDRESS_PREFIX = b"\x41"


@dataclass(frozen=True)
class Network(DataClassJsonMixin):
    name: str
    # full node HTTP API
    api_url: str
    explorer_url: str = ""
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if not self.name:
            raise TronlibValueError("empty network name")
        if not self.api_url.startswith(("http://", "https://")):
            raise TronlibValueError(f"invalid api_url: {self.api_url!r}")

    def tx_url(self, tx_id: str) -> str:
        "Return the explorer url of a transaction."
        return self.explorer_url + tx_id


NETWORKS: Dict[str, Network] = {}
_datadir = path.join(path.dirname(__file__), "_data")
for net in ("mainnet", "nile", "shasta"):
    filename = path.join(_datadir, net + ".json")
    with open(filename, "r", encoding="ascii") as file_:
        NETWORKS[net] = Network.from_dict(json.load(file_))


def network_from_api_url(api_url: str) -> Optional[str]:
    "Return the name of the known network served at api_url, if any."
    api_url = api_url.strip().rstrip("/")
    for network in NETWORKS.values():
        if network.api_url == api_url:
            return network.name
    return None
