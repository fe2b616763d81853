#!/usr/bin/env python3
"""
Print what the bundler helpers see on a node.

Usage:
    python examples/node_report.py https://polygon-rpc.com
"""

import asyncio
import logging
import sys

from bundler_utils import (
    ClientVersionCache,
    Web3Provider,
    estimate_gas,
    get_fee_data,
    is_geth,
)
from bundler_utils.utils import configure_logging


async def main(url: str) -> None:
    configure_logging(logging.DEBUG)

    provider = await Web3Provider.from_url(url)
    cache = ClientVersionCache()

    print(f"Chain ID:        {provider.chain_id}")
    print(f"Client version:  {await cache.get(provider)}")
    print(f"Geth tracing:    {await is_geth(provider, cache)}")

    fee_data = await get_fee_data(provider)
    print(f"Max priority fee: {fee_data.max_priority_fee_per_gas}")
    print(f"Max fee:          {fee_data.max_fee_per_gas}")
    print(f"Gas price:        {fee_data.gas_price}")

    # plain value transfer to the zero address
    gas = await estimate_gas(provider, {"to": "0x" + "00" * 20, "value": 0})
    print(f"Transfer gas:     {gas.gas} (submit {gas.expanded_gas})")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(sys.argv[1]))
