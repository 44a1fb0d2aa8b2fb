#!/usr/bin/env python3
"""
Simple example of dispatching an EXECUTE request with the NativeRollup SDK.
"""
import os
import logging

from nativerollup_sdk import (
    ExecuteCalldataGateway,
    ExecuteCallFailed,
    ExecuteRequest,
    ExecuteTarget,
    InvalidChainId,
    NetworkConfig,
    RpcOracle,
)


def main():
    """
    Demonstrate basic usage of the ExecuteCalldataGateway.

    This example shows how to:
    1. Point an RPC oracle at a devnet node
    2. Build an EXECUTE request
    3. Dispatch it and read the gas consumed
    """
    logging.basicConfig(level=logging.INFO)

    network = os.environ.get("NETWORK", "devnet-l2")
    rpc_url = NetworkConfig.get_rpc_url(network)
    chain_id = NetworkConfig.get_chain_id(network)

    oracle = RpcOracle(rpc_url, precompile_address=NetworkConfig.get_precompile_address(network))
    if not oracle.is_available():
        print(f"ERROR: no node reachable at {rpc_url}")
        return

    gateway = ExecuteCalldataGateway(chain_id, oracle)
    gateway.subscribe(lambda event: print(f"ExecuteSucceeded: {event.gas_consumed} gas"))

    request = ExecuteRequest(
        chain_id=chain_id,
        gas_limit=1_000_000,
        witness=bytes.fromhex("c0"),  # empty RLP list
        target=ExecuteTarget(
            to="0x1234567890123456789012345678901234567890",
            value=0,
        ),
    )

    try:
        response = gateway.dispatch_request(request)
        print(f"Gas consumed: {response.gas_consumed}")
        print(f"Return data: 0x{response.return_data.hex()}")
    except InvalidChainId as e:
        print(f"Chain ID rejected: {e}")
    except ExecuteCallFailed as e:
        print(f"EXECUTE call failed: 0x{e.return_data.hex()}")


if __name__ == "__main__":
    main()
