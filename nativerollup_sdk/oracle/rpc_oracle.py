"""
JSON-RPC execution oracle.

This module reaches the EXECUTE precompile of a running node through
``eth_call``, which executes against the node's state without creating a
transaction and therefore cannot mutate it.
"""
import logging
import urllib.parse
from typing import Any, Dict, Optional

import requests
from web3 import Web3
from web3.exceptions import ContractLogicError, Web3RPCError

from ..exceptions import OracleConnectionError
from ..calldata import WORD_SIZE
from .transport import ExecuteOracle, OracleResult, EXECUTE_PRECOMPILE_ADDRESS

# Configure logger
logger = logging.getLogger(__name__)

# Transaction overhead eth_estimateGas includes on top of the call itself
TX_BASE_GAS = 21000
TX_DATA_ZERO_GAS = 4
TX_DATA_NONZERO_GAS = 16


def _validate_rpc_url(rpc_url: str) -> None:
    """
    Require https:// for non-local RPC endpoints

    Raises:
        ValueError: If a remote URL does not use https
    """
    parsed = urllib.parse.urlparse(rpc_url)
    netloc_parts = parsed.netloc.split(':')
    host = netloc_parts[0] if netloc_parts else ''
    is_local = host in ('localhost', '127.0.0.1')
    if parsed.scheme != 'https' and not is_local:
        raise ValueError(f"rpc_url must use https:// for security (got: {parsed.scheme}://)")


def intrinsic_gas(data: bytes) -> int:
    """
    Gas charged to a plain call transaction before any code runs

    Returns:
        Base transaction cost plus the calldata cost of data
    """
    zeros = data.count(0)
    return TX_BASE_GAS + zeros * TX_DATA_ZERO_GAS + (len(data) - zeros) * TX_DATA_NONZERO_GAS


def _error_data(error: Exception) -> bytes:
    """
    Extract the raw payload attached to a failed call

    Reverts carry it in ``data``; other RPC errors only in the error object
    of the JSON-RPC response.
    """
    data = getattr(error, "data", None)
    if data is None:
        rpc_response = getattr(error, "rpc_response", None)
        if isinstance(rpc_response, dict) and isinstance(rpc_response.get("error"), dict):
            data = rpc_response["error"].get("data")

    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str) and data.startswith("0x"):
        try:
            return bytes.fromhex(data[2:])
        except ValueError:
            logger.debug(f"Error data is not hex: {data}")
    return b""


class RpcOracle(ExecuteOracle):
    """
    Oracle that calls the EXECUTE precompile on a node via JSON-RPC.

    To use this oracle, you'll need:
    - An RPC endpoint of a node that implements the precompile
    - Optionally, a caller address to use as ``from`` in the call
    """

    def __init__(
        self,
        rpc_url: str,
        precompile_address: str = EXECUTE_PRECOMPILE_ADDRESS,
        caller: Optional[str] = None,
        timeout: int = 30,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the RPC oracle

        Args:
            rpc_url: Node RPC endpoint URL (e.g., "http://localhost:18545")
            precompile_address: Address of the EXECUTE precompile
            caller: Address used as the call's sender (optional)
            timeout: Timeout for RPC requests in seconds
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the URL doesn't use https (unless it's localhost/127.0.0.1)
            ValueError: If an address is malformed
        """
        _validate_rpc_url(rpc_url)

        self.rpc_url = rpc_url
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.precompile_address = Web3.to_checksum_address(precompile_address)
        self.caller = Web3.to_checksum_address(caller) if caller else None

        self.w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))

    def is_available(self) -> bool:
        """
        Check if the node answers RPC requests

        Returns:
            True if connected, False otherwise
        """
        try:
            return bool(self.w3.is_connected())
        except requests.RequestException as e:
            self.logger.debug(f"RPC oracle not reachable: {e}")
            return False

    def _call_params(self, data: bytes) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "to": self.precompile_address,
            "data": "0x" + data.hex(),
        }
        if self.caller:
            params["from"] = self.caller
        return params

    def static_call(self, data: bytes) -> OracleResult:
        """
        Forward calldata to the precompile with eth_call

        Args:
            data: Calldata to forward, unmodified

        Returns:
            OracleResult; a revert or any other node-reported error yields
            success=False with the error payload

        Raises:
            OracleConnectionError: If the node cannot be reached
        """
        data = bytes(data)
        params = self._call_params(data)
        self.logger.debug(f"eth_call to {self.precompile_address} with {len(data)} bytes")

        try:
            output = bytes(self.w3.eth.call(params))
        except ContractLogicError as e:
            self.logger.debug(f"EXECUTE precompile reverted: {e}")
            return OracleResult(success=False, output=_error_data(e))
        except Web3RPCError as e:
            self.logger.debug(f"EXECUTE precompile call rejected by node: {e}")
            return OracleResult(success=False, output=_error_data(e))
        except requests.RequestException as e:
            self.logger.error(f"RPC request to {self.rpc_url} failed: {e}")
            raise OracleConnectionError(f"Failed to reach RPC oracle: {str(e)}")

        gas_used = 0
        if len(output) < WORD_SIZE:
            gas_used = self._meter_gas(params, data)

        return OracleResult(success=True, output=output, gas_used=gas_used)

    def _meter_gas(self, params: Dict[str, Any], data: bytes) -> int:
        """
        Measure the gas of a call whose output carries no gas word

        eth_estimateGas prices a whole transaction, so the intrinsic cost of
        the calldata is taken off to leave the gas spent inside the call.

        Returns:
            Gas used by the precompile call, or 0 if estimation fails
        """
        try:
            estimate = int(self.w3.eth.estimate_gas(params))
        except (ContractLogicError, Web3RPCError, requests.RequestException) as e:
            self.logger.warning(f"Gas metering failed, using 0. Error: {e}")
            return 0

        gas = max(estimate - intrinsic_gas(data), 0)
        self.logger.debug(f"Metered gas: {gas} (estimate {estimate})")
        return gas
