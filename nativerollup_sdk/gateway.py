"""
ExecuteCalldataGateway - entry point for EXECUTE precompile requests.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .calldata import (
    CHAIN_ID_SIZE,
    decode_gas_consumed,
    encode_execute_request,
    encode_gas_word,
    read_chain_id,
)
from .exceptions import ExecuteCallFailed, InvalidChainId
from .models import UINT256_MAX, ExecuteRequest, ExecuteResponse
from .oracle import ExecuteOracle
from .oracle._rate_limited_log import rate_limited_log

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ExecuteSucceeded:
    """Event emitted after every successful EXECUTE dispatch"""
    gas_consumed: int
    return_data: bytes


Listener = Callable[[ExecuteSucceeded], None]


class ExecuteCalldataGateway:
    """
    Gateway that validates EXECUTE calldata and relays it to the precompile.

    The gateway checks only the 32-byte chain-ID header. Everything after
    it is forwarded unmodified; structural validation is the oracle's job.

    Three entry points share one validate-forward-decode routine:
    1. dispatch: full response (gas consumed, success flag, return data)
    2. fallback: default path, returns the gas consumed as a 32-byte word
    3. execute_gas: returns only the gas consumed
    """

    def __init__(
        self,
        chain_id: int,
        oracle: ExecuteOracle,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the gateway

        Args:
            chain_id: Chain ID every request header must carry
            oracle: Backend that performs the read-only precompile call
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If chain_id does not fit in 256 bits
        """
        valid = isinstance(chain_id, int) and not isinstance(chain_id, bool)
        if not valid or not 0 <= chain_id <= UINT256_MAX:
            raise ValueError(f"chain_id must be a uint256, got {chain_id!r}")

        self._chain_id = chain_id
        self.oracle = oracle
        self.logger = logger or logging.getLogger(__name__)
        self._listeners: List[Listener] = []

    @property
    def chain_id(self) -> int:
        """Chain ID the gateway accepts"""
        return self._chain_id

    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives ExecuteSucceeded events"""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """
        Remove a previously registered listener

        Raises:
            ValueError: If the listener was never registered
        """
        self._listeners.remove(listener)

    def dispatch(self, raw_calldata: BytesLike) -> ExecuteResponse:
        """
        Validate and forward EXECUTE calldata

        Args:
            raw_calldata: Calldata starting with the 32-byte chain-ID header

        Returns:
            ExecuteResponse with the gas consumed and the oracle's output

        Raises:
            InvalidChainId: If the header is missing or does not match
            ExecuteCallFailed: If the precompile call fails
            OracleConnectionError: If the oracle cannot be reached
        """
        gas_consumed, return_data = self._execute(raw_calldata)
        return ExecuteResponse(
            gas_consumed=gas_consumed,
            succeeded=True,
            return_data=return_data
        )

    def fallback(self, raw_calldata: BytesLike) -> bytes:
        """
        Handle calldata sent without a function selector

        Returns:
            The gas consumed as a big-endian 32-byte word

        Raises:
            InvalidChainId: If the header is missing or does not match
            ExecuteCallFailed: If the precompile call fails
        """
        gas_consumed, _ = self._execute(raw_calldata)
        return encode_gas_word(gas_consumed)

    def execute_gas(self, raw_calldata: BytesLike) -> int:
        """
        Validate and forward EXECUTE calldata, returning only the gas consumed

        Raises:
            InvalidChainId: If the header is missing or does not match
            ExecuteCallFailed: If the precompile call fails
        """
        gas_consumed, _ = self._execute(raw_calldata)
        return gas_consumed

    def dispatch_request(self, request: ExecuteRequest) -> ExecuteResponse:
        """Encode an ExecuteRequest and dispatch it"""
        return self.dispatch(encode_execute_request(request))

    def _check_chain_id(self, data: bytes) -> None:
        if len(data) < CHAIN_ID_SIZE:
            raise InvalidChainId(expected=self._chain_id, provided=0)

        provided = read_chain_id(data)
        if provided != self._chain_id:
            raise InvalidChainId(expected=self._chain_id, provided=provided)

    def _execute(self, raw_calldata: BytesLike) -> Tuple[int, bytes]:
        data = bytes(raw_calldata)
        self._check_chain_id(data)

        self.logger.debug(f"Forwarding {len(data)} bytes of EXECUTE calldata")
        result = self.oracle.static_call(data)

        if not result.success:
            rate_limited_log(
                f"EXECUTE call failed (return data: 0x{result.output.hex()})",
                level="warning",
                logger_instance=self.logger
            )
            raise ExecuteCallFailed(result.output)

        gas_consumed = decode_gas_consumed(result.output, result.gas_used)
        self._emit(ExecuteSucceeded(gas_consumed=gas_consumed, return_data=result.output))
        return gas_consumed, result.output

    def _emit(self, event: ExecuteSucceeded) -> None:
        self.logger.info(
            f"ExecuteSucceeded: gas_consumed={event.gas_consumed}, "
            f"return_data={len(event.return_data)} bytes"
        )
        for listener in list(self._listeners):
            listener(event)
