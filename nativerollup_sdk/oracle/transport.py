"""
Execution oracle abstraction for the EXECUTE precompile.

This module defines the interface every oracle backend implements so the
gateway can forward calldata without knowing whether the precompile is
reached over JSON-RPC or emulated in-process.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

# Configure logger
logger = logging.getLogger(__name__)

# Fixed address of the EXECUTE precompile
EXECUTE_PRECOMPILE_ADDRESS = "0x0000000000000000000000000000000000000012"


@dataclass
class OracleResult:
    """
    Outcome of a single read-only call to the execution oracle.

    ``gas_used`` is the gas metered by the calling frame around the call
    (gas before minus gas after), used when ``output`` holds no gas word.
    """
    success: bool
    output: bytes = b""
    gas_used: int = 0


class ExecuteOracle(ABC):
    """
    Abstract base class for execution oracle implementations.

    Implementations must perform the call with read-only semantics: the
    oracle must not be able to change caller state.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this oracle is reachable.

        Returns:
            True if the oracle can serve calls, False otherwise
        """
        pass

    @abstractmethod
    def static_call(self, data: bytes) -> OracleResult:
        """
        Forward calldata to the EXECUTE precompile without state changes.

        Args:
            data: Calldata to forward, unmodified

        Returns:
            OracleResult with the success flag, raw output and metered gas

        Raises:
            OracleConnectionError: If the oracle cannot be reached
        """
        pass

    def close(self) -> None:
        """Release any resources held by the oracle."""
        pass


def get_rpc_oracle(rpc_url: str, **kwargs) -> ExecuteOracle:
    """
    Get an oracle that reaches the precompile through a node's JSON-RPC API.

    Args:
        rpc_url: Node RPC endpoint
        **kwargs: Passed through to RpcOracle

    Returns:
        RPC-backed oracle
    """
    from .rpc_oracle import RpcOracle
    return RpcOracle(rpc_url, **kwargs)


def get_function_oracle(
    fn: Callable[[bytes], Tuple[bool, bytes]],
    gas_meter: Optional[Callable[[bytes], int]] = None
) -> ExecuteOracle:
    """
    Get an in-process oracle backed by a plain function.

    Args:
        fn: Function mapping calldata to (success, output)
        gas_meter: Optional function returning metered gas for a call

    Returns:
        Function-backed oracle
    """
    from .function_oracle import FunctionOracle
    return FunctionOracle(fn, gas_meter=gas_meter)


def get_oracle(
    rpc_url: Optional[str] = None,
    fn: Optional[Callable[[bytes], Tuple[bool, bytes]]] = None,
    **kwargs
) -> ExecuteOracle:
    """
    Get the oracle matching the given arguments.

    Args:
        rpc_url: Node RPC endpoint; selects the RPC oracle when given
        fn: Function for the in-process oracle, used when no rpc_url is given
        **kwargs: Passed through to the selected oracle

    Returns:
        Oracle implementation

    Raises:
        ValueError: If neither rpc_url nor fn is provided
    """
    if rpc_url:
        logger.info(f"Using RPC oracle at {rpc_url}")
        return get_rpc_oracle(rpc_url, **kwargs)
    if fn is not None:
        logger.info("Using in-process function oracle")
        return get_function_oracle(fn, **kwargs)
    raise ValueError("Either rpc_url or fn must be provided")
