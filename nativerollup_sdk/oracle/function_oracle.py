"""
In-process execution oracle.

This module provides an oracle backed by a plain Python function, for
tests and local development where no node exposes the EXECUTE precompile.
"""
import logging
from typing import Callable, Optional, Tuple

from .transport import ExecuteOracle, OracleResult

# Configure logger
logger = logging.getLogger(__name__)


class FunctionOracle(ExecuteOracle):
    """
    Oracle that delegates to a pure ``bytes -> (bool, bytes)`` function.

    The function receives a copy of the calldata, so it cannot mutate the
    caller's buffer.
    """

    def __init__(
        self,
        fn: Callable[[bytes], Tuple[bool, bytes]],
        gas_meter: Optional[Callable[[bytes], int]] = None
    ):
        """
        Initialize the function oracle.

        Args:
            fn: Function mapping calldata to (success, output)
            gas_meter: Function returning the gas metered for a call
                (defaults to 0)
        """
        self.fn = fn
        self.gas_meter = gas_meter
        self.calls = 0

    def is_available(self) -> bool:
        """
        Check if the function oracle is available.

        Returns:
            Always True since it has no external dependencies
        """
        return True

    def static_call(self, data: bytes) -> OracleResult:
        """
        Run the wrapped function on the calldata.

        Args:
            data: Calldata to forward

        Returns:
            OracleResult built from the function's (success, output)
        """
        data = bytes(data)
        self.calls += 1
        logger.debug(f"FunctionOracle.static_call with {len(data)} bytes")

        success, output = self.fn(data)
        gas_used = self.gas_meter(data) if self.gas_meter else 0

        return OracleResult(
            success=bool(success),
            output=bytes(output),
            gas_used=gas_used
        )
