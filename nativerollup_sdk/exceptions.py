"""
Exceptions for the NativeRollup SDK.
"""
from typing import Optional


class NativeRollupError(Exception):
    """Base exception for all NativeRollup SDK errors."""
    pass


class InvalidChainId(NativeRollupError):
    """
    Raised when the calldata chain-ID header is missing or does not match.

    Calldata shorter than 32 bytes carries no header and is reported with
    ``provided=0``.
    """

    def __init__(self, expected: int, provided: int):
        self.expected = expected
        self.provided = provided
        super().__init__(f"Invalid chain ID: expected {expected}, got {provided}")


class ExecuteCallFailed(NativeRollupError):
    """Raised when the EXECUTE precompile call reports failure."""

    def __init__(self, return_data: bytes, message: Optional[str] = None):
        self.return_data = bytes(return_data)
        if message is None:
            message = f"EXECUTE call failed (return data: 0x{self.return_data.hex()})"
        super().__init__(message)


class CalldataDecodeError(NativeRollupError):
    """Raised when EXECUTE calldata cannot be parsed into a request."""
    pass


class OracleConnectionError(NativeRollupError):
    """Raised when the execution oracle cannot be reached."""
    pass


class NetworkError(NativeRollupError):
    """Raised for unknown networks or inconsistent network configuration."""
    pass
