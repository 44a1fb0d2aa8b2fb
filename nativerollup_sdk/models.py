"""
Data models for the NativeRollup SDK.
"""
from typing import Any

from pydantic import BaseModel, Field, field_validator

UINT16_MAX = 2**16 - 1
UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
UINT256_MAX = 2**256 - 1


def to_bytes(value: Any) -> bytes:
    """
    Coerce a bytes-like object or a 0x-prefixed hex string to bytes

    Args:
        value: bytes, bytearray, memoryview or hex string

    Returns:
        The value as immutable bytes

    Raises:
        ValueError: If a string is not valid hex
        TypeError: If the value is neither bytes-like nor a string
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        hex_str = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            return bytes.fromhex(hex_str)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {str(e)}")
    raise TypeError(f"Expected bytes or hex string, got {type(value).__name__}")


class ExecuteTarget(BaseModel):
    """The call the execution oracle performs against the pre-state"""
    to: bytes = Field(..., min_length=20, max_length=20)
    value: int = Field(0, ge=0, le=UINT256_MAX, strict=True)
    data: bytes = Field(b"", max_length=UINT32_MAX)

    @field_validator("to", "data", mode="before")
    @classmethod
    def _coerce_bytes(cls, v: Any) -> Any:
        return to_bytes(v) if isinstance(v, str) else v


class ExecuteRequest(BaseModel):
    """
    Stateless-execution request carried as EXECUTE precompile calldata.

    The witness and withdrawals size fields of the wire layout are derived
    from the payload lengths, so they are not stored separately.
    """
    chain_id: int = Field(..., ge=0, le=UINT256_MAX, strict=True)
    pre_state_hash: bytes = Field(b"\x00" * 32, min_length=32, max_length=32)
    gas_limit: int = Field(..., ge=0, le=UINT64_MAX, strict=True)
    coinbase: bytes = Field(b"\x00" * 20, min_length=20, max_length=20)
    block_number: int = Field(0, ge=0, le=UINT64_MAX, strict=True)
    gas_price: int = Field(0, ge=0, le=UINT64_MAX, strict=True)
    timestamp: int = Field(0, ge=0, le=UINT64_MAX, strict=True)
    witness: bytes = Field(b"", max_length=UINT16_MAX)
    withdrawals: bytes = Field(b"", max_length=UINT16_MAX)
    blob_hashes: bytes = b""
    target: ExecuteTarget

    @field_validator("pre_state_hash", "coinbase", "witness", "withdrawals", "blob_hashes", mode="before")
    @classmethod
    def _coerce_bytes(cls, v: Any) -> Any:
        return to_bytes(v) if isinstance(v, str) else v

    @field_validator("blob_hashes")
    @classmethod
    def _check_blob_hashes(cls, v: bytes) -> bytes:
        if len(v) % 32 != 0:
            raise ValueError("blob_hashes length must be a multiple of 32")
        if len(v) // 32 > UINT16_MAX:
            raise ValueError("too many blob hashes")
        return v

    @property
    def witness_size(self) -> int:
        return len(self.witness)

    @property
    def withdrawals_size(self) -> int:
        return len(self.withdrawals)


class ExecuteResponse(BaseModel):
    """Result of a successful EXECUTE dispatch"""
    gas_consumed: int = Field(..., ge=0)
    succeeded: bool = True
    return_data: bytes = b""
