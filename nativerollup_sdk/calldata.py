"""
Codec for EXECUTE precompile calldata.

Layout (integers marked LE are little-endian, everything else big-endian):

    chain_id          32   uint256
    pre_state_hash    32
    gas_limit          8   uint64 LE
    witness_size       2   uint16 LE
    withdrawals_size   2   uint16 LE
    coinbase          20
    block_number       8   uint64 LE
    gas_price          8   uint64 LE
    timestamp          8   uint64 LE
    witness            witness_size
    withdrawals        withdrawals_size
    blob_count         2   uint16 LE
    blob_hashes        blob_count * 32
    target.to         20
    target.value      32   uint256
    target.data_len    4   uint32 LE
    target.data        data_len
"""
from typing import Tuple

from pydantic import ValidationError

from .exceptions import CalldataDecodeError
from .models import ExecuteRequest, ExecuteTarget


CHAIN_ID_SIZE = 32
WORD_SIZE = 32
HEADER_SIZE = 120
BLOB_HASH_SIZE = 32


def read_chain_id(data: bytes) -> int:
    """
    Read the chain-ID header of EXECUTE calldata

    Only the first 32 bytes are looked at; whatever follows may be
    truncated or malformed.

    Returns:
        The big-endian header value, or 0 if fewer than 32 bytes are present
    """
    if len(data) < CHAIN_ID_SIZE:
        return 0
    return int.from_bytes(data[:CHAIN_ID_SIZE], "big")


def decode_gas_consumed(output: bytes, metered_gas: int) -> int:
    """
    Extract the gas consumed from EXECUTE precompile output

    Args:
        output: Raw bytes returned by the precompile
        metered_gas: Gas measured by the caller around the precompile call

    Returns:
        The first output word as a big-endian integer, or metered_gas when
        the output is shorter than one word
    """
    if len(output) >= WORD_SIZE:
        return int.from_bytes(output[:WORD_SIZE], "big")
    return metered_gas


def encode_gas_word(gas_consumed: int) -> bytes:
    """ABI-encode a gas amount as a single 32-byte word"""
    return gas_consumed.to_bytes(WORD_SIZE, "big")


def encode_execute_request(request: ExecuteRequest) -> bytes:
    """
    Serialize an ExecuteRequest into EXECUTE calldata

    Args:
        request: The request to encode

    Returns:
        Calldata bytes ready to forward to the precompile
    """
    target = request.target
    parts = [
        request.chain_id.to_bytes(32, "big"),
        request.pre_state_hash,
        request.gas_limit.to_bytes(8, "little"),
        request.witness_size.to_bytes(2, "little"),
        request.withdrawals_size.to_bytes(2, "little"),
        request.coinbase,
        request.block_number.to_bytes(8, "little"),
        request.gas_price.to_bytes(8, "little"),
        request.timestamp.to_bytes(8, "little"),
        request.witness,
        request.withdrawals,
        (len(request.blob_hashes) // BLOB_HASH_SIZE).to_bytes(2, "little"),
        request.blob_hashes,
        target.to,
        target.value.to_bytes(32, "big"),
        len(target.data).to_bytes(4, "little"),
        target.data,
    ]
    return b"".join(parts)


class _Reader:
    """Sequential reader over calldata that fails on truncation"""

    def __init__(self, data: bytes):
        self.data = data
        self.offset = 0

    def take(self, size: int, field: str) -> bytes:
        end = self.offset + size
        if end > len(self.data):
            raise CalldataDecodeError(
                f"Calldata truncated reading {field}: need {size} bytes at offset "
                f"{self.offset}, have {len(self.data) - self.offset}"
            )
        chunk = self.data[self.offset:end]
        self.offset = end
        return chunk

    def uint(self, size: int, field: str, byteorder: str = "little") -> int:
        return int.from_bytes(self.take(size, field), byteorder)


def _decode_header(reader: _Reader) -> Tuple[dict, int, int]:
    fields = {
        "chain_id": reader.uint(32, "chain_id", "big"),
        "pre_state_hash": reader.take(32, "pre_state_hash"),
        "gas_limit": reader.uint(8, "gas_limit"),
    }
    witness_size = reader.uint(2, "witness_size")
    withdrawals_size = reader.uint(2, "withdrawals_size")
    fields["coinbase"] = reader.take(20, "coinbase")
    fields["block_number"] = reader.uint(8, "block_number")
    fields["gas_price"] = reader.uint(8, "gas_price")
    fields["timestamp"] = reader.uint(8, "timestamp")
    return fields, witness_size, withdrawals_size


def decode_execute_request(data: bytes) -> ExecuteRequest:
    """
    Parse EXECUTE calldata into an ExecuteRequest

    Args:
        data: Raw calldata

    Returns:
        The decoded request

    Raises:
        CalldataDecodeError: If the calldata is truncated, has trailing bytes,
            or holds out-of-range fields
    """
    reader = _Reader(bytes(data))
    fields, witness_size, withdrawals_size = _decode_header(reader)
    fields["witness"] = reader.take(witness_size, "witness")
    fields["withdrawals"] = reader.take(withdrawals_size, "withdrawals")
    blob_count = reader.uint(2, "blob_count")
    fields["blob_hashes"] = reader.take(blob_count * BLOB_HASH_SIZE, "blob_hashes")

    to = reader.take(20, "target.to")
    value = reader.uint(32, "target.value", "big")
    data_len = reader.uint(4, "target.data_len")
    target_data = reader.take(data_len, "target.data")

    if reader.offset != len(reader.data):
        raise CalldataDecodeError(
            f"Unexpected {len(reader.data) - reader.offset} trailing bytes after target data"
        )

    try:
        return ExecuteRequest(
            target=ExecuteTarget(to=to, value=value, data=target_data),
            **fields
        )
    except ValidationError as e:
        raise CalldataDecodeError(f"Invalid EXECUTE request: {str(e)}")
