"""
NativeRollup SDK - client tooling for the EXECUTE precompile gateway.
"""
from .version import __version__
from .models import ExecuteRequest, ExecuteResponse, ExecuteTarget
from .calldata import (
    decode_execute_request,
    decode_gas_consumed,
    encode_execute_request,
    read_chain_id,
)
from .exceptions import (
    NativeRollupError,
    InvalidChainId,
    ExecuteCallFailed,
    CalldataDecodeError,
    OracleConnectionError,
    NetworkError,
)
from .oracle import (
    EXECUTE_PRECOMPILE_ADDRESS,
    ExecuteOracle,
    FunctionOracle,
    OracleResult,
    RpcOracle,
    get_oracle,
)
from .gateway import ExecuteCalldataGateway, ExecuteSucceeded
from .config import NetworkConfig

__all__ = [
    "ExecuteCalldataGateway",
    "ExecuteSucceeded",
    "ExecuteRequest",
    "ExecuteResponse",
    "ExecuteTarget",
    "encode_execute_request",
    "decode_execute_request",
    "decode_gas_consumed",
    "read_chain_id",
    "ExecuteOracle",
    "OracleResult",
    "FunctionOracle",
    "RpcOracle",
    "get_oracle",
    "EXECUTE_PRECOMPILE_ADDRESS",
    "NetworkConfig",
    "NativeRollupError",
    "InvalidChainId",
    "ExecuteCallFailed",
    "CalldataDecodeError",
    "OracleConnectionError",
    "NetworkError",
    "__version__",
]
