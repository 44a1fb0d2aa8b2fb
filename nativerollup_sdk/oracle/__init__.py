"""
Oracle module for the NativeRollup SDK.

This module provides the backends that reach the EXECUTE precompile:
a JSON-RPC backend for running nodes and an in-process function backend.
"""
from .transport import (
    EXECUTE_PRECOMPILE_ADDRESS,
    ExecuteOracle,
    OracleResult,
    get_function_oracle,
    get_oracle,
    get_rpc_oracle,
)
from .function_oracle import FunctionOracle
from .rpc_oracle import RpcOracle

__all__ = [
    'EXECUTE_PRECOMPILE_ADDRESS', 'ExecuteOracle', 'OracleResult',
    'FunctionOracle', 'RpcOracle', 'get_oracle', 'get_rpc_oracle',
    'get_function_oracle',
]
