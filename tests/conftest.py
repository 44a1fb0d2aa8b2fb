"""
Pytest fixtures for the NativeRollup SDK tests.
"""
import pytest
from web3.providers.rpc import HTTPProvider

from nativerollup_sdk.config import NetworkConfig
from nativerollup_sdk.gateway import ExecuteCalldataGateway
from nativerollup_sdk.models import ExecuteRequest, ExecuteTarget
from nativerollup_sdk.oracle import FunctionOracle
from nativerollup_sdk.oracle._rate_limited_log import reset_rate_limits

# Constants for testing
TEST_CHAIN_ID = 61972
TEST_RPC_URL = "http://localhost:18545"
TEST_TARGET = "0x1234567890123456789012345678901234567890"
TEST_COINBASE = "0x00000000000000000000000000000000000000c0"
TEST_PRE_STATE = "0x" + "ab" * 32


def gas_word(gas: int) -> bytes:
    """Encode a gas amount the way the precompile returns it"""
    return gas.to_bytes(32, "big")


@pytest.fixture(autouse=True)
def _patch_http_provider(monkeypatch):
    """
    Stub every Web3 HTTP call so no DNS / network traffic is triggered.
    Works for all tests because it is autouse.
    """
    def _dummy(self, method, params=None, _=None):      # signature match
        if method in {"eth_chainId"}:
            return {"jsonrpc": "2.0", "id": 1, "result": hex(TEST_CHAIN_ID)}
        # everything else – return something harmless
        return {"jsonrpc": "2.0", "id": 1, "result": "0x0"}

    monkeypatch.setattr(HTTPProvider, "make_request", _dummy, raising=True)


@pytest.fixture(autouse=True)
def _reset_shared_state():
    """Clear module-level caches between tests"""
    reset_rate_limits()
    NetworkConfig._networks_cache = None
    yield
    reset_rate_limits()
    NetworkConfig._networks_cache = None


@pytest.fixture
def forwarded():
    """List collecting every calldata the oracle receives"""
    return []


@pytest.fixture
def oracle(forwarded):
    """Oracle that accepts everything and reports 21000 gas"""
    def _execute(data):
        forwarded.append(data)
        return True, gas_word(21000)

    return FunctionOracle(_execute, gas_meter=lambda data: 50000)


@pytest.fixture
def gateway(oracle):
    """Gateway configured for the L2 devnet chain"""
    return ExecuteCalldataGateway(TEST_CHAIN_ID, oracle)


@pytest.fixture
def execute_request():
    """A well-formed EXECUTE request"""
    return ExecuteRequest(
        chain_id=TEST_CHAIN_ID,
        pre_state_hash=TEST_PRE_STATE,
        gas_limit=30_000_000,
        coinbase=TEST_COINBASE,
        block_number=42,
        gas_price=1_000_000_000,
        timestamp=1_700_000_000,
        witness=bytes.fromhex("f8c0") + b"\x01" * 16,
        withdrawals=b"\x02" * 8,
        blob_hashes=b"\x03" * 64,
        target=ExecuteTarget(
            to=TEST_TARGET,
            value=10**18,
            data=bytes.fromhex("a9059cbb") + b"\x00" * 64,
        ),
    )
