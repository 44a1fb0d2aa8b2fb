"""
Tests for the NetworkConfig module.
"""
import pytest
import os
from unittest.mock import patch

from nativerollup_sdk.config import DEFAULT_NETWORK, NetworkConfig
from nativerollup_sdk.exceptions import NetworkError

# Sample network configuration
MOCK_NETWORKS = {
    "test-network": {
        "chainId": 123,
        "rpc": "https://test.example.com",
        "executePrecompile": "0x0000000000000000000000000000000000000099"
    },
    "bare-network": {
        "chainId": "not-a-number"
    }
}


class TestBundledNetworks:
    """The networks shipped with the package"""

    def test_devnet_l2(self):
        assert DEFAULT_NETWORK == "devnet-l2"
        assert NetworkConfig.get_chain_id("devnet-l2") == 61972
        assert NetworkConfig.get_rpc_url("devnet-l2") == "http://localhost:18545"
        assert NetworkConfig.get_precompile_address("devnet-l2") == \
            "0x0000000000000000000000000000000000000012"

    def test_devnet_l1(self):
        assert NetworkConfig.get_chain_id("devnet-l1") == 61971
        assert NetworkConfig.get_rpc_url("devnet-l1") == "http://localhost:8545"


class TestNetworkConfig:
    """Test NetworkConfig class with a patched cache."""

    @pytest.fixture(autouse=True)
    def _mock_networks(self):
        NetworkConfig._networks_cache = MOCK_NETWORKS
        yield

    def test_load_networks_cached(self):
        with patch("importlib.resources.files") as mock_files:
            result = NetworkConfig.load_networks()

            mock_files.assert_not_called()

        assert result == MOCK_NETWORKS

    def test_get_network_not_found(self):
        with pytest.raises(NetworkError) as exc_info:
            NetworkConfig.get_network("non-existent-network")

        assert "test-network" in str(exc_info.value)

    def test_get_rpc_url_override(self):
        result = NetworkConfig.get_rpc_url("test-network", override="https://override.example.com")

        assert result == "https://override.example.com"

    def test_get_rpc_url_env_var(self):
        with patch.dict(os.environ, {"TEST_NETWORK_RPC_URL": "https://env.example.com"}):
            assert NetworkConfig.get_rpc_url("test-network") == "https://env.example.com"

    def test_get_rpc_url_missing(self):
        with pytest.raises(NetworkError, match="no RPC URL"):
            NetworkConfig.get_rpc_url("bare-network")

    def test_get_chain_id_invalid(self):
        with pytest.raises(NetworkError, match="invalid chainId"):
            NetworkConfig.get_chain_id("bare-network")

    def test_get_precompile_address(self):
        assert NetworkConfig.get_precompile_address("test-network") == \
            "0x0000000000000000000000000000000000000099"
        assert NetworkConfig.get_precompile_address("bare-network") == \
            "0x0000000000000000000000000000000000000012"


def test_load_networks_failure():
    with patch("nativerollup_sdk.config.resources.files", side_effect=OSError("missing")):
        with pytest.raises(NetworkError, match="Failed to load"):
            NetworkConfig.load_networks()
