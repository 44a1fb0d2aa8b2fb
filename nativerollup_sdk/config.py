"""
Network configuration for the NativeRollup SDK.

Networks are read from the bundled ``networks.json``. RPC URLs can be
overridden per call or through ``<NETWORK>_RPC_URL`` environment variables
(e.g. ``DEVNET_L2_RPC_URL``).
"""
import json
import logging
import os
from importlib import resources
from typing import Any, Dict, Optional

from .exceptions import NetworkError
from .oracle.transport import EXECUTE_PRECOMPILE_ADDRESS

logger = logging.getLogger(__name__)

DEFAULT_NETWORK = "devnet-l2"


class NetworkConfig:
    """Access to the bundled network definitions"""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load network definitions, caching them after the first read

        Returns:
            Mapping of network name to its configuration

        Raises:
            NetworkError: If networks.json cannot be read or parsed
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        try:
            text = resources.files("nativerollup_sdk").joinpath("networks.json").read_text()
            cls._networks_cache = json.loads(text)
        except (OSError, json.JSONDecodeError) as e:
            raise NetworkError(f"Failed to load network configuration: {str(e)}")

        logger.debug(f"Loaded networks: {', '.join(cls._networks_cache)}")
        return cls._networks_cache

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get the configuration of a single network

        Raises:
            NetworkError: If the network is unknown
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise NetworkError(f"Unknown network '{network}'. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_rpc_url(cls, network: str, override: Optional[str] = None) -> str:
        """
        Resolve the RPC URL of a network

        Precedence: override, then <NETWORK>_RPC_URL, then networks.json.
        """
        if override:
            return override

        env_var = f"{network.upper().replace('-', '_')}_RPC_URL"
        env_url = os.environ.get(env_var)
        if env_url:
            logger.debug(f"Using RPC URL from {env_var}")
            return env_url

        config = cls.get_network(network)
        if "rpc" not in config:
            raise NetworkError(f"Network '{network}' has no RPC URL configured")
        return config["rpc"]

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """Get the chain ID of a network"""
        config = cls.get_network(network)
        try:
            return int(config["chainId"])
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError(f"Network '{network}' has an invalid chainId: {str(e)}")

    @classmethod
    def get_precompile_address(cls, network: str) -> str:
        """Get the EXECUTE precompile address of a network"""
        config = cls.get_network(network)
        return config.get("executePrecompile", EXECUTE_PRECOMPILE_ADDRESS)
