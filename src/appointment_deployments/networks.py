"""Network configuration lookup for appointment-deployments library."""

import os
from typing import Optional

from .constants import NETWORK_CONFIG
from .exceptions import NetworkNotFoundError
from .types import NetworkConfig


def get_network_config(network: str, rpc_url: Optional[str] = None) -> NetworkConfig:
    """
    Resolve settings for a named network.

    The RPC URL is taken from the explicit argument, then the network's
    environment variable, then the static default.

    Args:
        network: Network name ("hardhat", "localhost" or "sepolia")
        rpc_url: Explicit RPC URL override

    Returns:
        NetworkConfig for the network

    Raises:
        NetworkNotFoundError: If network is not configured
        ValueError: If no RPC URL can be resolved
    """
    if network not in NETWORK_CONFIG:
        raise NetworkNotFoundError(
            f"Network '{network}' not configured "
            f"(known: {', '.join(sorted(NETWORK_CONFIG))})"
        )

    config = NETWORK_CONFIG[network]

    if rpc_url is None:
        rpc_url = os.environ.get(config["default_rpc_env"]) or config["rpc_url"]

    if not rpc_url:
        raise ValueError(
            f"RPC URL required for network '{network}': "
            f"set ${config['default_rpc_env']} or pass rpc_url"
        )

    return NetworkConfig(
        name=network,
        chain_id=config["chain_id"],
        rpc_url=rpc_url,
        block_explorer_url=config["block_explorer_url"],
        auto_mine=config["auto_mine"],
        live=config["live"],
    )
