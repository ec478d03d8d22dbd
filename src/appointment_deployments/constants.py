"""Configuration constants for appointment-deployments library."""

# Logical names, used as record store keys and artifact names
PROVIDER_REGISTRY = "ProviderRegistry"
APPOINTMENT_SCHEDULER = "AppointmentScheduler"

# ProviderRegistry constructor argument, in ether (converted to wei at deploy time)
APPLICATION_FEE = "0.0001"

# Network configuration. Local dev chains use the hardhat default chain id.
NETWORK_CONFIG = {
    "hardhat": {
        "chain_id": 31337,
        "chain_name": "Hardhat",
        "rpc_url": "http://127.0.0.1:8545",
        "block_explorer_url": None,
        "default_rpc_env": "HARDHAT_RPC_URL",
        "auto_mine": True,
        "live": False,
    },
    "localhost": {
        "chain_id": 31337,
        "chain_name": "Localhost",
        "rpc_url": "http://127.0.0.1:8545",
        "block_explorer_url": None,
        "default_rpc_env": "LOCALHOST_RPC_URL",
        "auto_mine": True,
        "live": False,
    },
    "sepolia": {
        "chain_id": 11155111,
        "chain_name": "Sepolia",
        "rpc_url": None,
        "block_explorer_url": "https://sepolia.etherscan.io",
        "default_rpc_env": "SEP_RPC_URL",
        "auto_mine": False,
        "live": True,
    },
}

# Role name -> {network: account index or address}; "default" applies to any network
NAMED_ACCOUNTS = {
    "deployer": {
        "default": 0,
    },
}

# Environment variable overriding the deployer account on every network
DEPLOYER_ADDRESS_ENV = "DEPLOYER_ADDRESS"

# Receipt polling policy and HTTP timeout for node requests
RECEIPT_TIMEOUT = 120.0
RECEIPT_POLL_INTERVAL = 0.5
RPC_TIMEOUT = 30
