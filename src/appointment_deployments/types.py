"""Data types and dataclasses for appointment-deployments library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DeploymentRecord:
    """Result of a successful contract creation on one network."""

    # Required fields
    name: str  # Logical name, e.g., "ProviderRegistry"
    address: str  # Checksummed contract address
    transaction_hash: str
    block_number: int
    network: str  # e.g., "localhost" or "sepolia"

    # Optional fields (hardhat-deploy file layout)
    args: List[Any] = field(default_factory=list)  # Constructor arguments, verbatim
    abi: List[Dict[str, Any]] = field(default_factory=list)
    bytecode: Optional[str] = None
    deployed_bytecode: Optional[str] = None
    deployer: Optional[str] = None
    num_deployments: int = 1
    receipt: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract as emitted by the hardhat compiler."""

    name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    deployed_bytecode: Optional[str] = None


@dataclass(frozen=True)
class NetworkConfig:
    """Resolved settings for one target network."""

    name: str
    chain_id: int
    rpc_url: str
    block_explorer_url: Optional[str] = None
    auto_mine: bool = False
    live: bool = False

    def address_url(self, address: str) -> Optional[str]:
        """Block explorer URL for an address, if the network has an explorer."""
        if self.block_explorer_url is None:
            return None
        return f"{self.block_explorer_url}/address/{address}"
