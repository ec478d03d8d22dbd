"""Shared pytest fixtures for appointment-deployments tests."""

import shutil
from pathlib import Path
from typing import Any, List, Optional, Sequence

import pytest

from appointment_deployments.deployments import DeployEnvironment, Deployments
from appointment_deployments.exceptions import DeploymentError
from appointment_deployments.store import InMemoryDeploymentStore
from appointment_deployments.types import DeploymentRecord

# Hardhat's default account #0 and the addresses it creates with nonces 0, 1, 2
DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
CONTRACT_ADDRESSES = [
    "0x5FbDB2315678afecb367f032d93F642f64180aa3",
    "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
    "0x9fE46736679d2D9a65F0992F2272dE9f3c7fa6e0",
    "0xCf7Ed3AccA5a467e9e704C703E8D87F634fB0Fc9",
]


class FakeContractCreator:
    """ContractCreator handing out addresses in order; no network."""

    def __init__(self, addresses: Sequence[str] = CONTRACT_ADDRESSES):
        self._addresses = list(addresses)
        self.calls: List[dict] = []
        self.fail_with: Optional[Exception] = None

    def submit_creation(
        self,
        name: str,
        args: Sequence[Any],
        sender: str,
        network: str,
        auto_mine: bool = False,
    ) -> DeploymentRecord:
        self.calls.append(
            {"name": name, "args": list(args), "sender": sender, "network": network, "auto_mine": auto_mine}
        )
        if self.fail_with is not None:
            raise self.fail_with

        nonce = len(self.calls) - 1
        return DeploymentRecord(
            name=name,
            address=self._addresses[nonce],
            transaction_hash="0x" + f"{nonce + 1:064x}",
            block_number=nonce + 1,
            network=network,
            args=list(args),
            deployer=sender,
        )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def artifacts_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample hardhat artifacts."""
    return fixtures_dir / "artifacts"


@pytest.fixture
def sample_deployment_file(fixtures_dir: Path) -> Path:
    """Return path to a sample hardhat-deploy record file."""
    return fixtures_dir / "deployments" / "localhost" / "ProviderRegistry.json"


@pytest.fixture
def temp_deployments_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy the sample deployments directory somewhere writable."""
    target = tmp_path / "deployments"
    shutil.copytree(fixtures_dir / "deployments", target)
    return target


@pytest.fixture
def memory_store() -> InMemoryDeploymentStore:
    return InMemoryDeploymentStore()


@pytest.fixture
def fake_creator() -> FakeContractCreator:
    return FakeContractCreator()


@pytest.fixture
def failing_creator() -> FakeContractCreator:
    creator = FakeContractCreator()
    creator.fail_with = DeploymentError("insufficient funds for gas * price + value")
    return creator


def _make_env(network: str, store, creator) -> DeployEnvironment:
    return DeployEnvironment(
        network=network,
        deployments=Deployments(network, store, creator),
        named_accounts=lambda: {"deployer": DEPLOYER},
    )


@pytest.fixture
def deployer() -> str:
    """Hardhat account #0."""
    return DEPLOYER


@pytest.fixture
def contract_addresses() -> List[str]:
    """Addresses FakeContractCreator hands out, in order."""
    return list(CONTRACT_ADDRESSES)


@pytest.fixture
def make_env():
    """Factory for deploy environments whose deployer is hardhat account #0."""
    return _make_env


@pytest.fixture
def env(memory_store: InMemoryDeploymentStore, fake_creator: FakeContractCreator) -> DeployEnvironment:
    """Deploy environment for the localhost network backed by fakes."""
    return _make_env("localhost", memory_store, fake_creator)
