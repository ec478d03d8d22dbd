"""Deployment API used by deploy scripts."""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from .creator import ContractCreator
from .store import DeploymentStore
from .types import DeploymentRecord, NetworkConfig

logger = logging.getLogger(__name__)


class Deployments:
    """Deploys contracts on one network and records the results."""

    def __init__(
        self,
        network: str,
        store: DeploymentStore,
        creator: ContractCreator,
        network_config: Optional[NetworkConfig] = None,
    ):
        """
        Initialize the deployments API.

        Args:
            network: Network name records are stored under
            store: Deployment record store
            creator: Capability that submits creation transactions
            network_config: Optional config; explorer links in logs, and
                auto-mining is skipped where the network does not support it
        """
        self.network = network
        self.store = store
        self.creator = creator
        self.network_config = network_config

    def deploy(
        self,
        name: str,
        from_: str,
        args: Sequence[Any] = (),
        log: bool = False,
        auto_mine: bool = False,
    ) -> DeploymentRecord:
        """
        Deploy a contract and record it under its logical name.

        Any existing record for the name is replaced. If the creation fails
        the error propagates and the store is left untouched.

        Args:
            name: Contract logical name
            from_: Sender address
            args: Constructor arguments, passed verbatim
            log: Log the deployment at INFO level
            auto_mine: Ask the node to mine right after sending; ignored on
                networks configured without auto-mining

        Returns:
            The stored DeploymentRecord

        Raises:
            DeploymentError: If the creation transaction fails
        """
        previous = self.store.get_or_none(self.network, name)

        if self.network_config is not None:
            auto_mine = auto_mine and self.network_config.auto_mine

        record = self.creator.submit_creation(
            name, list(args), from_, self.network, auto_mine=auto_mine
        )

        num_deployments = previous.num_deployments + 1 if previous else 1
        record = dataclasses.replace(record, num_deployments=num_deployments)
        self.store.save(record)

        if log:
            url = self.network_config.address_url(record.address) if self.network_config else None
            logger.info(
                'deploying "%s" (tx: %s)...: deployed at %s%s',
                name,
                record.transaction_hash,
                record.address,
                f" ({url})" if url else "",
            )

        return record

    def get(self, name: str) -> DeploymentRecord:
        """
        Get the recorded deployment of a contract on this network.

        Raises:
            DeploymentNotFoundError: If the contract has not been deployed
        """
        return self.store.get(self.network, name)

    def get_or_none(self, name: str) -> Optional[DeploymentRecord]:
        return self.store.get_or_none(self.network, name)

    def all(self) -> Dict[str, DeploymentRecord]:
        """All recorded deployments on this network, keyed by name."""
        return {name: self.store.get(self.network, name) for name in self.store.names(self.network)}


@dataclass
class DeployEnvironment:
    """Runtime handed to each deploy script."""

    network: str
    deployments: Deployments
    named_accounts: Callable[[], Dict[str, str]]

    def get_named_accounts(self) -> Dict[str, str]:
        return self.named_accounts()
