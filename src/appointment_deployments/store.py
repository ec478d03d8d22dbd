"""Deployment record stores for appointment-deployments library."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple, Union

from .exceptions import DeploymentNotFoundError
from .parsers import parse_deployment_file, serialize_deployment
from .paths import get_default_deployments_dir, get_deployment_path
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


class DeploymentStore(Protocol):
    """Key-value store of deployment records keyed by (network, name)."""

    def get_or_none(self, network: str, name: str) -> Optional[DeploymentRecord]: ...

    def save(self, record: DeploymentRecord) -> None: ...

    def names(self, network: str) -> List[str]: ...

    def has(self, network: str, name: str) -> bool: ...

    def get(self, network: str, name: str) -> DeploymentRecord: ...


class _BaseStore(ABC):
    """Lookup helpers shared by the concrete stores."""

    @abstractmethod
    def get_or_none(self, network: str, name: str) -> Optional[DeploymentRecord]: ...

    def has(self, network: str, name: str) -> bool:
        return self.get_or_none(network, name) is not None

    def get(self, network: str, name: str) -> DeploymentRecord:
        """
        Get the record for a contract on a network.

        Raises:
            DeploymentNotFoundError: If no record exists
        """
        record = self.get_or_none(network, name)
        if record is None:
            raise DeploymentNotFoundError(
                f"No deployment found for '{name}' on network '{network}'"
            )
        return record


class InMemoryDeploymentStore(_BaseStore):
    """Dict-backed store; nothing outlives the process."""

    def __init__(self) -> None:
        self._records: Dict[Tuple[str, str], DeploymentRecord] = {}

    def get_or_none(self, network: str, name: str) -> Optional[DeploymentRecord]:
        return self._records.get((network, name))

    def save(self, record: DeploymentRecord) -> None:
        self._records[(record.network, record.name)] = record

    def names(self, network: str) -> List[str]:
        return sorted(name for (net, name) in self._records if net == network)


class JsonDeploymentStore(_BaseStore):
    """
    Store using the hardhat-deploy directory layout.

    Each record lives at {root}/{network}/{name}.json, next to a .chainId
    file naming the chain the directory belongs to.
    """

    def __init__(
        self,
        root: Optional[Union[Path, str]] = None,
        chain_ids: Optional[Dict[str, int]] = None,
    ):
        """
        Initialize the store.

        Args:
            root: Deployments directory (defaults to ./deployments)
            chain_ids: Network name -> chain id, written to .chainId on save
        """
        self.root = get_default_deployments_dir() if root is None else Path(root).absolute()
        self._chain_ids = chain_ids or {}

    def _record_path(self, network: str, name: str) -> Path:
        return get_deployment_path(network, name, self.root)

    def get_or_none(self, network: str, name: str) -> Optional[DeploymentRecord]:
        path = self._record_path(network, name)
        if not path.exists():
            return None
        return parse_deployment_file(path, network)

    def save(self, record: DeploymentRecord) -> None:
        """
        Write a record, replacing any existing one.

        The file is written next to its destination and renamed into place,
        so an interrupted write never leaves a truncated record.
        """
        network_dir = self.root / record.network
        network_dir.mkdir(parents=True, exist_ok=True)

        chain_id = self._chain_ids.get(record.network)
        if chain_id is not None:
            (network_dir / ".chainId").write_text(str(chain_id))

        path = self._record_path(record.network, record.name)
        fd, tmp_name = tempfile.mkstemp(dir=network_dir, prefix=f".{record.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(serialize_deployment(record), f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            os.unlink(tmp_name)
            raise

        logger.debug("Saved %s record for network %s to %s", record.name, record.network, path)

    def names(self, network: str) -> List[str]:
        network_dir = self.root / network
        if not network_dir.exists():
            return []
        return sorted(p.stem for p in network_dir.glob("*.json"))
