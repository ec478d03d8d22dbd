"""
appointment-deployments: deploys the ProviderRegistry and AppointmentScheduler contracts
"""

from importlib.metadata import PackageNotFoundError, version

from .deployments import DeployEnvironment, Deployments
from .exceptions import (
    AccountNotFoundError,
    ArtifactNotFoundError,
    DefectiveDeploymentError,
    DeploymentError,
    DeploymentNotFoundError,
    NetworkNotFoundError,
    ReceiptTimeoutError,
    RPCError,
    TransactionRevertedError,
)
from .runner import deploy_all, run_deploy_scripts
from .store import InMemoryDeploymentStore, JsonDeploymentStore
from .types import DeploymentRecord

try:
    __version__ = version("appointment-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Deployments",
    "DeployEnvironment",
    "DeploymentRecord",
    "InMemoryDeploymentStore",
    "JsonDeploymentStore",
    "deploy_all",
    "run_deploy_scripts",
    "DeploymentError",
    "DeploymentNotFoundError",
    "TransactionRevertedError",
    "RPCError",
    "ReceiptTimeoutError",
    "AccountNotFoundError",
    "ArtifactNotFoundError",
    "NetworkNotFoundError",
    "DefectiveDeploymentError",
]
