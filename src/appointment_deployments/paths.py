"""Path management utilities for appointment-deployments library."""

from pathlib import Path
from typing import Optional, Union


def get_default_deployments_dir() -> Path:
    """
    Get default deployment record directory.

    Returns:
        Path to ./deployments
    """
    return Path.cwd() / "deployments"


def get_default_artifacts_dir() -> Path:
    """
    Get default compiled artifacts directory.

    Returns:
        Path to ./artifacts
    """
    return Path.cwd() / "artifacts"


def get_deployment_path(
    network: str, name: str, deployments_root: Optional[Union[Path, str]] = None
) -> Path:
    """
    Get the record file path for a contract on a network.

    Args:
        network: Network name
        name: Contract logical name
        deployments_root: Custom deployments directory (defaults to ./deployments)

    Returns:
        Path to {deployments_root}/{network}/{name}.json
    """
    if deployments_root is None:
        deployments_root = get_default_deployments_dir()
    else:
        deployments_root = Path(deployments_root).absolute()

    return deployments_root / network / f"{name}.json"
