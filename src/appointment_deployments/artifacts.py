"""Compiled artifact loading for appointment-deployments library."""

import json
from pathlib import Path
from typing import Optional, Union

from .exceptions import ArtifactNotFoundError
from .paths import get_default_artifacts_dir
from .types import ContractArtifact


def find_artifact_file(name: str, artifacts_dir: Path) -> Optional[Path]:
    """
    Locate the hardhat artifact for a contract.

    Hardhat writes artifacts/contracts/<Source>.sol/<Name>.json next to a
    <Name>.dbg.json debug file; only the former is an artifact.

    Args:
        name: Contract name
        artifacts_dir: Root artifacts directory

    Returns:
        Path to the artifact, or None if not found
    """
    contracts_dir = artifacts_dir / "contracts"
    search_root = contracts_dir if contracts_dir.exists() else artifacts_dir

    for candidate in sorted(search_root.rglob(f"{name}.json")):
        if candidate.parent.name.endswith(".sol") or candidate.parent == search_root:
            return candidate

    return None


def load_artifact(
    name: str, artifacts_dir: Optional[Union[Path, str]] = None
) -> ContractArtifact:
    """
    Load a compiled contract artifact.

    Args:
        name: Contract name, e.g. "ProviderRegistry"
        artifacts_dir: Root artifacts directory (defaults to ./artifacts)

    Returns:
        ContractArtifact with ABI and creation bytecode

    Raises:
        ArtifactNotFoundError: If no artifact exists, or it has no bytecode
                               (interfaces and abstract contracts)
    """
    root = get_default_artifacts_dir() if artifacts_dir is None else Path(artifacts_dir)

    artifact_file = find_artifact_file(name, root)
    if artifact_file is None:
        raise ArtifactNotFoundError(
            f"No compiled artifact for '{name}' under {root}. Compile the contracts first."
        )

    with open(artifact_file) as f:
        data = json.load(f)

    bytecode = data.get("bytecode", "")
    if not bytecode or bytecode == "0x":
        raise ArtifactNotFoundError(
            f"Artifact for '{name}' has no bytecode (interface or abstract contract?)"
        )

    return ContractArtifact(
        name=data.get("contractName", name),
        abi=data["abi"],
        bytecode=bytecode,
        deployed_bytecode=data.get("deployedBytecode"),
    )
