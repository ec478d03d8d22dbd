"""Deployment file (de)serialization for appointment-deployments library."""

import json
from pathlib import Path
from typing import Any, Dict

from .exceptions import DefectiveDeploymentError
from .types import DeploymentRecord


def parse_deployment_file(file_path: Path, network: str) -> DeploymentRecord:
    """
    Parse a hardhat-deploy JSON file.

    The logical name is taken from the file name.

    Args:
        file_path: Path to {network}/{name}.json
        network: Network the file belongs to

    Returns:
        DeploymentRecord built from the file

    Raises:
        DefectiveDeploymentError: If address, transaction hash or block number is missing
    """
    with open(file_path) as f:
        data = json.load(f)

    receipt = data.get("receipt") or {}

    # Try to get block number from receipt first, fall back to top-level
    block_number = receipt.get("blockNumber", data.get("blockNumber"))
    transaction_hash = data.get("transactionHash", receipt.get("transactionHash"))

    if block_number is None:
        raise DefectiveDeploymentError(
            f"Missing block number in deployment file: {file_path}"
        )
    if "address" not in data or transaction_hash is None:
        raise DefectiveDeploymentError(
            f"Missing address or transaction hash in deployment file: {file_path}"
        )

    return DeploymentRecord(
        name=Path(file_path).stem,
        address=data["address"],
        transaction_hash=transaction_hash,
        block_number=block_number,
        network=network,
        args=data.get("args", []),
        abi=data.get("abi", []),
        bytecode=data.get("bytecode"),
        deployed_bytecode=data.get("deployedBytecode"),
        deployer=receipt.get("from"),
        num_deployments=data.get("numDeployments", 1),
        receipt=data.get("receipt"),
    )


def serialize_deployment(record: DeploymentRecord) -> Dict[str, Any]:
    """
    Convert a record to hardhat-deploy JSON field names.

    Args:
        record: Deployment record

    Returns:
        JSON-ready dictionary. Constructor args are stored verbatim, so
        integer arguments stay exact JSON integers.
    """
    receipt: Dict[str, Any] = dict(record.receipt or {})
    receipt.setdefault("contractAddress", record.address)
    receipt.setdefault("transactionHash", record.transaction_hash)
    receipt["blockNumber"] = record.block_number
    if record.deployer is not None:
        receipt.setdefault("from", record.deployer)

    result: Dict[str, Any] = {
        "address": record.address,
        "abi": record.abi,
        "transactionHash": record.transaction_hash,
        "receipt": receipt,
        "args": list(record.args),
        "numDeployments": record.num_deployments,
    }

    # Only write bytecode fields we actually have
    if record.bytecode is not None:
        result["bytecode"] = record.bytecode
    if record.deployed_bytecode is not None:
        result["deployedBytecode"] = record.deployed_bytecode

    return result
