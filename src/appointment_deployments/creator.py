"""Contract creation over JSON-RPC for appointment-deployments library."""

import logging
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence, Union

import requests
from eth_abi.exceptions import EncodingError
from web3 import Web3
from web3.contract.contract import ContractConstructor
from web3.exceptions import TimeExhausted, Web3Exception

from .artifacts import load_artifact
from .constants import RECEIPT_POLL_INTERVAL, RECEIPT_TIMEOUT, RPC_TIMEOUT
from .exceptions import (
    DeploymentError,
    ReceiptTimeoutError,
    RPCError,
    TransactionRevertedError,
)
from .types import ContractArtifact, DeploymentRecord

logger = logging.getLogger(__name__)


class ContractCreator(Protocol):
    """Capability to submit a contract creation and wait for it to land."""

    def submit_creation(
        self,
        name: str,
        args: Sequence[Any],
        sender: str,
        network: str,
        auto_mine: bool = False,
    ) -> DeploymentRecord: ...


def connect(rpc_url: str, timeout: int = RPC_TIMEOUT) -> Web3:
    """Create a Web3 instance for a node's HTTP endpoint."""
    return Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": timeout}))


def build_constructor(
    w3: Web3, artifact: ContractArtifact, args: Sequence[Any]
) -> ContractConstructor:
    """
    Bind constructor arguments to a compiled contract.

    The returned constructor's data_in_transaction is the creation bytecode
    followed by the ABI-encoded arguments.

    Raises:
        DeploymentError: If the arguments do not fit the constructor inputs
    """
    contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
    try:
        return contract.constructor(*args)
    except (EncodingError, TypeError, ValueError, Web3Exception) as e:
        raise DeploymentError(
            f"Cannot encode {artifact.name} constructor arguments {list(args)!r}: {e}"
        ) from e


class RpcContractCreator:
    """Deploys compiled hardhat artifacts through a node's unlocked accounts."""

    def __init__(
        self,
        w3: Web3,
        artifacts_dir: Optional[Union[Path, str]] = None,
        receipt_timeout: float = RECEIPT_TIMEOUT,
        poll_interval: float = RECEIPT_POLL_INTERVAL,
    ):
        self.w3 = w3
        self.artifacts_dir = artifacts_dir
        self.receipt_timeout = receipt_timeout
        self.poll_interval = poll_interval

    def _mine(self) -> None:
        # Live nodes reject evm_mine; the transaction is mined by the network instead
        response = self.w3.provider.make_request("evm_mine", [])
        if "error" in response:
            logger.warning("Node cannot mine on demand: %s", response["error"])

    def submit_creation(
        self,
        name: str,
        args: Sequence[Any],
        sender: str,
        network: str,
        auto_mine: bool = False,
    ) -> DeploymentRecord:
        """
        Send a creation transaction and wait for its receipt.

        Args:
            name: Contract name, also the artifact name
            args: Constructor arguments, in order
            sender: Address the node signs with
            network: Network name stamped on the record
            auto_mine: Mine a block right after sending (dev nodes)

        Returns:
            DeploymentRecord for the new contract

        Raises:
            ArtifactNotFoundError: If the contract is not compiled
            DeploymentError: If the arguments cannot be encoded
            TransactionRevertedError: If the constructor reverted
            RPCError: If the node rejects or never confirms the transaction
        """
        artifact = load_artifact(name, self.artifacts_dir)
        constructor = build_constructor(self.w3, artifact, args)
        sender = Web3.to_checksum_address(sender)

        try:
            tx_hash = Web3.to_hex(constructor.transact({"from": sender}))
        except (requests.RequestException, ValueError, Web3Exception) as e:
            raise RPCError(f"{name} creation transaction was rejected: {e}") from e
        logger.debug("Sent %s creation transaction %s", name, tx_hash)

        if auto_mine:
            self._mine()

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.receipt_timeout, poll_latency=self.poll_interval
            )
        except TimeExhausted as e:
            raise ReceiptTimeoutError(
                f"No receipt for transaction {tx_hash} after {self.receipt_timeout}s"
            ) from e

        if receipt["status"] == 0:
            raise TransactionRevertedError(f"{name} deployment reverted (tx: {tx_hash})")

        address = receipt.get("contractAddress")
        if not address:
            raise DeploymentError(
                f"Receipt for {name} deployment has no contract address (tx: {tx_hash})"
            )

        return DeploymentRecord(
            name=name,
            address=address,
            transaction_hash=tx_hash,
            block_number=receipt["blockNumber"],
            network=network,
            args=list(args),
            abi=artifact.abi,
            bytecode=artifact.bytecode,
            deployed_bytecode=artifact.deployed_bytecode,
            deployer=sender,
            receipt={
                "from": sender,
                "contractAddress": address,
                "transactionHash": tx_hash,
                "blockNumber": receipt["blockNumber"],
                "gasUsed": receipt.get("gasUsed"),
                "status": receipt["status"],
            },
        )
