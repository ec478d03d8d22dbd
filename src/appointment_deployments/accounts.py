"""Named account resolution for appointment-deployments library."""

import os
from typing import Any, Dict, List, Mapping, Optional, Union

from eth_utils import is_address, to_checksum_address

from .constants import DEPLOYER_ADDRESS_ENV, NAMED_ACCOUNTS
from .exceptions import AccountNotFoundError
from .rpc import JsonRpcClient


def _resolve_account(role: str, entry: Union[int, str], node_accounts: List[str]) -> str:
    if isinstance(entry, int):
        if entry >= len(node_accounts):
            raise AccountNotFoundError(
                f"Named account '{role}' is account #{entry}, "
                f"but the node only has {len(node_accounts)} account(s)"
            )
        return to_checksum_address(node_accounts[entry])

    if not is_address(entry):
        raise AccountNotFoundError(f"Named account '{role}' is not an address: {entry!r}")
    return to_checksum_address(entry)


def get_named_accounts(
    network: str,
    client: JsonRpcClient,
    named_accounts: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Dict[str, str]:
    """
    Resolve role names to addresses for a network.

    Each role maps network names (or "default") to either an index into the
    node's eth_accounts or a literal address. $DEPLOYER_ADDRESS overrides
    the deployer role on every network.

    Args:
        network: Network name
        client: RPC client, queried for eth_accounts only when an index is used
        named_accounts: Role configuration (defaults to NAMED_ACCOUNTS)

    Returns:
        Dictionary mapping role name -> checksummed address

    Raises:
        AccountNotFoundError: If a role cannot be resolved
    """
    if named_accounts is None:
        named_accounts = NAMED_ACCOUNTS

    entries: Dict[str, Union[int, str]] = {}
    for role, per_network in named_accounts.items():
        if network in per_network:
            entries[role] = per_network[network]
        elif "default" in per_network:
            entries[role] = per_network["default"]

    override = os.environ.get(DEPLOYER_ADDRESS_ENV)
    if override:
        entries["deployer"] = override

    node_accounts: List[str] = []
    if any(isinstance(entry, int) for entry in entries.values()):
        node_accounts = client.accounts()

    return {role: _resolve_account(role, entry, node_accounts) for role, entry in entries.items()}
