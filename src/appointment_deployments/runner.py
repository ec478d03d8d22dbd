"""Sequential deploy script runner for appointment-deployments library."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .accounts import get_named_accounts
from .creator import RpcContractCreator, connect
from .deployments import DeployEnvironment, Deployments
from .networks import get_network_config
from .rpc import JsonRpcClient
from .scripts import DEPLOY_SCRIPTS, DeployScript
from .store import JsonDeploymentStore
from .types import DeploymentRecord

logger = logging.getLogger(__name__)


def select_scripts(
    scripts: Sequence[DeployScript], tags: Optional[Iterable[str]] = None
) -> List[DeployScript]:
    """
    Filter scripts by tag, preserving order.

    Args:
        scripts: Ordered deploy scripts
        tags: Tags to select; None selects every script

    Returns:
        Scripts carrying at least one of the tags
    """
    if tags is None:
        return list(scripts)

    wanted = set(tags)
    return [s for s in scripts if wanted.intersection(s.tags)]


def run_deploy_scripts(
    env: DeployEnvironment,
    tags: Optional[Iterable[str]] = None,
    scripts: Sequence[DeployScript] = DEPLOY_SCRIPTS,
) -> List[DeploymentRecord]:
    """
    Run deploy scripts one after another.

    The first failing script stops the run; its exception propagates and
    later scripts are not started.

    Args:
        env: Deploy environment for the target network
        tags: Only run scripts with one of these tags
        scripts: Ordered deploy scripts (defaults to DEPLOY_SCRIPTS)

    Returns:
        Records written by this run, in order
    """
    if tags is not None:
        tags = list(tags)

    selected = select_scripts(scripts, tags)
    if not selected:
        logger.warning("No deploy scripts match tags %s", tags)

    records = []
    for script in selected:
        logger.info("Running deploy script %s on %s", script.name, env.network)
        records.append(script.func(env))

    return records


def deploy_all(
    network: str,
    tags: Optional[Iterable[str]] = None,
    rpc_url: Optional[str] = None,
    deployments_dir: Optional[Union[Path, str]] = None,
    artifacts_dir: Optional[Union[Path, str]] = None,
) -> List[DeploymentRecord]:
    """
    Deploy to a configured network using a JSON-RPC node.

    Args:
        network: Network name from NETWORK_CONFIG
        tags: Only run scripts with one of these tags
        rpc_url: RPC URL override (defaults to the network's env var or default)
        deployments_dir: Record directory (defaults to ./deployments)
        artifacts_dir: Compiled artifacts directory (defaults to ./artifacts)

    Returns:
        Records written by this run

    Raises:
        NetworkNotFoundError: If network is not configured
        DeploymentError: If any deploy script fails
    """
    network_config = get_network_config(network, rpc_url)
    client = JsonRpcClient(network_config.rpc_url)

    store = JsonDeploymentStore(deployments_dir, chain_ids={network: network_config.chain_id})
    creator = RpcContractCreator(connect(network_config.rpc_url), artifacts_dir)
    deployments = Deployments(network, store, creator, network_config)

    env = DeployEnvironment(
        network=network,
        deployments=deployments,
        named_accounts=lambda: get_named_accounts(network, client),
    )

    return run_deploy_scripts(env, tags)
