"""Deploy ProviderRegistry with the application fee."""

from ..constants import APPLICATION_FEE, PROVIDER_REGISTRY
from ..deployments import DeployEnvironment
from ..types import DeploymentRecord
from ..units import parse_ether

TAGS = [PROVIDER_REGISTRY]


def deploy_provider_registry(
    env: DeployEnvironment, application_fee: str = APPLICATION_FEE
) -> DeploymentRecord:
    deployer = env.get_named_accounts()["deployer"]

    return env.deployments.deploy(
        PROVIDER_REGISTRY,
        from_=deployer,
        args=[parse_ether(application_fee)],
        log=True,
        auto_mine=True,
    )
