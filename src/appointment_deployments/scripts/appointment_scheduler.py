"""Deploy AppointmentScheduler against the recorded ProviderRegistry."""

from ..constants import APPOINTMENT_SCHEDULER, PROVIDER_REGISTRY
from ..deployments import DeployEnvironment
from ..types import DeploymentRecord

TAGS = [APPOINTMENT_SCHEDULER]


def deploy_appointment_scheduler(env: DeployEnvironment) -> DeploymentRecord:
    """
    Deploy AppointmentScheduler(providerRegistry).

    Raises:
        DeploymentNotFoundError: If ProviderRegistry is not deployed on this
                                 network; nothing is sent in that case
    """
    deployer = env.get_named_accounts()["deployer"]

    provider_registry = env.deployments.get(PROVIDER_REGISTRY)

    return env.deployments.deploy(
        APPOINTMENT_SCHEDULER,
        from_=deployer,
        args=[provider_registry.address],
        log=True,
        auto_mine=True,
    )
