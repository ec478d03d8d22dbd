"""Deploy scripts, run in the order of DEPLOY_SCRIPTS."""

from dataclasses import dataclass
from typing import Callable, List

from ..deployments import DeployEnvironment
from ..types import DeploymentRecord
from . import appointment_scheduler, provider_registry


@dataclass(frozen=True)
class DeployScript:
    """A named deploy step and the tags that select it."""

    name: str
    func: Callable[[DeployEnvironment], DeploymentRecord]
    tags: List[str]


DEPLOY_SCRIPTS = [
    DeployScript(
        name="provider_registry",
        func=provider_registry.deploy_provider_registry,
        tags=provider_registry.TAGS,
    ),
    DeployScript(
        name="appointment_scheduler",
        func=appointment_scheduler.deploy_appointment_scheduler,
        tags=appointment_scheduler.TAGS,
    ),
]

__all__ = ["DeployScript", "DEPLOY_SCRIPTS"]
