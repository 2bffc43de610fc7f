"""Deterministic runtime names for instance containers."""
from ..core.models import ContainerNames, ContainerRole, Instance

DEFAULT_PREFIX = "trading-bot"


def container_name(instance: Instance, role: ContainerRole, prefix: str = DEFAULT_PREFIX) -> str:
    return f"{prefix}-{instance.slug}-{role.value}"


def container_names(instance: Instance, prefix: str = DEFAULT_PREFIX) -> ContainerNames:
    """Names of every container an instance can own."""
    return ContainerNames(
        core=container_name(instance, ContainerRole.CORE, prefix),
        ui=container_name(instance, ContainerRole.UI, prefix),
        pairlist=container_name(instance, ContainerRole.PAIRLIST, prefix),
    )
