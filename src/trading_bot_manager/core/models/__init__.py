"""Core models module for the trading bot instance manager."""

from .enums import (
    ContainerRole,
    FailurePolicy,
)

from .data_models import (
    Instance,
    ContainerNames,
    ContainerIds,
    InstanceStatus,
)

from .config_schema import (
    ManagerSettings,
    DockerConfig,
    ManagerConfig,
)

__all__ = [
    # Enums
    "ContainerRole",
    "FailurePolicy",
    # Data Models
    "Instance",
    "ContainerNames",
    "ContainerIds",
    "InstanceStatus",
    # Config Schemas
    "ManagerSettings",
    "DockerConfig",
    "ManagerConfig",
]
