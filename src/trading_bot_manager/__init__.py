"""Trading bot instance manager: container lifecycle of trading bot instances."""

from .core.config import ConfigManager
from .core.models import Instance, ManagerConfig
from .process import InstanceProcess, ProcessInvocationError

__all__ = [
    "ConfigManager",
    "Instance",
    "InstanceProcess",
    "ManagerConfig",
    "ProcessInvocationError",
]

__version__ = "1.0.0"
