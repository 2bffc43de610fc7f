"""Container process orchestration for trading bot instances."""

from .errors import ProcessInvocationError
from .instance_process import InstanceProcess
from .naming import container_names
from .policy import OPERATION_POLICIES, policy_of
from .runner import ProcessResult, ProcessRunner

__all__ = [
    "InstanceProcess",
    "ProcessInvocationError",
    "ProcessResult",
    "ProcessRunner",
    "container_names",
    "OPERATION_POLICIES",
    "policy_of",
]
