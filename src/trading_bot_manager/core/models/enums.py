"""Core enumerations for the trading bot instance manager."""
from enum import Enum


class ContainerRole(str, Enum):
    """Containers that make up one running instance."""
    CORE = "core"
    UI = "ui"
    PAIRLIST = "get-instance-config-pairlist"


class FailurePolicy(str, Enum):
    """How an operation reacts to a failed external invocation."""
    STRICT = "strict"            # raise ProcessInvocationError
    LENIENT = "lenient"          # return a safe default
    BEST_EFFORT = "best_effort"  # complete silently, nothing to report
