"""Failure policy declared by each public process operation."""
from typing import Callable, Dict, TypeVar

from ..core.models import FailurePolicy

F = TypeVar("F", bound=Callable)

OPERATION_POLICIES: Dict[str, FailurePolicy] = {}


def operation(policy: FailurePolicy) -> Callable[[F], F]:
    """Mark a method as a process operation with the given failure policy."""
    def decorator(func: F) -> F:
        func.failure_policy = policy
        OPERATION_POLICIES[func.__name__] = policy
        return func
    return decorator


def policy_of(func: Callable) -> FailurePolicy:
    """Failure policy of a decorated operation (bound or unbound)."""
    target = getattr(func, "__func__", func)
    try:
        return target.failure_policy
    except AttributeError:
        raise ValueError(f"{target.__name__} is not a process operation") from None
