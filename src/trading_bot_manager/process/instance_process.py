"""Lifecycle operations for trading bot instance containers.

Every operation derives container names from the instance slug, runs one
or two container runtime invocations synchronously and maps the outcome
according to its failure policy:

- STRICT operations raise ProcessInvocationError.
- LENIENT operations return a safe default (empty list, None).
- BEST_EFFORT operations never report failure.
"""
import json
from typing import List, Optional, Sequence

from .commands import (
    build_core_run,
    build_kill,
    build_pairlist_run,
    build_remove,
    build_running_query,
    build_ui_run,
)
from .errors import ProcessInvocationError
from .naming import container_names
from .policy import operation
from .runner import ProcessResult, ProcessRunner
from ..core.logging.structured_logger import get_logger
from ..core.models import (
    ContainerIds,
    ContainerNames,
    FailurePolicy,
    Instance,
    InstanceStatus,
    ManagerConfig,
)


logger = get_logger(__name__)

DEFAULT_PAIRS_COUNT = 50
MAX_PORT = 65535


class InstanceProcess:
    """Stateless orchestrator of the core and UI containers of instances."""

    def __init__(self, config: ManagerConfig, runner: Optional[ProcessRunner] = None):
        self.config = config
        self.runner = runner or ProcessRunner(timeout=config.docker.command_timeout)
        logger.set_level(config.manager.log_level)

    def names(self, instance: Instance) -> ContainerNames:
        return container_names(instance, self.config.docker.container_prefix)

    def _invoke(self, operation_name: str, command: Sequence[str]) -> ProcessResult:
        result = self.runner.run(command)
        logger.log_invocation(operation_name, result.command, result.returncode)
        return result

    def _fail(self, operation_name: str, result: ProcessResult,
              reason: Optional[str] = None) -> ProcessInvocationError:
        error = result.to_error(reason)
        logger.error(f"{operation_name} failed", {
            "returncode": result.returncode,
            "stderr": result.stderr.strip(),
        }, error=error)
        return error

    # Derived data

    @operation(FailurePolicy.STRICT)
    def generate_host_random_available_port(self) -> int:
        """Ask the host for a free TCP port."""
        result = self._invoke("generate_port", self.config.resolved_port_command)
        if not result.successful:
            raise self._fail("generate_port", result)

        try:
            port = int(result.stdout.strip())
        except ValueError:
            raise self._fail("generate_port", result, "Output is not a port number") from None

        if not 0 < port <= MAX_PORT:
            raise self._fail("generate_port", result, f"Port {port} is out of range")

        return port

    @operation(FailurePolicy.LENIENT)
    def get_instance_pairlist(self, instance: Instance,
                              pairs_count: int = DEFAULT_PAIRS_COUNT) -> List[str]:
        """Scrape a suggested pair whitelist for the instance stake currency.

        The list is advisory: any failure yields an empty list.
        """
        command = build_pairlist_run(self.config, instance, self.names(instance).pairlist)
        result = self._invoke("get_pairlist", command)
        if not result.successful:
            logger.warning("Pairlist scraping failed", {
                "instance": instance.slug,
                "returncode": result.returncode,
                "stderr": result.stderr.strip(),
            })
            return []

        try:
            pairs = json.loads(result.stdout)
        except ValueError:
            logger.warning("Pairlist output is not valid JSON", {
                "instance": instance.slug,
                "stdout": result.stdout[:200],
            })
            return []

        if not isinstance(pairs, list):
            return []

        unique_pairs = list(dict.fromkeys(pair for pair in pairs if isinstance(pair, str)))
        return unique_pairs[:max(pairs_count, 0)]

    # Launch

    def run_instance_trading(self, instance: Instance, with_ui: bool = True) -> ContainerIds:
        """Start the core container, then the UI one if requested.

        A core failure propagates; a UI failure leaves ``ui`` unset.
        """
        container_ids = ContainerIds(core=self.run_instance_trading_core(instance))

        if with_ui:
            container_ids.ui = self.run_instance_trading_ui(instance)

        return container_ids

    @operation(FailurePolicy.STRICT)
    def run_instance_trading_core(self, instance: Instance) -> str:
        name = self.names(instance).core
        result = self._invoke("run_core", build_core_run(self.config, instance, name))
        if not result.successful:
            raise self._fail("run_core", result)

        container_id = result.stdout.strip()
        logger.log_container_event("started", instance.slug, name, container_id)
        return container_id

    @operation(FailurePolicy.LENIENT)
    def run_instance_trading_ui(self, instance: Instance) -> Optional[str]:
        name = self.names(instance).ui
        result = self._invoke("run_ui", build_ui_run(self.config, instance, name))
        if not result.successful:
            logger.warning("UI container could not be started", {
                "instance": instance.slug,
                "container": name,
                "returncode": result.returncode,
                "stderr": result.stderr.strip(),
            })
            return None

        container_id = result.stdout.strip()
        logger.log_container_event("started", instance.slug, name, container_id)
        return container_id

    # Stop

    def stop_instance(self, instance: Instance) -> None:
        self.stop_instance_core(instance)
        self.stop_instance_ui(instance)

    @operation(FailurePolicy.BEST_EFFORT)
    def stop_instance_core(self, instance: Instance) -> None:
        self._stop_container(instance, self.names(instance).core)

    @operation(FailurePolicy.BEST_EFFORT)
    def stop_instance_ui(self, instance: Instance) -> None:
        self._stop_container(instance, self.names(instance).ui)

    def _stop_container(self, instance: Instance, name: str) -> None:
        # The container may already be stopped or gone
        killed = self._invoke("kill", build_kill(self.config, name))
        removed = self._invoke("remove", build_remove(self.config, name))

        if killed.successful or removed.successful:
            logger.log_container_event("stopped", instance.slug, name)
        else:
            logger.debug("Nothing to stop", {"instance": instance.slug, "container": name})

    # Liveness

    @operation(FailurePolicy.STRICT)
    def is_instance_core_running(self, instance: Instance) -> bool:
        return self._is_running(self.names(instance).core)

    @operation(FailurePolicy.STRICT)
    def is_instance_ui_running(self, instance: Instance) -> bool:
        return self._is_running(self.names(instance).ui)

    @operation(FailurePolicy.STRICT)
    def get_instance_status(self, instance: Instance) -> InstanceStatus:
        return InstanceStatus(
            slug=instance.slug,
            core_running=self.is_instance_core_running(instance),
            ui_running=self.is_instance_ui_running(instance),
        )

    def _is_running(self, name: str) -> bool:
        result = self._invoke("is_running", build_running_query(self.config, name))
        if not result.successful:
            raise self._fail("is_running", result)
        return bool(result.stdout.strip())
