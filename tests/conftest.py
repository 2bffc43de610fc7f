"""
Pytest configuration and fixtures
"""
import pytest
from typing import Dict, List, Sequence

from trading_bot_manager.core.models import Instance, ManagerConfig
from trading_bot_manager.process import InstanceProcess, ProcessResult


class FakeRunner:
    """Records argument vectors and replays scripted results.

    Results are keyed by the docker subcommand (``run``, ``kill``, ``rm``,
    ``ps``) or by the executable for anything else. Docker results can be
    narrowed to one container with ``"<subcommand>:<container name>"``.
    The last scripted result for a key is replayed for every later call.
    """

    def __init__(self):
        self.commands: List[List[str]] = []
        self._results: Dict[str, List[ProcessResult]] = {}

    def script(self, key: str, returncode: int = 0, stdout: str = "", stderr: str = ""):
        self._results.setdefault(key, []).append(
            ProcessResult(command=[], returncode=returncode, stdout=stdout, stderr=stderr)
        )

    def _key(self, command: Sequence[str]) -> List[str]:
        if command[0] != "docker":
            return [command[0]]

        subcommand = command[1]
        if subcommand == "run":
            name = command[command.index("--name") + 1]
        elif subcommand == "ps":
            name = command[-1][len("name=^/?"):-1]
        else:
            name = command[-1]
        return [f"{subcommand}:{name}", subcommand]

    def run(self, command: Sequence[str]) -> ProcessResult:
        argv = list(command)
        self.commands.append(argv)
        for key in self._key(argv):
            queued = self._results.get(key)
            if queued:
                scripted = queued.pop(0) if len(queued) > 1 else queued[0]
                return ProcessResult(argv, scripted.returncode, scripted.stdout, scripted.stderr)
        return ProcessResult(argv, 0, "", "")

    def invoked(self, *prefix: str) -> List[List[str]]:
        """Recorded commands starting with the given arguments."""
        return [c for c in self.commands if c[:len(prefix)] == list(prefix)]


@pytest.fixture
def manager_config() -> ManagerConfig:
    return ManagerConfig(
        manager={
            "project_directory": "/srv/manager",
            "host_manager_directory": "/home/manager",
            "domain": "bots.example.com",
        }
    )


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def instance_process(manager_config, fake_runner) -> InstanceProcess:
    return InstanceProcess(manager_config, runner=fake_runner)


@pytest.fixture
def sample_instance_data() -> dict:
    """Sample stored instance for testing."""
    return {
        "slug": "alpha",
        "strategy": "BBRSI",
        "config": {"stake_currency": "USDT"},
        "parameters": {"ports": {"api": 18080, "ui": 18081}},
        "files": {
            "host": {
                "config": "/data/alpha/config.json",
                "logs": "/data/alpha/freqtrade.log",
                "db_dry_run": "/data/alpha/tradesv3.dryrun.sqlite",
                "db_production": "/data/alpha/tradesv3.sqlite",
            }
        },
        "directories": {"host": {"data": "/data/alpha/user_data"}},
    }


@pytest.fixture
def sample_instance(sample_instance_data) -> Instance:
    return Instance.from_dict(sample_instance_data)
