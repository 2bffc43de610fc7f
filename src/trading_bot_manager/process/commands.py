"""Argument vectors for every container runtime invocation.

Container-side paths, ports and variable names below are part of the
contract with the core, UI and scraper images and must not change.
"""
from typing import List

from ..core.models import Instance, ManagerConfig

CORE_DIRECTORY = "/freqtrade"
CORE_CONFIG_PATH = f"{CORE_DIRECTORY}/config.json"
CORE_STRATEGY_PATH = f"{CORE_DIRECTORY}/strategy.py"
CORE_LOG_PATH = f"{CORE_DIRECTORY}/freqtrade.log"
CORE_DATA_PATH = f"{CORE_DIRECTORY}/user_data"
CORE_DB_DRY_RUN_PATH = f"{CORE_DIRECTORY}/tradesv3.dryrun.sqlite"
CORE_DB_PRODUCTION_PATH = f"{CORE_DIRECTORY}/tradesv3.sqlite"
CORE_API_PORT = 8080

UI_WEB_PORT = 80
UI_ENTRYPOINT_SCRIPT = "ui-instance-entrypoint.sh"
UI_ENTRYPOINT_PATH = f"/docker-entrypoint.d/100-{UI_ENTRYPOINT_SCRIPT}"
UI_API_PORT_ENV = "TRADING_BOT_API_PORT"
UI_DOMAIN_ENV = "TRADING_BOT_DOMAIN"

PAIRLIST_SCRIPT = "scrap-instance-config-pairlist.js"
PAIRLIST_SCRIPT_PATH = "/app/index.js"
PAIRLIST_PAIR_ENV = "TRADING_BOT_INSTANCE_CONFIG_PAIR"


def _volume(host_path: str, container_path: str, mode: str) -> List[str]:
    return ["--volume", f"{host_path}:{container_path}:{mode}"]


def _detached_run(config: ManagerConfig, name: str) -> List[str]:
    return [config.docker.binary, "run", "--name", name, "--detach", "--restart=always"]


def strategy_host_path(config: ManagerConfig, instance: Instance) -> str:
    return f"{config.manager.host_manager_directory}/strategies/{instance.strategy}.py"


def build_core_run(config: ManagerConfig, instance: Instance, name: str) -> List[str]:
    """Start the trading engine detached, restarting on failure."""
    return [
        *_detached_run(config, name),
        *_volume(config.docker.timezone_file, "/etc/localtime", "ro"),
        *_volume(instance.host_config_file, CORE_CONFIG_PATH, "ro"),
        *_volume(strategy_host_path(config, instance), CORE_STRATEGY_PATH, "ro"),
        *_volume(instance.host_log_file, CORE_LOG_PATH, "rw"),
        *_volume(instance.host_data_directory, CORE_DATA_PATH, "rw"),
        *_volume(instance.host_db_dry_run, CORE_DB_DRY_RUN_PATH, "rw"),
        *_volume(instance.host_db_production, CORE_DB_PRODUCTION_PATH, "rw"),
        "--publish", f"{instance.api_port}:{CORE_API_PORT}/tcp",
        config.docker.core_image,
        "trade",
        "--config", CORE_CONFIG_PATH,
        "--logfile", CORE_LOG_PATH,
        "--strategy-path", CORE_DIRECTORY,
        "--strategy", instance.strategy,
    ]


def build_ui_run(config: ManagerConfig, instance: Instance, name: str) -> List[str]:
    """Start the web UI detached, pointed at the instance API port."""
    entrypoint = f"{config.manager.scripts_directory}/{UI_ENTRYPOINT_SCRIPT}"
    return [
        *_detached_run(config, name),
        "-e", f"{UI_API_PORT_ENV}={instance.api_port}",
        "-e", f"{UI_DOMAIN_ENV}={config.manager.domain}",
        *_volume(config.docker.timezone_file, "/etc/localtime", "ro"),
        *_volume(entrypoint, UI_ENTRYPOINT_PATH, "ro"),
        "--publish", f"{instance.ui_port}:{UI_WEB_PORT}/tcp",
        config.docker.ui_image,
    ]


def build_pairlist_run(config: ManagerConfig, instance: Instance, name: str) -> List[str]:
    script = f"{config.manager.scripts_directory}/{PAIRLIST_SCRIPT}"
    return [
        config.docker.binary, "run", "--rm", "--name", name,
        "-e", f"{PAIRLIST_PAIR_ENV}={instance.stake_currency}",
        "-v", f"{script}:{PAIRLIST_SCRIPT_PATH}",
        config.docker.pairlist_image,
    ]


def build_kill(config: ManagerConfig, name: str) -> List[str]:
    return [config.docker.binary, "kill", name]


def build_remove(config: ManagerConfig, name: str) -> List[str]:
    return [config.docker.binary, "rm", name]


def build_running_query(config: ManagerConfig, name: str) -> List[str]:
    # Docker matches name filters as unanchored regexes against "/<name>"
    pattern = name.replace(".", r"\.")
    return [config.docker.binary, "ps", "-q", "-f", f"name=^/?{pattern}$"]
