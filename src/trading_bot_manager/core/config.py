"""Configuration management for the trading bot instance manager."""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import ValidationError

from .models.config_schema import ManagerConfig
from .logging.structured_logger import get_logger


logger = get_logger(__name__)

CONFIG_PATH_ENV = "TRADING_BOT_MANAGER_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/manager.yaml")


class ConfigManager:
    """Manages system configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None):
        env_path = os.getenv(CONFIG_PATH_ENV)
        self.config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._config: Optional[ManagerConfig] = None

    def load(self) -> ManagerConfig:
        """Load and validate configuration from file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r') as f:
                raw_config = yaml.safe_load(f) or {}

            # Interpolate environment variables
            raw_config = self._interpolate_env_vars(raw_config)

            # Validate with Pydantic
            self._config = ManagerConfig(**raw_config)

            logger.info("Configuration loaded successfully", {
                "config_path": str(self.config_path),
                "domain": self._config.manager.domain,
                "container_prefix": self._config.docker.container_prefix,
                "docker_binary": self._config.docker.binary
            })

            return self._config

        except ValidationError as e:
            logger.error("Configuration validation failed", error=e)
            raise
        except Exception as e:
            logger.error("Failed to load configuration", error=e)
            raise

    def _interpolate_env_vars(self, config: Any) -> Any:
        """Replace ${VAR_NAME} with environment variable values."""
        if isinstance(config, dict):
            return {
                key: self._interpolate_env_vars(value)
                for key, value in config.items()
            }
        elif isinstance(config, list):
            return [self._interpolate_env_vars(item) for item in config]
        elif isinstance(config, str) and config.startswith('${') and config.endswith('}'):
            env_var = config[2:-1]
            value = os.getenv(env_var)
            if value is None:
                logger.warning(f"Environment variable not found: {env_var}")
                return config
            return value
        else:
            return config

    def get_config(self) -> ManagerConfig:
        """Get current configuration (load if not loaded)."""
        if self._config is None:
            return self.load()
        return self._config

    def reload(self) -> ManagerConfig:
        """Reload configuration from file."""
        logger.info("Reloading configuration")
        return self.load()

    def export_template(self, output_path: Path):
        """Export a configuration template."""
        template: Dict[str, Any] = {
            "manager": {
                "project_directory": "${MANAGER_PROJECT_DIRECTORY}",
                "host_manager_directory": "${HOST_MANAGER_DIRECTORY}",
                "domain": "${MANAGER_PROJECT_DOMAIN}",
                "scripts_directory": "/tmp/freqtrade-manager/scripts",
                "log_level": "INFO"
            },
            "docker": {
                "binary": "docker",
                "container_prefix": "trading-bot",
                "core_image": "ph3nol/freqtrade:latest",
                "ui_image": "ph3nol/freqtrade-ui:latest",
                "pairlist_image": "alekzonder/puppeteer:latest",
                "timezone_file": "/etc/localtime",
                "command_timeout": None
            }
        }

        with open(output_path, 'w') as f:
            yaml.dump(template, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration template exported to {output_path}")
