"""Configuration schemas using Pydantic for validation."""
from typing import Optional, List
from pydantic import BaseModel, Field, validator


class ManagerSettings(BaseModel):
    """Deployment-level settings of the manager application."""
    project_directory: str
    host_manager_directory: str
    domain: str
    scripts_directory: str = "/tmp/freqtrade-manager/scripts"
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @validator('project_directory', 'host_manager_directory')
    def strip_trailing_slash(cls, v):
        if not v:
            raise ValueError("Directory must not be empty")
        return v.rstrip('/') or '/'


class DockerConfig(BaseModel):
    """Container runtime configuration."""
    binary: str = "docker"
    container_prefix: str = Field(default="trading-bot", pattern=r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")
    core_image: str = "ph3nol/freqtrade:latest"
    ui_image: str = "ph3nol/freqtrade-ui:latest"
    pairlist_image: str = "alekzonder/puppeteer:latest"
    timezone_file: str = "/etc/localtime"
    command_timeout: Optional[float] = Field(default=None, gt=0)  # seconds


class ManagerConfig(BaseModel):
    """Main instance manager configuration."""
    manager: ManagerSettings
    docker: DockerConfig = Field(default_factory=DockerConfig)
    port_command: Optional[List[str]] = None

    @validator('port_command')
    def validate_port_command(cls, v):
        if v is not None and not v:
            raise ValueError("port_command must contain at least the executable")
        return v

    @property
    def resolved_port_command(self) -> List[str]:
        """Argument vector printing a free host TCP port."""
        if self.port_command:
            return list(self.port_command)
        return [
            "sh",
            f"{self.manager.project_directory}/scripts/generate-random-available-port.sh",
        ]
