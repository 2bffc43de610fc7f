"""Core data models for the trading bot instance manager."""
import re
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Mapping


SLUG_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


@dataclass(frozen=True)
class Instance:
    """A trading bot instance as seen by the process layer (read-only)."""
    slug: str
    strategy: str
    config: Dict[str, Any] = field(default_factory=dict)
    parameters: Dict[str, Any] = field(default_factory=dict)
    files: Dict[str, Any] = field(default_factory=dict)
    directories: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Instance":
        """Build an instance from its stored representation."""
        slug = str(data.get("slug") or "")
        if not SLUG_PATTERN.match(slug):
            raise ValueError(f"Invalid instance slug: {slug!r}")

        return cls(
            slug=slug,
            strategy=str(data["strategy"]),
            config=dict(data.get("config") or {}),
            parameters=dict(data.get("parameters") or {}),
            files=dict(data.get("files") or {}),
            directories=dict(data.get("directories") or {}),
        )

    @property
    def stake_currency(self) -> str:
        return self.config["stake_currency"]

    @property
    def api_port(self) -> int:
        return int(self.parameters["ports"]["api"])

    @property
    def ui_port(self) -> int:
        return int(self.parameters["ports"]["ui"])

    @property
    def host_config_file(self) -> str:
        return self.files["host"]["config"]

    @property
    def host_log_file(self) -> str:
        return self.files["host"]["logs"]

    @property
    def host_db_dry_run(self) -> str:
        return self.files["host"]["db_dry_run"]

    @property
    def host_db_production(self) -> str:
        return self.files["host"]["db_production"]

    @property
    def host_data_directory(self) -> str:
        return self.directories["host"]["data"]


@dataclass(frozen=True)
class ContainerNames:
    """Runtime container names derived from an instance slug."""
    core: str
    ui: str
    pairlist: str


@dataclass
class ContainerIds:
    """Identifiers returned by the runtime for a launched instance."""
    core: str
    ui: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"core": self.core, "ui": self.ui}


@dataclass
class InstanceStatus:
    """Liveness snapshot of both instance containers."""
    slug: str
    core_running: bool
    ui_running: bool

    @property
    def is_running(self) -> bool:
        """An instance is running when its core is; the UI is optional."""
        return self.core_running

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "core_running": self.core_running,
            "ui_running": self.ui_running,
            "is_running": self.is_running,
        }
