"""
Configuration management for CLI
Loads object storage service credentials from config.yml, config.d and OS_* variables
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "CF_OS_CONFIG_DIR"
DEFAULT_BASE_PATH = Path.home() / ".cf-os"

# OS_* environment variables and the ServiceConfig fields they fill
ENV_FIELDS = {
    "OS_AUTH_URL": "auth_url",
    "OS_USERNAME": "username",
    "OS_PASSWORD": "password",
    "OS_PROJECT_ID": "project_id",
    "OS_PROJECT_NAME": "project_name",
    "OS_USER_DOMAIN_NAME": "user_domain_name",
    "OS_PROJECT_DOMAIN_NAME": "project_domain_name",
    "OS_REGION_NAME": "region",
    "OS_STORAGE_URL": "storage_url",
    "OS_AUTH_TOKEN": "auth_token",
}


@dataclass
class ServiceConfig:
    """Credentials for one object storage service"""
    name: str
    auth_url: str = ""
    username: str = ""
    password: str = ""
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    user_domain_name: str = "Default"
    project_domain_name: str = "Default"
    region: Optional[str] = None
    storage_url: Optional[str] = None
    auth_token: Optional[str] = None
    retries: int = 5

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'ServiceConfig':
        """Create ServiceConfig from a config entry, ignoring unknown keys"""
        known = {f.name for f in fields(cls)} - {"name"}
        values = {key: value for key, value in data.items() if key in known}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown keys for service {name}: {', '.join(sorted(unknown))}")
        return cls(name=name, **values)

    def validate(self):
        """Raise ConfigError if the service cannot be connected to"""
        if self.storage_url and self.auth_token:
            return
        missing = [key for key in ("auth_url", "username", "password") if not getattr(self, key)]
        if missing:
            raise ConfigError(
                f"Service '{self.name}' is missing required settings: {', '.join(missing)}",
                entity=self.name
            )


def get_base_path() -> Path:
    """Directory holding config.yml and config.d"""
    return Path(os.environ.get(CONFIG_DIR_ENV, DEFAULT_BASE_PATH))


def _read_services(config_file: Path) -> Dict[str, ServiceConfig]:
    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    services = {}
    if config and isinstance(config, dict) and isinstance(config.get("services"), dict):
        for name, data in config["services"].items():
            if isinstance(data, dict):
                services[name] = ServiceConfig.from_dict(name, data)
            else:
                logger.warning(f"Service {name} in {config_file.name} is not a mapping, skipping")
    return services


def load_services(base_path: Optional[Path] = None) -> Dict[str, ServiceConfig]:
    """Load services from config.yml, then config.d/*.yml in name order"""
    base_path = base_path or get_base_path()
    config_file = base_path / "config.yml"
    config_dir = base_path / "config.d"
    services = {}

    if config_file.exists():
        try:
            services.update(_read_services(config_file))
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse {config_file}: {e}", cause=e)

    if config_dir.exists():
        for extra_file in sorted(config_dir.glob("*.yml")):
            try:
                services.update(_read_services(extra_file))
            except yaml.YAMLError as e:
                logger.warning(f"Failed to parse {extra_file.name}: {e}")

    logger.debug(f"Loaded {len(services)} services from {base_path}")
    return services


def service_from_env(name: str) -> Optional[ServiceConfig]:
    """Build a service from OS_* variables, if OS_AUTH_URL or OS_STORAGE_URL is set"""
    if not (os.environ.get("OS_AUTH_URL") or os.environ.get("OS_STORAGE_URL")):
        return None
    values = {
        field_name: os.environ[env_name]
        for env_name, field_name in ENV_FIELDS.items()
        if os.environ.get(env_name)
    }
    return ServiceConfig(name=name, **values)


def get_service_config(name: str, base_path: Optional[Path] = None) -> ServiceConfig:
    """Get the configuration for a named service"""
    services = load_services(base_path)
    service = services.get(name) or service_from_env(name)
    if service is None:
        available = ", ".join(sorted(services)) or "none"
        raise ConfigError(
            f"Service '{name}' not found in configuration (available: {available})",
            entity=name
        )
    service.validate()
    return service
