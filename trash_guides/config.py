"""
TRaSH Guides client configuration.

Provides YAML configuration loading and validation.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_BASE_URL = "https://raw.githubusercontent.com/TRaSH-Guides/Guides/master/docs/json"
DEFAULT_API_URL = "https://api.github.com/repos/TRaSH-Guides/Guides/contents/docs/json"
DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

CONFIG_ENV_VAR = "TRASH_GUIDES_CONFIG"


@dataclass
class TrashConfig:
    """
    Client configuration.

    Can be loaded from a YAML file or created programmatically.
    """
    # Source
    base_url: str = DEFAULT_BASE_URL
    api_url: str = DEFAULT_API_URL

    # Cache
    cache_ttl: float = 3600.0  # seconds

    # Fetching
    concurrency_limit: int = 20  # custom-format fetches in flight per batch
    timeout: float = 30.0
    user_agent: str = "trash-guides-cache/1.0"

    # Logging
    log_level: str = "INFO"
    log_file: str = ""
    log_format: str = DEFAULT_LOG_FORMAT
    log_max_bytes: int = 10485760  # 10MB
    log_backup_count: int = 3

    # Rate limiting
    rate_limit_enabled: bool = False
    rate_limit_rpm: int = 60  # requests per minute
    rate_limit_burst: int = 10

    def __post_init__(self) -> None:
        if self.concurrency_limit <= 0:
            raise ValueError("concurrency_limit must be greater than 0")
        if self.cache_ttl < 0:
            raise ValueError("cache_ttl must not be negative")
        self.base_url = self.base_url.rstrip("/")
        self.api_url = self.api_url.rstrip("/")

    @classmethod
    def load(cls, path: str) -> "TrashConfig":
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid YAML
            ValueError: If the file is not a mapping or a value is out of range
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrashConfig":
        """Create configuration from a dictionary of sections."""
        source_cfg = data.get("source", {})
        cache_cfg = data.get("cache", {})
        fetch_cfg = data.get("fetch", {})
        logging_cfg = data.get("logging", {})
        rate_limit_cfg = data.get("rate_limit", {})

        return cls(
            base_url=source_cfg.get("base_url", DEFAULT_BASE_URL),
            api_url=source_cfg.get("api_url", DEFAULT_API_URL),
            cache_ttl=cache_cfg.get("ttl", 3600.0),
            concurrency_limit=fetch_cfg.get("concurrency_limit", 20),
            timeout=fetch_cfg.get("timeout", 30.0),
            user_agent=fetch_cfg.get("user_agent", "trash-guides-cache/1.0"),
            log_level=logging_cfg.get("level", "INFO"),
            log_file=logging_cfg.get("file", ""),
            log_format=logging_cfg.get("format", DEFAULT_LOG_FORMAT),
            log_max_bytes=logging_cfg.get("max_bytes", 10485760),
            log_backup_count=logging_cfg.get("backup_count", 3),
            rate_limit_enabled=rate_limit_cfg.get("enabled", False),
            rate_limit_rpm=rate_limit_cfg.get("requests_per_minute", 60),
            rate_limit_burst=rate_limit_cfg.get("burst", 10),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": {
                "base_url": self.base_url,
                "api_url": self.api_url,
            },
            "cache": {
                "ttl": self.cache_ttl,
            },
            "fetch": {
                "concurrency_limit": self.concurrency_limit,
                "timeout": self.timeout,
                "user_agent": self.user_agent,
            },
            "logging": {
                "level": self.log_level,
                "file": self.log_file,
                "format": self.log_format,
                "max_bytes": self.log_max_bytes,
                "backup_count": self.log_backup_count,
            },
            "rate_limit": {
                "enabled": self.rate_limit_enabled,
                "requests_per_minute": self.rate_limit_rpm,
                "burst": self.rate_limit_burst,
            },
        }

    def save(self, path: str) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)


def find_config() -> Optional[str]:
    """
    Find a config file using the standard priority order:

    1. TRASH_GUIDES_CONFIG environment variable
    2. .trash-guides.yaml in the current directory
    3. ~/.config/trash-guides/config.yaml

    Returns None if no config found.
    """
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        path = Path(env_config)
        if path.exists():
            return str(path)

    project_config = Path.cwd() / ".trash-guides.yaml"
    if project_config.exists():
        return str(project_config)

    user_config = Path.home() / ".config" / "trash-guides" / "config.yaml"
    if user_config.exists():
        return str(user_config)

    return None
