"""CLI Configuration management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from bincli.core.errors import ConfigError

DEFAULT_BASE_URL = "https://api.jsonbin.io/v3"
DEFAULT_SAVE_FILE = "saved-bins.txt"
DEFAULT_BIN_NAME = "My Bin"


class Settings(BaseSettings):
    """JSONBIN_* variables from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="JSONBIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None


@dataclass
class CLIConfig:
    """Configuration for the bin client."""

    master_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    # None means wait forever
    timeout: Optional[float] = None

    # Defaults for CLI flags
    save_file: str = DEFAULT_SAVE_FILE
    bin_name: str = DEFAULT_BIN_NAME

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "CLIConfig":
        """Create config from environment variables and the .env file.

        Raises:
            ConfigError: if a JSONBIN_* value has the wrong type
        """
        try:
            settings = Settings(_env_file=env_file)
        except ValidationError as e:
            problems = "; ".join(
                f"JSONBIN_{'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"invalid configuration: {problems}", {"errors": e.errors()}) from e
        return cls(
            master_key=settings.key.strip(),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    def require_key(self) -> str:
        """Return the master key, failing if it is not set."""
        if not self.master_key:
            raise ConfigError(
                "JSONBIN_KEY environment variable not set!\n"
                "Get your free key at https://jsonbin.io → Create Account → Master Key"
            )
        return self.master_key


# Global config instance
_config: Optional[CLIConfig] = None


def get_config() -> CLIConfig:
    """Get or create the global CLI configuration."""
    global _config
    if _config is None:
        _config = CLIConfig.from_env()
    return _config


def set_config(config: CLIConfig) -> None:
    """Set the global CLI configuration."""
    global _config
    _config = config
