"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, production.yaml)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Variables without which /report cannot be served
REQUIRED_CHAIN_VARIABLES = (
    "RPC_URL",
    "WALLET_PRIVATE_KEY",
    "ESCROW_CONTRACT_ADDRESS",
    "TOKEN_CONTRACT_ADDRESS",
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    The wallet private key must come from the environment, never from a
    YAML file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Vigie"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")

    # API Server
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=3001, ge=1024, le=65535)
    PORT_SEARCH_LIMIT: int = Field(
        default=10,
        ge=1,
        le=100,
        description="How many consecutive ports to probe when API_PORT is busy",
    )

    # CORS Configuration (empty = http://localhost:{API_PORT})
    CORS_ORIGINS: List[str] = Field(default_factory=list)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Blockchain (from environment)
    RPC_URL: Optional[str] = Field(default=None, description="EVM JSON-RPC URL")
    RPC_TIMEOUT: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="HTTP timeout for a single RPC request in seconds",
    )
    WALLET_PRIVATE_KEY: Optional[str] = Field(
        default=None,
        description="Hex private key of the proxy wallet",
        repr=False,
    )
    ESCROW_CONTRACT_ADDRESS: Optional[str] = Field(default=None)
    TOKEN_CONTRACT_ADDRESS: Optional[str] = Field(default=None)

    # Report labels
    CHAIN_NAME: str = Field(default="BSC Testnet")
    NATIVE_SYMBOL: str = Field(default="BNB")
    BLOCKCHAIN_LABEL: str = Field(default="Binance Smart Chain Testnet")
    PROVIDER_LABEL: str = Field(default="Alchemy")
    API_VERSION: str = Field(default="1.0")

    # Local item data
    DATA_PATH: str = Field(default="data/items.json")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator("ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        allowed = ["development", "production", "test"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid ENV. Must be one of: {allowed}")
        return v_lower

    @model_validator(mode="after")
    def default_cors_origins(self) -> "Settings":
        """Allow the API's own localhost origin when none configured."""
        if not self.CORS_ORIGINS:
            self.CORS_ORIGINS = [f"http://localhost:{self.API_PORT}"]
        return self

    @property
    def missing_chain_variables(self) -> List[str]:
        """Names of required blockchain variables that are unset."""
        return [name for name in REQUIRED_CHAIN_VARIABLES if not getattr(self, name)]

    @property
    def chain_configured(self) -> bool:
        """True when every blockchain variable is present."""
        return not self.missing_chain_variables

    def resolve_data_path(self) -> Path:
        """
        Resolve DATA_PATH against the service root.

        Absolute paths are used as-is.
        """
        path = Path(self.DATA_PATH)
        if path.is_absolute():
            return path
        return _service_root() / path


def _service_root() -> Path:
    """Directory holding config/, data/ and tests/."""
    return Path(__file__).resolve().parent.parent.parent.parent


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If a configured value is invalid
    """
    project_root = _service_root()
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "development")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    default_env_file, default_config_file = env_map.get(
        environment, (".env.development", "development.yaml")
    )
    if env_file is None:
        env_file = default_env_file
    if config_file is None:
        config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    env_config_path = config_dir / config_file
    if env_config_path.exists():
        with open(env_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config.update(loaded)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    merged_config.setdefault("ENV", environment)
    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
