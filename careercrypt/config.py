import logging
import os
import sys
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

from careercrypt.domain.portfolio.service.index import DEFAULT_INDEX_KEY
from careercrypt.domain.portfolio.service.store import DEFAULT_RECORD_PREFIX
from careercrypt.domain.shared.error import ConfigurationError


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by CAREERCRYPT_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get("CAREERCRYPT_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    """Server configuration (nested in Config, uses env_nested_delimiter)."""

    name: str = "CareerCrypt"
    version: str = "0.1.0"
    description: str = "Career portfolios published to a key-value ledger"


class LedgerConfig(BaseModel):
    """Ledger configuration (nested in Config, uses env_nested_delimiter).

    ``memory`` keeps everything in process and is meant for development and
    tests. ``http`` talks to a ledger gateway at ``url``.
    """

    backend: Literal["memory", "http"] = "memory"
    url: str = ""
    timeout: float | None = 10.0  # Seconds per request; None disables
    index_key: str = DEFAULT_INDEX_KEY
    record_prefix: str = DEFAULT_RECORD_PREFIX


class EncryptionConfig(BaseModel):
    """Placeholder encryption settings."""

    prefix: str = "FHE-"


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from CAREERCRYPT_LOG_FILE env var."""
        return os.environ.get("CAREERCRYPT_LOG_FILE")


class Config(BaseSettings):
    server: Server = Server()
    ledger: LedgerConfig = LedgerConfig()
    encryption: EncryptionConfig = EncryptionConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "CAREERCRYPT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows CAREERCRYPT_LEDGER__URL override
    }

    @model_validator(mode="after")
    def require_ledger_url(self) -> Self:
        if self.ledger.backend == "http" and not self.ledger.url:
            raise ConfigurationError("ledger.url must be set when ledger.backend is 'http'")
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority (highest to lowest): init, env, .env, YAML, secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Route all module loggers through one handler on the root logger.

    Logs go to ``CAREERCRYPT_LOG_FILE`` when it is set, otherwise to stderr.
    Calling it again replaces the previous handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler: logging.Handler
    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    root_logger.addHandler(handler)

    # Transport chatter from the ledger client
    for noisy in ("httpx", "httpcore", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
