"""
Configuration manager for crawlclient.

Loads configuration from a TOML file, applies environment variable
overrides and validates the result against the pydantic models.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from ..constants import ConfigConstants
from ..exceptions.config import ConfigurationError, ConfigurationValidationError
from ..exceptions.base import ExceptionContext
from ..exceptions.templates import ErrorCodes, ErrorMessageTemplates
from .models import CrawlClientConfig, CrawlClientSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: CrawlClientSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


def default_config_file() -> Path:
    return Path.home() / ".config" / ConfigConstants.CONFIG_DIR_NAME / ConfigConstants.CONFIG_FILE_NAME


class ConfigManager:
    """Configuration manager with file, environment and validation support."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses
                ~/.config/crawlclient/config.toml.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[CrawlClientConfig] = None
        self._settings = CrawlClientSettings()

    def load_config(self) -> CrawlClientConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = CrawlClientConfig(**config_data)
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError(
                [f"Configuration validation failed: {e}"]
            ).add_context(file_path=str(self.config_file)) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                ErrorMessageTemplates.CONFIG_FILE_ERROR.format(
                    file_path=self.config_file, details=e
                ),
                ExceptionContext(
                    error_code=ErrorCodes.CONFIG_FILE,
                    help_text="Fix the TOML syntax or remove the file to use defaults",
                    user_action="Run 'crawlclient config --init --force' to replace the file",
                    technical_details=f"{type(e).__name__}: {e}",
                    context={"file_path": str(self.config_file)},
                ),
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply CRAWLCLIENT_* environment variables on top of file values."""
        http = dict(config_data.get("http", {}))
        http_env = EnvironmentOverride(http, self._settings)
        http_env.apply_string_if_set("crawlclient_user_agent", "user_agent")
        http_env.apply_string_if_set("crawlclient_username", "username")
        http_env.apply_string_if_set("crawlclient_password", "password")
        http_env.apply_if_set("crawlclient_timeout", "timeout")
        http_env.apply_if_set("crawlclient_max_redirects", "max_redirects")
        http_env.apply_if_set("crawlclient_follow_redirects", "follow_redirects")
        http_env.apply_if_set("crawlclient_verify_tls", "verify_tls")

        logging_section = dict(config_data.get("logging", {}))
        log_env = EnvironmentOverride(logging_section, self._settings)
        log_env.apply_string_if_set("crawlclient_log_format", "format")
        log_env.apply_string_if_set("crawlclient_log_file", "file_path")
        if self._settings.crawlclient_log_level:
            logging_section["level"] = self._settings.crawlclient_log_level.upper()

        result = dict(config_data)
        if http:
            result["http"] = http
        if logging_section:
            result["logging"] = logging_section
        return result

    def save_config(self, config: Optional[CrawlClientConfig] = None) -> Path:
        """Write the configuration to the TOML file and return its path."""
        config = config or self.load_config()
        data = config.model_dump(mode="json", exclude_none=True)

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(data, f)

        self._config = config
        return self.config_file

    def reset_config(self) -> None:
        """Forget the cached configuration so the next load re-reads sources."""
        self._config = None
