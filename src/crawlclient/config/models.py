"""
Configuration models for crawlclient.

Pydantic models that validate the HTTP client and logging configuration,
plus the environment-variable settings that override them.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import HttpConstants, LoggingConstants


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class HttpConfig(BaseModel):
    """Identity and transport settings for the HTTP client."""

    user_agent: str = Field(
        HttpConstants.DEFAULT_USER_AGENT, min_length=1, description="User-Agent header value"
    )
    username: Optional[str] = Field(None, description="HTTP Basic authentication username")
    password: Optional[str] = Field(None, description="HTTP Basic authentication password")
    timeout: float = Field(
        HttpConstants.DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=HttpConstants.MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
    )
    max_redirects: int = Field(
        HttpConstants.DEFAULT_MAX_REDIRECTS,
        ge=0,
        le=HttpConstants.MAX_REDIRECTS_LIMIT,
        description="Maximum number of redirects followed per request",
    )
    follow_redirects: bool = Field(True, description="Follow redirects automatically")
    verify_tls: bool = Field(True, description="Verify TLS certificates")
    pool_maxsize: int = Field(
        HttpConstants.DEFAULT_POOL_MAXSIZE,
        ge=1,
        le=1000,
        description="Connections kept per host in the pool",
    )

    @field_validator("username", "password")
    @classmethod
    def validate_credentials(cls, v: Optional[str]) -> Optional[str]:
        # Only an empty value means unset; whitespace is part of the credential
        if v == "":
            return None
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.username or self.password)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        LoggingConstants.DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=LoggingConstants.MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        LoggingConstants.DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class CrawlClientConfig(BaseModel):
    """Main crawlclient configuration model."""

    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
    }


class CrawlClientSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    # HTTP settings
    crawlclient_user_agent: Optional[str] = Field(None, alias="CRAWLCLIENT_USER_AGENT")
    crawlclient_username: Optional[str] = Field(None, alias="CRAWLCLIENT_USERNAME")
    crawlclient_password: Optional[str] = Field(None, alias="CRAWLCLIENT_PASSWORD")
    crawlclient_timeout: Optional[float] = Field(None, alias="CRAWLCLIENT_TIMEOUT")
    crawlclient_max_redirects: Optional[int] = Field(None, alias="CRAWLCLIENT_MAX_REDIRECTS")
    crawlclient_follow_redirects: Optional[bool] = Field(
        None, alias="CRAWLCLIENT_FOLLOW_REDIRECTS"
    )
    crawlclient_verify_tls: Optional[bool] = Field(None, alias="CRAWLCLIENT_VERIFY_TLS")

    # Logging settings
    crawlclient_log_level: Optional[str] = Field(None, alias="CRAWLCLIENT_LOG_LEVEL")
    crawlclient_log_format: Optional[str] = Field(None, alias="CRAWLCLIENT_LOG_FORMAT")
    crawlclient_log_file: Optional[str] = Field(None, alias="CRAWLCLIENT_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
