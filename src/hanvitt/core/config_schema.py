"""Pydantic models for config validation.

``Config.validated()`` turns the merged dict into a ``HanvittConfig``.
Environment overrides arrive as strings; pydantic coerces them
(``HANVITT_SMTP__PORT=587`` becomes ``587``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    log_dir: Path | None = None
    ledger_file: Path | None = None
    contact_file: Path | None = None

    @field_validator("data_dir", "log_dir", "ledger_file", "contact_file", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"unknown log level {v!r}")
        return v


class SmtpConfig(BaseModel):
    """Outbound mail server used for contact-request notifications."""

    host: str = "smtp.gmail.com"
    port: int = 465
    user: str = ""
    password: str = ""
    use_ssl: bool = True
    timeout: int = 30


class ContactConfig(BaseModel):
    sender: str = '"Hanvitt Advisors" <noreply@hanvitt.in>'
    recipient: str = "help@hanvitt.in"


class LedgerConfig(BaseModel):
    storage_key: str = "hanvitt-wealth-tracker"
    trend_months: int = 6

    @field_validator("trend_months")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("trend_months must be at least 1")
        return v


class HanvittConfig(BaseModel):
    """Root configuration model.

    ``extra="allow"`` lets deployments add their own sections.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig = PathsConfig(data_dir=Path("~/.hanvitt-data"))
    logging: LoggingConfig = LoggingConfig()
    smtp: SmtpConfig = SmtpConfig()
    contact: ContactConfig = ContactConfig()
    ledger: LedgerConfig = LedgerConfig()
