"""Configuration from environment.

Suite settings are loaded once at startup (see tests/conftest.py). Outside the
development environment both base URLs must be set explicitly.
"""
import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from utils.errors import ConfigError

DEVELOPMENT = "development"

DEFAULT_API_BASE_URL = "http://localhost:3001"
DEFAULT_UI_BASE_URL = "http://localhost:3000"

# Reference service DB (in-memory unless overridden).
DATABASE_URL = os.environ.get("REFERENCE_DATABASE_URL", "sqlite:///:memory:")

_TRUE_VALUES = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Recognized suite options."""

    api_base_url: str
    ui_base_url: str
    environment: str = DEVELOPMENT
    # "stub" runs API scenarios in-process against the reference service;
    # "local" serves it on a loopback port so UI scenarios can run too.
    target: Literal["stub", "local", "live"] = "stub"
    ui_timeout_s: float = Field(default=10.0, gt=0)
    headless: bool = True

    @field_validator("api_base_url", "ui_base_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"expected an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @property
    def is_live(self) -> bool:
        return self.target == "live"

    @property
    def uses_browser(self) -> bool:
        return self.target in ("local", "live")


def _get(environ: Mapping[str, str], key: str) -> str | None:
    """Get env value; empty string treated as unset."""
    value = environ.get(key, "").strip()
    return value or None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables. Raises ConfigError on bad or missing values."""
    if environ is None:
        environ = os.environ
    environment = _get(environ, "E2E_ENV") or DEVELOPMENT
    api_base_url = _get(environ, "API_BASE_URL")
    ui_base_url = _get(environ, "UI_BASE_URL")

    if environment != DEVELOPMENT:
        missing = [
            name
            for name, value in (("API_BASE_URL", api_base_url), ("UI_BASE_URL", ui_base_url))
            if value is None
        ]
        if missing:
            raise ConfigError(f"{', '.join(missing)} must be set when E2E_ENV={environment}")

    values: dict = {
        "api_base_url": api_base_url or DEFAULT_API_BASE_URL,
        "ui_base_url": ui_base_url or DEFAULT_UI_BASE_URL,
        "environment": environment,
    }
    if (target := _get(environ, "E2E_TARGET")) is not None:
        values["target"] = target.lower()
    if (timeout := _get(environ, "E2E_UI_TIMEOUT_S")) is not None:
        values["ui_timeout_s"] = timeout
    if (headless := _get(environ, "E2E_HEADLESS")) is not None:
        values["headless"] = headless.lower() in _TRUE_VALUES

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
