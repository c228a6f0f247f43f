"""Settings read once from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


def _first_env(*names, default=None):
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


def _env_float(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    backend_url: Optional[str]
    request_timeout: float
    log_level: str

    @staticmethod
    def from_env(dotenv=True):
        """
        Build Settings from environment variables.

        Args:
            dotenv: Load .env from the working directory first (existing variables win)
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        return Settings(
            # NEXT_PUBLIC_ prefix kept so an existing frontend .env works unchanged
            backend_url=_first_env("BACKEND_URL", "NEXT_PUBLIC_BACKEND_URL"),
            request_timeout=_env_float("TODO_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            log_level=(_first_env("TODO_LOG_LEVEL", default=DEFAULT_LOG_LEVEL)).upper(),
        )

    def require_backend_url(self):
        if not self.backend_url:
            raise ConfigError(
                "Missing backend URL! Set BACKEND_URL in the environment or in a .env file."
            )
        return self.backend_url
