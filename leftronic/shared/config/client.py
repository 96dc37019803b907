from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from leftronic.errors import ConfigError
from leftronic.shared.logging.logger import get_logger

log = get_logger("shared.config.client")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LeftronicConfig:
    """
    Construction-time client settings.

    access_key and max_concurrency are required; timeout is handed to the
    HTTP transport unchanged.
    """

    access_key: str
    max_concurrency: int
    timeout: float = 10.0
    validate_payloads: bool = False

    def validate(self) -> None:
        problems = []
        if not isinstance(self.access_key, str) or not self.access_key.strip():
            problems.append("access_key must be a non-empty string")
        if (
            isinstance(self.max_concurrency, bool)
            or not isinstance(self.max_concurrency, int)
            or self.max_concurrency < 1
        ):
            problems.append(
                f"max_concurrency must be a positive integer (got {self.max_concurrency!r})"
            )
        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            problems.append(f"timeout must be a positive number (got {self.timeout!r})")

        if problems:
            raise ConfigError("Invalid Leftronic configuration: " + "; ".join(problems))


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer (got {raw!r})") from e


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number (got {raw!r})") from e


def load_env_config(dotenv_path: Optional[str] = None) -> LeftronicConfig:
    """
    Load client settings from the environment (and a .env file, if present)
    without logging the access key.

    Required:
      LEFTRONIC_ACCESS_KEY, LEFTRONIC_MAX_CONCURRENCY
    Optional:
      LEFTRONIC_TIMEOUT (seconds), LEFTRONIC_VALIDATE_PAYLOADS (1/true/yes/on)
    """
    load_dotenv(dotenv_path=dotenv_path)

    access_key = os.getenv("LEFTRONIC_ACCESS_KEY", "")
    raw_concurrency = os.getenv("LEFTRONIC_MAX_CONCURRENCY", "")

    missing = []
    if not access_key:
        missing.append("LEFTRONIC_ACCESS_KEY")
    if not raw_concurrency:
        missing.append("LEFTRONIC_MAX_CONCURRENCY")
    if missing:
        raise ConfigError(
            "Leftronic configuration missing required env vars: " + ", ".join(missing)
        )

    raw_timeout = os.getenv("LEFTRONIC_TIMEOUT")
    config = LeftronicConfig(
        access_key=access_key,
        max_concurrency=_parse_int("LEFTRONIC_MAX_CONCURRENCY", raw_concurrency),
        timeout=_parse_float("LEFTRONIC_TIMEOUT", raw_timeout) if raw_timeout else 10.0,
        validate_payloads=os.getenv("LEFTRONIC_VALIDATE_PAYLOADS", "").strip().lower() in _TRUTHY,
    )
    config.validate()
    log.debug(
        f"Loaded config (max_concurrency={config.max_concurrency}, "
        f"timeout={config.timeout}s, validate_payloads={config.validate_payloads})"
    )
    return config
