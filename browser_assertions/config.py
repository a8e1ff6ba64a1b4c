"""
Configuration for browser assertion runs.
Settings are read from the environment, with values from a local .env file loaded first.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger("browser_assertions.config")

ENV_PREFIX = "BROWSER_ASSERTIONS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {raw!r}")

def _parse_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid integer value for {name}: {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value

@dataclass(frozen=True)
class Settings:
    """Runtime settings for the query layer and the step runner"""
    headless: bool = True
    timeout_ms: int = 5000
    report_dir: str = "reports"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> 'Settings':
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``
            load_env_file: Whether to load a .env file into the environment first

        Returns:
            Settings: Parsed settings, defaults used for unset variables

        Raises:
            ValueError: If a variable holds a value that cannot be parsed
        """
        if load_env_file:
            load_dotenv()
        if environ is None:
            environ = os.environ

        defaults = cls()
        headless = defaults.headless
        timeout_ms = defaults.timeout_ms
        report_dir = defaults.report_dir

        raw = environ.get(f"{ENV_PREFIX}HEADLESS")
        if raw is not None:
            headless = _parse_bool(f"{ENV_PREFIX}HEADLESS", raw)
        raw = environ.get(f"{ENV_PREFIX}TIMEOUT_MS")
        if raw is not None:
            timeout_ms = _parse_int(f"{ENV_PREFIX}TIMEOUT_MS", raw)
        raw = environ.get(f"{ENV_PREFIX}REPORT_DIR")
        if raw:
            report_dir = raw

        settings = cls(headless=headless, timeout_ms=timeout_ms, report_dir=report_dir)
        logger.debug(f"Loaded settings: {settings}")
        return settings
