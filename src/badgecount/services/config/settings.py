"""CounterSettings - runtime configuration for the badge counter.

Values come from a .env file (default: the user config dir) overlaid with
BADGECOUNT_* environment variables. Missing keys fall back to defaults.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values
from platformdirs import user_config_dir

ENV_PREFIX = "BADGECOUNT_"
DEFAULT_ENV_PATH = Path(user_config_dir("badgecount")) / ".env"


class SettingsError(ValueError):
    """A configuration value could not be parsed."""


@dataclass
class CounterSettings:
    """Configuration for the counter app."""

    DEFAULT_APP_ID: ClassVar[str] = "org.example.badgecount"
    DEFAULT_AUTOINCREMENT_INTERVAL: ClassVar[float] = 1.5
    DEFAULT_SLIDE_DURATION: ClassVar[float] = 0.3

    app_id: str = DEFAULT_APP_ID
    initial_count: int = 0
    autoincrement_interval: float = DEFAULT_AUTOINCREMENT_INTERVAL
    slide_duration: float = DEFAULT_SLIDE_DURATION
    log_level: str = "WARNING"
    log_file: Path | None = None


def _parse_int(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise SettingsError(f"{name} must be >= {minimum}, got {value}")
    return value


def _parse_seconds(name: str, raw: str, allow_zero: bool) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise SettingsError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value < 0 or (value == 0 and not allow_zero):
        raise SettingsError(f"{name} out of range: {value}")
    return value


class CounterSettingsLoader:
    """Loads CounterSettings from a .env file and the environment."""

    def __init__(
        self,
        env_path: Path = DEFAULT_ENV_PATH,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._env_path = env_path
        self._environ = os.environ if environ is None else environ

    def _read_values(self) -> dict[str, str]:
        """Merge .env values with prefixed environment variables (env wins)."""
        values: dict[str, str] = {}
        if self._env_path.exists():
            values.update(
                {k: v for k, v in dotenv_values(self._env_path).items() if v is not None}
            )
        values.update({k: v for k, v in self._environ.items() if k.startswith(ENV_PREFIX)})
        return {k[len(ENV_PREFIX):].lower(): v for k, v in values.items() if k.startswith(ENV_PREFIX)}

    def load(self) -> CounterSettings:
        """Load settings. Raises SettingsError on malformed values."""
        values = self._read_values()
        settings = CounterSettings()

        if app_id := values.get("app_id", "").strip():
            settings.app_id = app_id
        if "initial_count" in values:
            settings.initial_count = _parse_int(
                "BADGECOUNT_INITIAL_COUNT", values["initial_count"], minimum=0
            )
        if "autoincrement_interval" in values:
            settings.autoincrement_interval = _parse_seconds(
                "BADGECOUNT_AUTOINCREMENT_INTERVAL",
                values["autoincrement_interval"],
                allow_zero=False,
            )
        if "slide_duration" in values:
            settings.slide_duration = _parse_seconds(
                "BADGECOUNT_SLIDE_DURATION", values["slide_duration"], allow_zero=True
            )
        if log_level := values.get("log_level", "").strip():
            settings.log_level = log_level.upper()
        if log_file := values.get("log_file", "").strip():
            settings.log_file = Path(log_file).expanduser()

        return settings
