"""Config services for the badge counter."""

from badgecount.services.config.settings import (
    DEFAULT_ENV_PATH,
    CounterSettings,
    CounterSettingsLoader,
    SettingsError,
)

__all__ = [
    "DEFAULT_ENV_PATH",
    "CounterSettings",
    "CounterSettingsLoader",
    "SettingsError",
]
