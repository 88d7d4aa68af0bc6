"""Counter service and its errors."""

from badgecount.services.counter.errors import (
    CounterError,
    IdentityUnavailableError,
    InvalidValueError,
    ProviderFailureError,
)
from badgecount.services.counter.service import CounterService

__all__ = [
    "CounterError",
    "CounterService",
    "IdentityUnavailableError",
    "InvalidValueError",
    "ProviderFailureError",
]
