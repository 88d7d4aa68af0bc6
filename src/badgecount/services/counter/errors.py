"""Errors reported by the counter service."""


class CounterError(Exception):
    """Base class for every rejected or failed badge count change."""


class InvalidValueError(CounterError):
    """The requested badge count is below zero."""

    def __init__(self, value: int) -> None:
        super().__init__(f"badge count cannot be negative: {value}")
        self.value = value


class ProviderFailureError(CounterError):
    """The badge provider raised or reported a failure."""


class IdentityUnavailableError(CounterError):
    """The application id could not be resolved at startup."""
