"""CounterService - owns the badge count and talks to the badge provider.

The service never updates its count optimistically. A change request is
forwarded to the provider and the new value is only taken once the
provider's change listener confirms it. Rejections are reported to error
listeners, synchronously for invalid values and provider errors raised
during the call.
"""

import logging
from collections.abc import Callable

from badgecount.services.badge import BadgeProvider, BadgeProviderError, IdentityProvider
from badgecount.services.counter.errors import (
    CounterError,
    IdentityUnavailableError,
    InvalidValueError,
    ProviderFailureError,
)

_log = logging.getLogger(__name__)

RECOVERABLE_PROVIDER_ERRORS = (BadgeProviderError, OSError, RuntimeError, ValueError)

ChangeListener = Callable[[int], None]
ErrorListener = Callable[[CounterError], None]


class CounterService:
    """Authoritative badge count for one application.

    Usage:
        service = CounterService(provider, identity)
        service.add_change_listener(on_changed)
        service.add_error_listener(on_failed)
        service.initialize()
        service.increment()  # on_changed(n + 1) arrives later
    """

    def __init__(self, provider: BadgeProvider, identity: IdentityProvider) -> None:
        self._provider = provider
        self._identity = identity
        self._application_id: str | None = None
        self._current_count = 0
        self._registered = False
        self._identity_error: IdentityUnavailableError | None = None
        self._change_listeners: list[ChangeListener] = []
        self._error_listeners: list[ErrorListener] = []

    @property
    def application_id(self) -> str | None:
        return self._application_id

    @property
    def identity_error(self) -> IdentityUnavailableError | None:
        """Set when initialize() could not resolve the application id."""
        return self._identity_error

    def initialize(self) -> None:
        """Resolve the application id, read the badge, start listening.

        Never raises. Whatever could not be obtained keeps its default and
        the failure is logged.
        """
        try:
            self._application_id = self._identity.get_current_application_id()
        except RECOVERABLE_PROVIDER_ERRORS as exc:
            self._identity_error = IdentityUnavailableError(str(exc))
            _log.error("Could not resolve application id: %s", exc)
            return

        try:
            self._current_count = self._provider.get_count(self._application_id)
        except RECOVERABLE_PROVIDER_ERRORS as exc:
            _log.error("Could not read badge count for %s: %s", self._application_id, exc)

        try:
            self._provider.add_change_listener(self._application_id, self._on_badge_change)
            self._registered = True
        except RECOVERABLE_PROVIDER_ERRORS as exc:
            _log.error("Could not register badge listener for %s: %s", self._application_id, exc)

    def teardown(self) -> None:
        """Stop listening to the provider and drop all observers."""
        if self._registered and self._application_id is not None:
            try:
                self._provider.remove_change_listener(
                    self._application_id, self._on_badge_change
                )
            except RECOVERABLE_PROVIDER_ERRORS as exc:
                _log.warning("Could not remove badge listener: %s", exc)
            self._registered = False
        self._change_listeners.clear()
        self._error_listeners.clear()

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._change_listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        if listener in self._change_listeners:
            self._change_listeners.remove(listener)

    def add_error_listener(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    def remove_error_listener(self, listener: ErrorListener) -> None:
        if listener in self._error_listeners:
            self._error_listeners.remove(listener)

    def get_current_count(self) -> int:
        """Last value confirmed by the provider."""
        return self._current_count

    def increment(self) -> None:
        self._request_change(self._current_count + 1)

    def decrement(self) -> None:
        self._request_change(self._current_count - 1)

    def reset(self) -> None:
        self._request_change(0)

    def _request_change(self, new_value: int) -> None:
        if new_value < 0:
            self._emit_error(InvalidValueError(new_value))
            return

        if self._application_id is None:
            self._emit_error(ProviderFailureError("application id is unavailable"))
            return

        if not self._registered:
            self._emit_error(ProviderFailureError("badge listener unavailable"))
            return

        try:
            accepted = self._provider.set_count(self._application_id, new_value)
        except RECOVERABLE_PROVIDER_ERRORS as exc:
            _log.warning("set_count(%d) failed: %s", new_value, exc)
            self._emit_error(ProviderFailureError(str(exc)))
            return

        if accepted is False:
            _log.warning("set_count(%d) was refused", new_value)
            self._emit_error(ProviderFailureError(f"provider refused count {new_value}"))

    def _on_badge_change(self, application_id: str, count: int) -> None:
        if application_id != self._application_id:
            return
        self._current_count = count
        for listener in list(self._change_listeners):
            listener(count)

    def _emit_error(self, error: CounterError) -> None:
        _log.debug("Badge change rejected: %s", error)
        for listener in list(self._error_listeners):
            listener(error)
