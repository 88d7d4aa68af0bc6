"""Badge and identity providers.

The platform side of the counter: something that stores a badge count per
application and tells listeners when it changes. Confirmations are always
delivered later on the event loop, never from inside set_count().
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

_log = logging.getLogger(__name__)

ChangeCallback = Callable[[str, int], None]


class BadgeProviderError(Exception):
    """Raised when the badge platform rejects or cannot serve a call."""


class BadgeProvider(Protocol):
    """Narrow contract of the platform badge facility."""

    def get_count(self, app_id: str) -> int: ...

    def set_count(self, app_id: str, count: int) -> bool: ...

    def add_change_listener(self, app_id: str, callback: ChangeCallback) -> None: ...

    def remove_change_listener(self, app_id: str, callback: ChangeCallback) -> None: ...


class IdentityProvider(Protocol):
    """Resolves the id of the running application."""

    def get_current_application_id(self) -> str: ...


class StaticIdentityProvider:
    """Identity provider returning a fixed application id."""

    def __init__(self, app_id: str) -> None:
        self._app_id = app_id

    def get_current_application_id(self) -> str:
        if not self._app_id:
            raise BadgeProviderError("application id is not configured")
        return self._app_id


class InMemoryBadgeProvider:
    """Badge store kept in process memory.

    Every accepted set_count() schedules a change notification for the
    listeners registered under that application id, including when the
    value did not change. Setting available to False makes every call
    raise BadgeProviderError, which is how an unreachable platform looks.

    Usage:
        provider = InMemoryBadgeProvider({"org.example.app": 5})
        provider.add_change_listener("org.example.app", on_change)
        provider.set_count("org.example.app", 6)  # on_change runs later
    """

    def __init__(
        self,
        counts: dict[str, int] | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._counts: dict[str, int] = dict(counts or {})
        self._listeners: dict[str, list[ChangeCallback]] = {}
        self._loop = loop
        self.available = True

    def _check_available(self) -> None:
        if not self.available:
            raise BadgeProviderError("badge service unavailable")

    def get_count(self, app_id: str) -> int:
        self._check_available()
        return self._counts.get(app_id, 0)

    def set_count(self, app_id: str, count: int) -> bool:
        """Store count and schedule a change notification."""
        self._check_available()
        if count < 0:
            raise BadgeProviderError(f"badge count must be non-negative, got {count}")

        loop = self._loop or asyncio.get_running_loop()
        self._counts[app_id] = count
        loop.call_soon(self._notify, app_id, count)
        return True

    def add_change_listener(self, app_id: str, callback: ChangeCallback) -> None:
        self._check_available()
        self._listeners.setdefault(app_id, []).append(callback)

    def remove_change_listener(self, app_id: str, callback: ChangeCallback) -> None:
        listeners = self._listeners.get(app_id, [])
        if callback in listeners:
            listeners.remove(callback)

    def listener_count(self, app_id: str) -> int:
        """Number of listeners registered for app_id."""
        return len(self._listeners.get(app_id, []))

    def _notify(self, app_id: str, count: int) -> None:
        listeners = list(self._listeners.get(app_id, []))
        _log.debug("Badge %s changed to %d (%d listeners)", app_id, count, len(listeners))
        for callback in listeners:
            callback(app_id, count)
