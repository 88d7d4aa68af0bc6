"""TransitionController - single-flight coordination of count changes.

Sits between the triggers (buttons, keys, the auto-increment timer), the
CounterService and the view. At most one change is in flight at a time:
the lock is taken when a change is requested and released when the view
reports that the slide animation finished, or earlier when there is nothing
to animate or the change was rejected. Triggers that arrive while the lock
is held are dropped, not queued.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Protocol

from badgecount.formatting import exceeds_cap, format_count
from badgecount.services.counter import CounterError, CounterService

_log = logging.getLogger(__name__)


class SlideDirection(Enum):
    """Side the new value enters from."""

    LEFT = "left"
    RIGHT = "right"


class CounterView(Protocol):
    """What the controller needs from the display.

    The view must call TransitionController.animation_finished() exactly
    once for every slide() it is asked to play.
    """

    def show(self, text: str) -> None: ...

    def slide(self, direction: SlideDirection, text: str) -> None: ...


class RepeatingTimer(Protocol):
    def stop(self) -> None: ...


IntervalScheduler = Callable[[float, Callable[[], None]], RepeatingTimer]


class TransitionController:
    """Owns the transition lock and the auto-increment timer.

    Usage:
        controller = TransitionController(service, view, widget.set_interval)
        controller.attach()
        controller.increment()             # True, lock taken
        controller.increment()             # False, dropped while busy
        ...
        controller.animation_finished()    # from the view, lock released
    """

    def __init__(
        self,
        service: CounterService,
        view: CounterView,
        schedule_interval: IntervalScheduler,
        autoincrement_interval: float = 1.5,
    ) -> None:
        self._service = service
        self._view = view
        self._schedule_interval = schedule_interval
        self._autoincrement_interval = autoincrement_interval
        self._timer: RepeatingTimer | None = None

        self._busy = False
        self._animating = False
        self._resync_pending = False
        self._rendered_value = 0
        self._target_value = 0

        self._changed_listeners: list[Callable[[int], None]] = []
        self._failed_listeners: list[Callable[[CounterError], None]] = []

    @property
    def busy(self) -> bool:
        """True while a change is pending or animating."""
        return self._busy

    @property
    def animating(self) -> bool:
        return self._animating

    @property
    def rendered_value(self) -> int:
        """Value of the last settled display."""
        return self._rendered_value

    @property
    def auto_increment_active(self) -> bool:
        return self._timer is not None

    def attach(self) -> None:
        """Subscribe to the service and render its current count."""
        self._service.add_change_listener(self._on_count_changed)
        self._service.add_error_listener(self._on_count_change_failed)
        self._rendered_value = self._service.get_current_count()
        self._view.show(format_count(self._rendered_value))

    def teardown(self) -> None:
        """Cancel the auto-increment timer and unsubscribe from the service."""
        self._stop_timer()
        self._service.remove_change_listener(self._on_count_changed)
        self._service.remove_error_listener(self._on_count_change_failed)
        self._changed_listeners.clear()
        self._failed_listeners.clear()

    def add_changed_listener(self, listener: Callable[[int], None]) -> None:
        """Call listener(count) after every successful settle."""
        self._changed_listeners.append(listener)

    def add_failed_listener(self, listener: Callable[[CounterError], None]) -> None:
        """Call listener(error) for every rejected or failed change."""
        self._failed_listeners.append(listener)

    # Triggers

    def increment(self) -> bool:
        """Request +1. Returns False if dropped because a change is in flight."""
        return self._trigger("increment", self._service.increment)

    def decrement(self) -> bool:
        return self._trigger("decrement", self._service.decrement)

    def reset(self) -> bool:
        return self._trigger("reset", self._service.reset)

    def toggle_auto_increment(self) -> bool:
        """Start or stop the auto-increment timer. Returns the new state."""
        if self._timer is not None:
            self._stop_timer()
            return False
        self._timer = self._schedule_interval(self._autoincrement_interval, self._on_tick)
        return True

    def _trigger(self, name: str, operation: Callable[[], None]) -> bool:
        if self._busy:
            _log.debug("Dropped %s: change in progress", name)
            return False
        self._busy = True
        operation()
        return True

    def _on_tick(self) -> None:
        self.increment()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    # Service notifications

    def _on_count_change_failed(self, error: CounterError) -> None:
        if not self._animating:
            self._busy = False
        for listener in list(self._failed_listeners):
            listener(error)

    def _on_count_changed(self, count: int) -> None:
        if self._animating:
            # Another surface changed the badge mid-slide; catch up after settling.
            self._resync_pending = True
            return
        self._busy = True
        self._apply(self._service.get_current_count())

    def _apply(self, new_value: int) -> None:
        old_value = self._rendered_value

        if old_value == new_value:
            self._settle(new_value)
            return

        if exceeds_cap(old_value) and exceeds_cap(new_value):
            # Both read "99+"; nothing visible to animate.
            self._rendered_value = new_value
            self._settle(new_value)
            return

        self._target_value = new_value
        self._animating = True
        direction = SlideDirection.RIGHT if new_value > old_value else SlideDirection.LEFT
        self._view.slide(direction, format_count(new_value))

    # View signal

    def animation_finished(self) -> None:
        """Commit the animated value. Called by the view once per slide."""
        if not self._animating:
            _log.debug("Ignoring animation_finished with no slide in progress")
            return

        self._animating = False
        self._rendered_value = self._target_value
        self._view.show(format_count(self._rendered_value))

        if self._resync_pending:
            self._resync_pending = False
            latest = self._service.get_current_count()
            if latest != self._rendered_value:
                self._notify_changed(self._rendered_value)
                self._apply(latest)
                return

        self._settle(self._rendered_value)

    def _settle(self, value: int) -> None:
        self._busy = False
        self._notify_changed(value)

    def _notify_changed(self, value: int) -> None:
        for listener in list(self._changed_listeners):
            listener(value)
