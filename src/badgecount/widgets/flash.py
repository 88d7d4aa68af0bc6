"""Flash widget - toast for rejected badge changes.

PATTERN: Timer-based visibility with CSS class variants
"""

from textual.timer import Timer
from textual.widgets import Static

from badgecount.services.counter import (
    CounterError,
    InvalidValueError,
    ProviderFailureError,
)


class Flash(Static):
    """Toast that auto-hides after a timeout.

    Usage:
        flash.show("Badge reset", "success")
        flash.report(error)  # picks message and variant from the error
    """

    DEFAULT_CSS = """
    Flash {
        height: 1;
        dock: bottom;
        padding: 0 1;
        background: $primary 10%;
        opacity: 0;
        offset-y: 1;
        transition: opacity 300ms out_cubic, offset-y 300ms out_cubic;

        &.-visible {
            opacity: 1;
            offset-y: 0;
        }

        &.-success { background: $success 20%; }
        &.-warning { background: $warning 20%; }
        &.-error { background: $error 20%; }
    }
    """

    VARIANTS = ("success", "warning", "error")

    _hide_timer: Timer | None = None
    _last_message: str = ""

    @property
    def message(self) -> str:
        """Text of the last message shown."""
        return self._last_message

    def show(self, message: str, variant: str = "", timeout: float = 3.0) -> None:
        """Show message in the given variant, hide after timeout seconds."""
        if self._hide_timer:
            self._hide_timer.stop()

        self._last_message = message
        self.update(message)
        self.remove_class(*(f"-{name}" for name in self.VARIANTS))
        if variant:
            self.add_class(f"-{variant}")
        self.add_class("-visible")

        self._hide_timer = self.set_timer(timeout, self.hide)

    def report(self, error: CounterError, timeout: float = 3.0) -> None:
        """Show a rejected badge change."""
        if isinstance(error, InvalidValueError):
            self.show("Badge count cannot go below zero", "warning", timeout)
        elif isinstance(error, ProviderFailureError):
            self.show(f"Badge service error: {error}", "error", timeout)
        else:
            self.show(f"Badge change failed: {error}", "error", timeout)

    def hide(self) -> None:
        self.remove_class("-visible")
        if self._hide_timer:
            self._hide_timer.stop()
            self._hide_timer = None
