"""Counter screen - the single screen of the badge counter.

Layout:
+---------------------------------------------+
|  Badge Counter  org.example.badgecount      |
|                                             |
|        [ - ]   ╭ 05 ╮   [ + ]               |
|          [ Reset ]  [ Auto ]                |
|                                             |
|  (flash toast)                              |
+---------------------------------------------+
"""

import logging

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Middle
from textual.screen import Screen
from textual.widgets import Footer, Static

from badgecount.services.config import CounterSettings
from badgecount.services.counter import CounterService
from badgecount.widgets import CounterPanel, Flash

_log = logging.getLogger(__name__)


class CounterScreen(Screen):
    """Badge counter with keyboard shortcuts for every control."""

    BINDINGS = [
        Binding("plus,up", "increment", "Increase", key_display="+"),
        Binding("minus,down", "decrement", "Decrease", key_display="-"),
        Binding("r", "reset", "Reset"),
        Binding("a", "toggle_auto_increment", "Auto"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, service: CounterService, settings: CounterSettings) -> None:
        super().__init__()
        self._service = service
        self._settings = settings

    @property
    def panel(self) -> CounterPanel:
        return self.query_one(CounterPanel)

    def compose(self) -> ComposeResult:
        app_id = self._service.application_id or "unknown application"
        yield Static(f"[bold]Badge Counter[/] [dim]{app_id}[/]", id="title")
        with Middle():
            with Center():
                yield CounterPanel(
                    self._service,
                    autoincrement_interval=self._settings.autoincrement_interval,
                    slide_duration=self._settings.slide_duration,
                )
        yield Flash(id="flash")
        yield Footer()

    def on_mount(self) -> None:
        if self._service.identity_error is not None:
            self.query_one(Flash).show(
                "Badge service unavailable, changes will fail", "error", timeout=5.0
            )

    def action_increment(self) -> None:
        self.panel.increment()

    def action_decrement(self) -> None:
        self.panel.decrement()

    def action_reset(self) -> None:
        self.panel.reset()

    def action_toggle_auto_increment(self) -> None:
        self.panel.toggle_auto_increment()

    @on(CounterPanel.CountChanged)
    def on_count_changed(self, event: CounterPanel.CountChanged) -> None:
        _log.info("Badge count settled at %d", event.count)
        self.sub_title = f"badge {event.text}"

    @on(CounterPanel.CountChangeFailed)
    def on_count_change_failed(self, event: CounterPanel.CountChangeFailed) -> None:
        self.query_one(Flash).report(event.error)
