"""CounterPanel widget - badge value with its controls.

Layout:
+-------------------------------+
|   [ - ]   ╭ 05 ╮   [ + ]      |
|   [ Reset ]   [ Auto ]        |
+-------------------------------+

Wires the buttons and the CounterDisplay to a TransitionController and
re-posts the controller's events as Textual messages.
"""

from dataclasses import dataclass

from textual import on
from textual.app import ComposeResult
from textual.containers import HorizontalGroup, VerticalGroup
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button

from badgecount.controller import TransitionController
from badgecount.formatting import format_count
from badgecount.services.counter import CounterError, CounterService
from badgecount.widgets.counter_display import CounterDisplay


class CounterPanel(VerticalGroup):
    """Increase/decrease/reset/auto-increment controls around the display."""

    DEFAULT_CSS = """
    CounterPanel {
        width: auto;
        height: auto;
        align-horizontal: center;

        HorizontalGroup {
            width: auto;
            height: auto;
        }

        #counter-row Button {
            min-width: 5;
            width: 5;
            margin: 0 1;
        }

        #controls Button {
            margin: 0 1;
        }

        #auto-increment-btn.-on {
            background: $success;
            text-style: bold;
        }
    }
    """

    @dataclass
    class CountChanged(Message):
        """Posted after every settled badge change."""

        panel: "CounterPanel"
        count: int

        @property
        def text(self) -> str:
            return format_count(self.count)

        @property
        def control(self) -> Widget:
            return self.panel

    @dataclass
    class CountChangeFailed(Message):
        """Posted when a badge change was rejected or failed."""

        panel: "CounterPanel"
        error: CounterError

        @property
        def control(self) -> Widget:
            return self.panel

    _controller: TransitionController | None = None

    def __init__(
        self,
        service: CounterService,
        autoincrement_interval: float = 1.5,
        slide_duration: float = 0.3,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the panel.

        Args:
            service: Initialized CounterService the controls act on
            autoincrement_interval: Seconds between auto-increment ticks
            slide_duration: Seconds a slide transition takes
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(id=id, classes=classes)
        self._service = service
        self._autoincrement_interval = autoincrement_interval
        self._slide_duration = slide_duration

    @property
    def controller(self) -> TransitionController:
        if self._controller is None:
            raise RuntimeError("CounterPanel is not mounted")
        return self._controller

    @property
    def counter_display(self) -> CounterDisplay:
        return self.query_one("#counter-value", CounterDisplay)

    def compose(self) -> ComposeResult:
        with HorizontalGroup(id="counter-row"):
            yield Button("-", id="decrease-btn")
            yield CounterDisplay(self._slide_duration, id="counter-value")
            yield Button("+", id="increase-btn")
        with HorizontalGroup(id="controls"):
            yield Button("Reset", id="reset-btn")
            yield Button("Auto", id="auto-increment-btn")

    def on_mount(self) -> None:
        self._controller = TransitionController(
            self._service,
            self.counter_display,
            self.set_interval,
            autoincrement_interval=self._autoincrement_interval,
        )
        self._controller.add_changed_listener(
            lambda count: self.post_message(self.CountChanged(self, count))
        )
        self._controller.add_failed_listener(
            lambda error: self.post_message(self.CountChangeFailed(self, error))
        )
        self._controller.attach()

    def on_unmount(self) -> None:
        if self._controller is not None:
            self._controller.teardown()
            self._controller = None

    def increment(self) -> bool:
        return self.controller.increment()

    def decrement(self) -> bool:
        return self.controller.decrement()

    def reset(self) -> bool:
        return self.controller.reset()

    def toggle_auto_increment(self) -> bool:
        """Start or stop auto-increment and reflect it on the button."""
        active = self.controller.toggle_auto_increment()
        self.query_one("#auto-increment-btn", Button).set_class(active, "-on")
        return active

    @on(Button.Pressed, "#increase-btn")
    def on_increase_pressed(self) -> None:
        self.increment()

    @on(Button.Pressed, "#decrease-btn")
    def on_decrease_pressed(self) -> None:
        self.decrement()

    @on(Button.Pressed, "#reset-btn")
    def on_reset_pressed(self) -> None:
        self.reset()

    @on(Button.Pressed, "#auto-increment-btn")
    def on_auto_increment_pressed(self) -> None:
        self.toggle_auto_increment()

    @on(CounterDisplay.SlideFinished)
    def on_slide_finished(self, event: CounterDisplay.SlideFinished) -> None:
        event.stop()
        if self._controller is not None:
            self._controller.animation_finished()
