"""CounterDisplay widget - the badge value with a slide transition.

PATTERN: Timer-stepped animation with a completion message

The settled value is rendered centred. A slide lays the outgoing and the
incoming value side by side on a strip and moves a window across it in
step with the wall clock. The frame timer only redraws, so a late tick
catches up instead of stretching the slide. When the window reaches the
incoming value the widget posts SlideFinished, exactly once per slide().
"""

import time
from dataclasses import dataclass

from rich.text import Text
from textual.message import Message
from textual.timer import Timer
from textual.widget import Widget

from badgecount.controller import SlideDirection

FRAME_INTERVAL = 1 / 30
CELL_WIDTH = 3  # widest formatted value: "99+"
STRIP_GAP = 1


def slide_frame(
    outgoing: str, incoming: str, direction: SlideDirection, progress: float
) -> str:
    """Return the visible window of a slide at progress 0.0 .. 1.0.

    RIGHT: incoming enters from the right, outgoing leaves to the left.
    LEFT: incoming enters from the left, outgoing leaves to the right.
    """
    progress = min(max(progress, 0.0), 1.0)
    gap = " " * STRIP_GAP
    travel = CELL_WIDTH + STRIP_GAP
    old = outgoing.center(CELL_WIDTH)
    new = incoming.center(CELL_WIDTH)

    if direction is SlideDirection.RIGHT:
        strip = old + gap + new
        offset = round(progress * travel)
    else:
        strip = new + gap + old
        offset = round((1.0 - progress) * travel)
    return strip[offset : offset + CELL_WIDTH]


class CounterDisplay(Widget):
    """Badge value display.

    Usage:
        display.show("05")
        display.slide(SlideDirection.RIGHT, "06")  # posts SlideFinished later
    """

    DEFAULT_CSS = """
    CounterDisplay {
        width: 9;
        height: 3;
        content-align: center middle;
        text-style: bold;
        border: round $primary;

        &.-animated {
            border: round $accent;
        }

        &.-slide-right {
            color: $success;
        }

        &.-slide-left {
            color: $warning;
        }
    }
    """

    @dataclass
    class SlideFinished(Message):
        """Posted when a slide animation reaches its end."""

        counter_display: "CounterDisplay"

        @property
        def control(self) -> "CounterDisplay":
            return self.counter_display

    _frame_timer: Timer | None = None

    def __init__(
        self,
        slide_duration: float = 0.3,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the display.

        Args:
            slide_duration: Seconds a slide takes, measured on the wall clock
            name: Widget name
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(name=name, id=id, classes=classes)
        self._slide_duration = slide_duration
        self._current_text = ""
        self._incoming_text = ""
        self._direction: SlideDirection | None = None
        self._started_at = 0.0

    @property
    def current_text(self) -> str:
        """Text of the settled value."""
        return self._current_text

    @property
    def incoming_text(self) -> str:
        """Text pre-rendered in the incoming slot of the running slide."""
        return self._incoming_text

    @property
    def direction(self) -> SlideDirection | None:
        return self._direction

    @property
    def sliding(self) -> bool:
        return self._direction is not None

    def render(self) -> Text:
        if self._direction is None:
            return Text(self._current_text)
        progress = self._progress()
        return Text(
            slide_frame(self._current_text, self._incoming_text, self._direction, progress)
        )

    def show(self, text: str) -> None:
        """Render a settled value."""
        self._current_text = text
        self.refresh()

    def slide(self, direction: SlideDirection, text: str) -> None:
        """Start sliding text in from the given side."""
        if self.sliding:
            raise RuntimeError("a slide is already in progress")

        self._incoming_text = text
        self._direction = direction
        self._started_at = time.monotonic()
        self.add_class("-animated", f"-slide-{direction.value}")
        self._frame_timer = self.set_interval(FRAME_INTERVAL, self._step)

    def _progress(self) -> float:
        if self._slide_duration <= 0:
            return 1.0
        elapsed = time.monotonic() - self._started_at
        return min(1.0, elapsed / self._slide_duration)

    def _step(self) -> None:
        self.refresh()
        if self._progress() >= 1.0:
            self._finish()

    def _finish(self) -> None:
        if self._frame_timer:
            self._frame_timer.stop()
            self._frame_timer = None
        self.remove_class("-animated", "-slide-left", "-slide-right")
        self._current_text = self._incoming_text
        self._incoming_text = ""
        self._direction = None
        self.refresh()
        self.post_message(self.SlideFinished(self))

    def on_unmount(self) -> None:
        if self._frame_timer:
            self._frame_timer.stop()
            self._frame_timer = None
