"""Tests for the CounterDisplay slide animation."""

import time
from unittest.mock import patch

import pytest
from textual.app import App, ComposeResult

from badgecount.controller import SlideDirection
from badgecount.widgets import CounterDisplay, slide_frame


class TestSlideFrame:
    @pytest.mark.parametrize("direction", list(SlideDirection))
    def test_starts_on_outgoing_and_ends_on_incoming(self, direction) -> None:
        assert slide_frame("05", "06", direction, 0.0) == "05".center(3)
        assert slide_frame("05", "06", direction, 1.0) == "06".center(3)

    @pytest.mark.parametrize("direction", list(SlideDirection))
    def test_every_frame_has_cell_width(self, direction) -> None:
        for step in range(11):
            assert len(slide_frame("99", "99+", direction, step / 10)) == 3

    def test_progress_is_clamped(self) -> None:
        assert slide_frame("01", "02", SlideDirection.RIGHT, 5.0) == "02".center(3)
        assert slide_frame("01", "02", SlideDirection.LEFT, -1.0) == "01".center(3)


class DisplayApp(App):
    def __init__(self, slide_duration: float) -> None:
        super().__init__()
        self._slide_duration = slide_duration
        self.finished: list[CounterDisplay.SlideFinished] = []

    def compose(self) -> ComposeResult:
        yield CounterDisplay(self._slide_duration, id="display")

    def on_counter_display_slide_finished(self, event: CounterDisplay.SlideFinished) -> None:
        self.finished.append(event)


class TestCounterDisplay:
    async def test_slide_posts_finished_once(self, wait_for) -> None:
        app = DisplayApp(slide_duration=0.1)
        async with app.run_test() as pilot:
            display = app.query_one(CounterDisplay)
            display.show("05")

            display.slide(SlideDirection.RIGHT, "06")

            assert display.sliding
            assert display.incoming_text == "06"
            assert display.has_class("-animated")
            assert display.has_class("-slide-right")

            await wait_for(pilot, lambda: app.finished)
            await pilot.pause(0.2)

            assert len(app.finished) == 1
            assert app.finished[0].control is display
            assert not display.sliding
            assert display.current_text == "06"
            assert not display.has_class("-animated")
            assert not display.has_class("-slide-right")

    async def test_zero_duration_finishes_on_next_tick(self, wait_for) -> None:
        app = DisplayApp(slide_duration=0)
        async with app.run_test() as pilot:
            display = app.query_one(CounterDisplay)
            display.show("10")

            display.slide(SlideDirection.LEFT, "09")

            assert app.finished == []
            await wait_for(pilot, lambda: app.finished)
            assert display.current_text == "09"

    async def test_overlapping_slide_is_refused(self) -> None:
        app = DisplayApp(slide_duration=10)
        async with app.run_test():
            display = app.query_one(CounterDisplay)
            display.slide(SlideDirection.RIGHT, "01")

            with pytest.raises(RuntimeError):
                display.slide(SlideDirection.LEFT, "00")

    async def test_progress_follows_wall_clock(self, wait_for) -> None:
        """A single late tick completes the slide once its duration has passed."""
        app = DisplayApp(slide_duration=5.0)
        async with app.run_test() as pilot:
            display = app.query_one(CounterDisplay)
            display.show("05")
            display.slide(SlideDirection.RIGHT, "06")
            late = time.monotonic() + 6.0

            with patch("badgecount.widgets.counter_display.time.monotonic", return_value=late):
                display._step()

            assert not display.sliding
            assert display.current_text == "06"
            await wait_for(pilot, lambda: app.finished)
            assert len(app.finished) == 1
