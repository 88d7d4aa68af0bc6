"""Widgets package - custom widgets for the badge counter.

- counter_display.py: badge value with timer-stepped slide transition
- counter_panel.py: display plus increase/decrease/reset/auto controls
- flash.py: timer-based toast for rejected changes
"""

from badgecount.widgets.counter_display import CounterDisplay, slide_frame
from badgecount.widgets.counter_panel import CounterPanel
from badgecount.widgets.flash import Flash

__all__ = [
    "CounterDisplay",
    "CounterPanel",
    "Flash",
    "slide_frame",
]
