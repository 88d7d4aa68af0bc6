"""Screens package.

Screens:
- CounterScreen: badge counter with increase/decrease/reset/auto controls
"""

from badgecount.screens.counter import CounterScreen

__all__ = ["CounterScreen"]
