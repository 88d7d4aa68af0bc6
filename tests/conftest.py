"""Shared test fixtures for badgecount tests."""

import asyncio
from collections.abc import Awaitable, Callable, Generator

import pytest

from badgecount.controller import SlideDirection, TransitionController
from badgecount.services.badge import (
    BadgeProvider,
    InMemoryBadgeProvider,
    StaticIdentityProvider,
)
from badgecount.services.counter import CounterService

APP_ID = "org.example.badgecount.test"


async def _flush() -> None:
    """Let callbacks scheduled with loop.call_soon run."""
    for _ in range(3):
        await asyncio.sleep(0)


class FakeView:
    """Records what the controller asks the display to do."""

    def __init__(self) -> None:
        self.shown: list[str] = []
        self.slides: list[tuple[SlideDirection, str]] = []

    @property
    def text(self) -> str:
        return self.shown[-1] if self.shown else ""

    def show(self, text: str) -> None:
        self.shown.append(text)

    def slide(self, direction: SlideDirection, text: str) -> None:
        self.slides.append((direction, text))


class FakeTimer:
    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self.interval = interval
        self.callback = callback
        self.stopped = False

    def tick(self) -> None:
        if not self.stopped:
            self.callback()

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Stands in for Widget.set_interval."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, interval: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.stopped]


@pytest.fixture
def app_id() -> str:
    return APP_ID


@pytest.fixture
def flush() -> Callable[[], Awaitable[None]]:
    """Awaitable that drains pending provider notifications."""
    return _flush


@pytest.fixture
def provider() -> InMemoryBadgeProvider:
    return InMemoryBadgeProvider({APP_ID: 0})


@pytest.fixture
def identity() -> StaticIdentityProvider:
    return StaticIdentityProvider(APP_ID)


@pytest.fixture
def service(provider, identity) -> Generator[CounterService, None, None]:
    counter_service = CounterService(provider, identity)
    counter_service.initialize()
    yield counter_service
    counter_service.teardown()


class Harness:
    """A controller over a real service and in-memory provider, with fake view and timer."""

    def __init__(self, count: int = 0, provider: BadgeProvider | None = None) -> None:
        self.provider = provider or InMemoryBadgeProvider({APP_ID: count})
        self.service = CounterService(self.provider, StaticIdentityProvider(APP_ID))
        self.view = FakeView()
        self.scheduler = FakeScheduler()
        self.changed: list[int] = []
        self.failed: list[Exception] = []

        self.service.initialize()
        self.controller = TransitionController(
            self.service, self.view, self.scheduler, autoincrement_interval=1.5
        )
        self.controller.add_changed_listener(self.changed.append)
        self.controller.add_failed_listener(self.failed.append)
        self.controller.attach()

    def close(self) -> None:
        self.controller.teardown()
        self.service.teardown()


@pytest.fixture
def make_harness():
    """Factory for a Harness starting at the given badge count."""
    harnesses: list[Harness] = []

    def make(count: int = 0, provider: BadgeProvider | None = None) -> Harness:
        harness = Harness(count, provider)
        harnesses.append(harness)
        return harness

    yield make

    for harness in harnesses:
        harness.close()


async def _wait_for(pilot, predicate: Callable[[], bool], timeout: float = 3.0) -> None:
    """Pause the pilot until predicate() holds or fail after timeout seconds."""
    step = 0.05
    for _ in range(int(timeout / step)):
        if predicate():
            return
        await pilot.pause(step)
    assert predicate(), "condition not reached in time"


@pytest.fixture
def wait_for():
    return _wait_for
