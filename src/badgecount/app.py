"""Badge counter - Textual app entry point.

Builds the badge platform collaborators and the CounterService, pushes
the CounterScreen, and tears the service down on exit.
"""

from textual.app import App

from badgecount.log import configure_logging
from badgecount.screens import CounterScreen
from badgecount.services.badge import (
    BadgeProvider,
    IdentityProvider,
    InMemoryBadgeProvider,
    StaticIdentityProvider,
)
from badgecount.services.config import CounterSettings, CounterSettingsLoader
from badgecount.services.counter import CounterService


class BadgeCountApp(App):
    """Single-screen badge counter.

    Providers default to an in-memory badge store seeded with
    settings.initial_count; tests and embedders can pass their own.
    """

    CSS_PATH = "main.tcss"
    TITLE = "Badge Counter"
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        settings: CounterSettings | None = None,
        provider: BadgeProvider | None = None,
        identity: IdentityProvider | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or CounterSettings()
        self._provider = provider or InMemoryBadgeProvider(
            {self._settings.app_id: self._settings.initial_count}
        )
        self._identity = identity or StaticIdentityProvider(self._settings.app_id)
        self._service = CounterService(self._provider, self._identity)

    @property
    def service(self) -> CounterService:
        return self._service

    @property
    def provider(self) -> BadgeProvider:
        return self._provider

    def on_mount(self) -> None:
        """Initialize the counter service, then show the counter screen."""
        self._service.initialize()
        self.push_screen(CounterScreen(self._service, self._settings))

    def on_unmount(self) -> None:
        self._service.teardown()


def main() -> None:
    """Entry point for the application."""
    settings = CounterSettingsLoader().load()
    configure_logging(settings)

    app = BadgeCountApp(settings)
    app.run()


if __name__ == "__main__":
    main()
