"""Logging setup for the badge counter app.

Records go to Textual's devtools console (``textual console``) and, when
configured, to a log file. Nothing is written to stderr while the app owns
the terminal.
"""

import logging

from textual.logging import TextualHandler

from badgecount.services.config import CounterSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: CounterSettings) -> None:
    """Install handlers on the badgecount logger."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("badgecount")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(TextualHandler())

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
