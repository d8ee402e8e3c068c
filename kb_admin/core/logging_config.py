"""Root logger setup for scripts that drive the admin client."""

import logging

from .config import get_settings


def setup_logging(level: str | None = None, logfile: str | None = None) -> None:
    """Log to the console, and to ``logfile`` when one is given.

    Level and file default to ``Settings.log_level`` / ``Settings.log_file``.
    Does nothing when the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return

    settings = get_settings()
    level = level or settings.log_level
    logfile = logfile or settings.log_file

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )
