"""Console logging setup: Rich handler on stderr, level from -v count"""

import logging
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "blogtools"


def package_version() -> str:
    try:
        return version("blogtools")
    except PackageNotFoundError:
        return "unknown"


def verbosity_to_level(verbosity: int) -> int:
    """0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, color: bool = True) -> logging.Logger:
    """Configure the blogtools logger; safe to call again (handlers are replaced).

    Only our own logger follows -v; the root logger stays at WARNING so
    third-party libraries do not get chatty.
    """
    console = Console(stderr=True, no_color=not color, highlight=color)
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=verbosity >= 2,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))
    logger.propagate = False
    return logger
