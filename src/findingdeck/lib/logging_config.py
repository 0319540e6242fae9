"""Logging setup shared by the CLI commands and library modules.

Library modules obtain loggers with ``get_logger(__name__)``; handlers are
only attached once a command calls ``setup_logging``.
"""

import logging
import sys

ROOT_LOGGER_NAME = "findingdeck"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_HANDLER_ATTR = "_findingdeck_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the findingdeck hierarchy.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance for the module
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the findingdeck logger hierarchy.

    Quiet wins over verbose. Calling this repeatedly replaces the handler
    installed by the previous call instead of stacking a new one.

    Args:
        verbose: Emit DEBUG records
        quiet: Only emit WARNING and above
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.setLevel(level)
