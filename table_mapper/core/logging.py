"""Logging helpers.

Every module logs through a child of the ``table_mapper`` logger. The package
only installs a NullHandler; applications configure handlers themselves.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "table_mapper"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger namespaced under ``table_mapper``.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            namespace are nested under it.

    Returns:
        The logger instance.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
