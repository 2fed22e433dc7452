from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "ledgersig"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger in the ledgersig namespace.

    The first call applies the configured log level to the package root
    logger. No handlers are installed; that is left to the application.
    """
    global _configured
    if not _configured:
        from ..core.settings import get_settings

        logging.getLogger(ROOT_LOGGER_NAME).setLevel(get_settings().runtime.log_level)
        _configured = True

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
