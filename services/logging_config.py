"""Logging setup."""

from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Streamlit reruns the app script on every interaction, so the handler is
    only installed on the first call; later calls just adjust the level.
    """
    global _configured

    numeric_level = logging.getLevelName(str(level).upper())
    unknown = not isinstance(numeric_level, int)
    if unknown:
        numeric_level = logging.INFO

    if not _configured:
        logging.basicConfig(
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stdout)],
        )
        _configured = True
    logging.getLogger().setLevel(numeric_level)

    if unknown:
        logging.getLogger(__name__).warning("Unknown LOG_LEVEL '%s', using INFO", level)
