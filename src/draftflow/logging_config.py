"""Logging setup for applications embedding the engine."""

import logging
from typing import Optional

from draftflow.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the ``draftflow`` logger.

    The engine never calls this itself; embedding applications opt in.
    """
    level_name = (level or get_settings().log_level).upper()
    root = logging.getLogger("draftflow")
    root.setLevel(level_name)
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
