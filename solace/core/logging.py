"""Process-wide logging setup. Modules log through logging.getLogger(__name__)."""

import logging
import sys

from solace.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger. Safe to call more than once."""
    level = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_solace", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._solace = True
    root.addHandler(handler)
    root.setLevel(level)
    # SQL echo is controlled by settings.debug on the engine, keep the logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
