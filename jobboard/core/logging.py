"""Process-wide logging setup."""
from __future__ import annotations

import logging
import sys

from jobboard.core.config import settings

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the root logger once; later calls only adjust the level."""
    level_name = (level or settings.LOG_LEVEL).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)

    if root.handlers:
        return

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(resolved)
    console.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FMT))
    root.addHandler(console)
