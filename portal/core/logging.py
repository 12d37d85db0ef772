"""
Logging setup.

Level comes from LOG_LEVEL (e.g. LOG_LEVEL=WARNING for CI). Unknown names
fall back to INFO.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level_name: str = "INFO") -> None:
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("portal").setLevel(level)
