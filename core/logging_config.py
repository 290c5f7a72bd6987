"""Process-wide logging setup.

Every module logs through ``logging.getLogger(__name__)``; this only wires the
root handler once at start-up.
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    # SQL echo is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
