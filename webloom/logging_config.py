"""
logging_config.py
-----------------
Root logger setup. Everything logs through ``logging.getLogger(__name__)``.
"""

import logging
import sys


class FlushStreamHandler(logging.StreamHandler):
    def emit(self, record):
        super().emit(record)
        self.flush()


def configure_logging(level: str = "INFO") -> None:
    """Installs a single stdout handler on the root logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[FlushStreamHandler(sys.stdout)],
        force=True,
    )
    # SQL statements contain submitted values; keep them out of INFO output
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
