# File: app/core/config/logging_setup.py

import logging
from typing import Optional

from app.core.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configures the root logger. Falls back to settings.LOG_LEVEL."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
