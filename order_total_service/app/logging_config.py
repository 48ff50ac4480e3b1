import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure the service's root logger and return it."""
    level_num = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = logging.getLogger("order_total_service")
    logger.setLevel(level_num)

    # Calling this twice (tests, reloads) must not duplicate output.
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level_num)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
