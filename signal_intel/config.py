"""Runtime configuration read from the environment"""

import os
import sys

from loguru import logger

LOG_LEVEL = os.getenv("SIGNAL_INTEL_LOG_LEVEL", "INFO")

API_HOST = os.getenv("SIGNAL_INTEL_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SIGNAL_INTEL_API_PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("SIGNAL_INTEL_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]


def configure_logging(level: str = None) -> None:
    """Replace loguru's default sink with one at the configured level"""
    logger.remove()
    logger.add(sys.stderr, level=(level or LOG_LEVEL).upper())
