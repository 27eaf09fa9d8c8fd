# src/utils/logging_setup.py
from __future__ import annotations
import logging
from typing import Optional

from config.settings import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging config shared by the CLI, the Streamlit page and the API."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
