"""Utility modules for SeeFood."""

from .config import Config
from .logger import setup_logging

__all__ = ["Config", "setup_logging"]
