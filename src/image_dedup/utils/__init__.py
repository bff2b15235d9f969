"""Utility functions for configuration and logging."""

from image_dedup.utils.config import Config
from image_dedup.utils.logger import configure_logging, setup_logger

__all__ = ["Config", "configure_logging", "setup_logger"]
