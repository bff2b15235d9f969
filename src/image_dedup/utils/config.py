"""Configuration management for image-dedup."""

import copy
from typing import Any, Dict, Optional

from image_dedup.utils.logger import setup_logger

logger = setup_logger(__name__)


class Config:
    """Holds run settings in memory.

    Nothing is read from or written to disk; every run starts from
    ``DEFAULT_SETTINGS`` plus whatever overrides the caller supplies.
    """

    DEFAULT_SETTINGS: Dict[str, Any] = {
        "hash": {
            "algorithm": "dhash",  # dhash (gradient), phash, ahash, whash
            "resize_filter": "triangle",  # nearest, triangle, catmullrom, lanczos3
            "hash_bytes": 8,
        },
        "quarantine_dir_name": "duplicates",
        "max_workers": None,  # None: one worker per CPU
        "show_progress": True,
    }

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            overrides: Mapping of dot-notation keys to values applied on top
                of the defaults, e.g. ``{"hash.algorithm": "phash"}``
        """
        self.settings: Dict[str, Any] = copy.deepcopy(self.DEFAULT_SETTINGS)
        for key, value in (overrides or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports dot notation, e.g., 'hash.algorithm')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target or not isinstance(target[k], dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        logger.debug(f"Config {key} = {value!r}")
