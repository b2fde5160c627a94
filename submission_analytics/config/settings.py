"""
Configuration settings for the submission analytics system.

This module provides the Settings class that holds all configuration
parameters for the application, including file paths, the display
timezone and named semester ranges.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

logger = logging.getLogger(__name__)


class Settings:
    """
    Configuration settings for the submission analytics system.

    This class provides centralized configuration management for file paths,
    timezone handling and caching. Bucket edges, score weights and window
    sizes are fixed analysis policy, not settings.
    """

    def __init__(self, config_path: Optional[str] = None, create_dirs: bool = True):
        """
        Initialize settings with default values or from config file.

        Args:
            config_path: Optional path to a JSON or YAML configuration file
            create_dirs: Whether to create the input/output/log directories
        """
        # Default base paths
        self.BASE_DIR = Path.cwd()  # Directory the analysis is run from
        self.INPUT_DIR = self.BASE_DIR / "input"
        self.OUTPUT_DIR = self.BASE_DIR / "output"
        self.LOG_DIR = self.BASE_DIR / "logs"

        # File path for the assignment export
        self.ASSIGNMENT_DATA_PATH = self.INPUT_DIR / "assignments.json"

        # IANA zone used to read timezone-aware timestamps; None = local zone
        self.DISPLAY_TIMEZONE = None

        # Named semester date ranges, selectable from the command line
        self.SEMESTER_RANGES = {
            "Fall 2024": {"start": "2024-09-01", "end": "2024-12-31"},
            "Spring 2025": {"start": "2025-02-17", "end": "2025-06-15"},
            "Fall 2025": {"start": "2025-09-15", "end": "2026-01-11"},
        }

        # Cache settings
        self.CACHE_ENABLED = True
        self.CACHE_MAX_SIZE = 32  # Maximum number of snapshots to cache

        # Load additional settings from config file if provided
        if config_path:
            self._load_from_file(config_path)

        # Override with environment variables if set
        self._load_from_env()

        if create_dirs:
            self._create_directories()

    def _create_directories(self) -> None:
        """Create required directories if they don't exist."""
        for directory in (self.INPUT_DIR, self.OUTPUT_DIR, self.LOG_DIR):
            Path(directory).mkdir(exist_ok=True, parents=True)

    def _load_from_file(self, config_path: str) -> None:
        """
        Load settings from a configuration file.

        Args:
            config_path: Path to configuration file
        """
        config_file = Path(config_path)
        if not config_file.exists():
            logger.warning(f"Config file not found: {config_path}")
            return

        if config_file.suffix.lower() == ".json":
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = json.load(f)
        elif config_file.suffix.lower() in [".yml", ".yaml"]:
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        else:
            logger.warning(f"Unsupported config file format: {config_file.suffix}")
            return

        self._apply(config_data)

    def _apply(self, config_data: Dict[str, Any]) -> None:
        """Update known settings from a mapping, keeping path types intact."""
        for key, value in config_data.items():
            if not hasattr(self, key):
                logger.warning(f"Ignoring unknown setting: {key}")
                continue
            if isinstance(getattr(self, key), Path) and value is not None:
                value = Path(value)
            setattr(self, key, value)

    def _load_from_env(self) -> None:
        """Load settings from environment variables."""
        # Define mappings from environment variable names to attributes
        env_mappings = {
            "SUBMISSION_ANALYTICS_INPUT_DIR": "INPUT_DIR",
            "SUBMISSION_ANALYTICS_OUTPUT_DIR": "OUTPUT_DIR",
            "SUBMISSION_ANALYTICS_LOG_DIR": "LOG_DIR",
            "SUBMISSION_ANALYTICS_DATA": "ASSIGNMENT_DATA_PATH",
            "SUBMISSION_ANALYTICS_TIMEZONE": "DISPLAY_TIMEZONE",
            "SUBMISSION_ANALYTICS_CACHE_ENABLED": "CACHE_ENABLED",
            "SUBMISSION_ANALYTICS_CACHE_MAX_SIZE": "CACHE_MAX_SIZE",
        }

        for env_name, attr_name in env_mappings.items():
            if env_name in os.environ and hasattr(self, attr_name):
                env_value = os.environ[env_name]
                attr_value = getattr(self, attr_name)

                # Convert type based on current attribute type
                if isinstance(attr_value, bool):
                    env_value = env_value.lower() in ["true", "1", "yes"]
                elif isinstance(attr_value, int):
                    env_value = int(env_value)
                elif isinstance(attr_value, Path):
                    env_value = Path(env_value)

                setattr(self, attr_name, env_value)

    def get_timezone(self) -> Optional[ZoneInfo]:
        """
        Resolve DISPLAY_TIMEZONE to a tzinfo.

        Returns:
            Optional[ZoneInfo]: The zone, or None for the local zone (also
                when the configured name is unknown)
        """
        if not self.DISPLAY_TIMEZONE:
            return None
        try:
            return ZoneInfo(self.DISPLAY_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone {self.DISPLAY_TIMEZONE!r}, using the local zone"
            )
            return None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert settings to a dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation of settings
        """
        result = {}
        for key, value in self.__dict__.items():
            if not key.startswith("_"):
                if isinstance(value, Path):
                    result[key] = str(value)
                else:
                    result[key] = value
        return result

    def save_to_file(self, file_path: str) -> None:
        """
        Save current settings to a file.

        Args:
            file_path: Path to save settings (.json, .yml or .yaml)
        """
        settings_dict = self.to_dict()
        file_path = Path(file_path)

        if file_path.suffix.lower() in [".yml", ".yaml"]:
            with open(file_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(settings_dict, f, default_flow_style=False)
        else:
            if file_path.suffix.lower() != ".json":
                logger.warning(
                    f"Unsupported file format: {file_path.suffix}, saving as JSON"
                )
                file_path = file_path.with_suffix(".json")
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(settings_dict, f, indent=4)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value by key.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Any: Setting value or default
        """
        return getattr(self, key, default)
