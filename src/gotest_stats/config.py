"""
Configuration management for gotest-stats.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

# Module-level lock for thread-safe config loading
_config_lock = threading.Lock()

REPORT_FORMATS = ["text", "json"]


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


@dataclass
class StatsConfig:
    """Main configuration for a statistics run.

    Example config YAML::

        statistic: test-time
        report_format: text
        files:
          - unit.json
          - integration.json
    """

    # Statistic to compute: pkg-time or test-time
    statistic: Optional[str] = None

    # Log files, processed in order
    files: List[str] = field(default_factory=list)

    # Reporting configuration
    report_format: str = "text"  # text, json

    def __post_init__(self) -> None:
        """Post-initialization normalization."""
        if self.files is None:
            self.files = []
        elif isinstance(self.files, str):
            self.files = [self.files]
        else:
            self.files = list(self.files)


def load_config(config_file: Optional[str] = None) -> StatsConfig:
    """
    Load configuration from file and environment variables.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. Configuration file
    3. Default values

    Args:
        config_file: Path to YAML configuration file (optional)

    Returns:
        StatsConfig object with merged configuration

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist
        ConfigurationError: If config file has invalid YAML or unknown keys
    """
    with _config_lock:
        config_data: Dict[str, Any] = {}

        if config_file:
            logger.info("Loading configuration from %s", config_file)
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file '{config_file}': {e}")
            except FileNotFoundError:
                raise FileNotFoundError(f"Configuration file not found: {config_file}")
            except PermissionError:
                raise ConfigurationError(f"Permission denied reading config file '{config_file}'")
            except OSError as e:
                raise ConfigurationError(f"Unable to read config file '{config_file}': {e}")
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Config file '{config_file}' must contain a mapping, "
                    f"got {type(file_config).__name__}"
                )
            config_data.update(file_config)

        env_overrides = _load_from_env()
        config_data.update(env_overrides)
        if env_overrides:
            logger.debug("Applied environment variable overrides: %s", list(env_overrides.keys()))

        try:
            return StatsConfig(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")


def _load_from_env() -> Dict[str, Any]:
    """
    Load configuration from environment variables.

    Supported environment variables:
    - GOTEST_STATS_STATISTIC: Statistic to compute (pkg-time, test-time)
    - GOTEST_STATS_REPORT_FORMAT: Report format (text, json)
    - GOTEST_STATS_FILES: Log files separated by os.pathsep

    Returns:
        Dictionary of configuration values from environment
    """
    env_config: Dict[str, Any] = {}

    if "GOTEST_STATS_STATISTIC" in os.environ:
        env_config["statistic"] = os.environ["GOTEST_STATS_STATISTIC"]

    if "GOTEST_STATS_REPORT_FORMAT" in os.environ:
        env_config["report_format"] = os.environ["GOTEST_STATS_REPORT_FORMAT"]

    if "GOTEST_STATS_FILES" in os.environ:
        env_config["files"] = [
            p for p in os.environ["GOTEST_STATS_FILES"].split(os.pathsep) if p
        ]

    return env_config


def validate_config(config: StatsConfig) -> List[str]:
    """
    Validate configuration and return list of errors.

    The statistic name is not checked here; an unknown statistic is
    answered with usage text rather than a configuration error.

    Args:
        config: StatsConfig to validate

    Returns:
        List of error messages (empty if valid)
    """
    errors: List[str] = []

    if config.report_format not in REPORT_FORMATS:
        errors.append(f"report_format must be one of {REPORT_FORMATS}: {config.report_format}")

    for i, path in enumerate(config.files):
        if not isinstance(path, str) or not path:
            errors.append(f"files[{i}] must be a non-empty path: {path!r}")

    return errors
