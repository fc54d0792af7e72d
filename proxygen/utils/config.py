"""
Configuration System for proxygen.

This module provides a small, unified configuration interface: a handful
of dataclass sections loaded from a JSON or YAML file, with environment
variable overrides for the settings most often changed per process.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class NamingConfig:
    """Generated class naming configuration."""

    prefix: str = "EnhancedProxy"


@dataclass
class GenerationConfig:
    """Source generation configuration."""

    indent_size: int = 4
    interception_prefix: str = "cg_interception_"
    lazy_prefix: str = "cg_"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    enable_file_logging: bool = False
    log_file: str = "proxygen.log"


class ProxyGenConfig:
    """
    Unified configuration manager for proxygen.

    Settings are read from a single JSON or YAML file. When no file is
    given, the ``PROXYGEN_CONFIG`` environment variable is consulted, and
    failing that every section keeps its defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses PROXYGEN_CONFIG.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.naming = self._create_naming_config()
        self.generation = self._create_generation_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Optional[Path]:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv("PROXYGEN_CONFIG")
        if env_file:
            return Path(env_file)
        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if self.config_file is None:
            return {}

        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        with open(self.config_file, "r") as f:
            if self.config_file.suffix.lower() in (".yaml", ".yml"):
                config_data = yaml.safe_load(f)
            else:
                config_data = json.load(f)
        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data or {}

    def _create_naming_config(self) -> NamingConfig:
        """Create naming configuration from loaded data."""
        naming_data = self._config_data.get("naming", {})

        prefix = os.getenv("PROXYGEN_PROXY_PREFIX") or naming_data.get("prefix", "EnhancedProxy")
        return NamingConfig(prefix=prefix)

    def _create_generation_config(self) -> GenerationConfig:
        """Create generation configuration from loaded data."""
        gen_data = self._config_data.get("generation", {})

        return GenerationConfig(
            indent_size=gen_data.get("indent_size", 4),
            interception_prefix=gen_data.get("interception_prefix", "cg_interception_"),
            lazy_prefix=gen_data.get("lazy_prefix", "cg_"),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {})

        return LoggingConfig(
            level=log_data.get("level", "WARNING"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "proxygen.log"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {
            "version": "1.0",
            "naming": {
                "prefix": self.naming.prefix,
            },
            "generation": {
                "indent_size": self.generation.indent_size,
                "interception_prefix": self.generation.interception_prefix,
                "lazy_prefix": self.generation.lazy_prefix,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self, config_file: Optional[str] = None) -> Path:
        """
        Save current configuration to file.

        Args:
            config_file: Target path; defaults to the file the configuration was loaded from

        Returns:
            The path written to
        """
        target = Path(config_file) if config_file else self.config_file
        if target is None:
            raise ValueError("No configuration file to save to")

        with open(target, "w") as f:
            if target.suffix.lower() in (".yaml", ".yml"):
                yaml.safe_dump(self.to_dict(), f, sort_keys=False)
            else:
                json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {target}")
        return target


# Global configuration instance
_global_config: Optional[ProxyGenConfig] = None


def get_config() -> ProxyGenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = ProxyGenConfig()
    return _global_config


def set_config(config: Optional[ProxyGenConfig]) -> None:
    """Set the global configuration instance; None resets it to defaults on next access."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> ProxyGenConfig:
    """Load configuration from a specific file."""
    return ProxyGenConfig(config_file)
