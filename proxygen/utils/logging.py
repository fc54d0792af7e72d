"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
proxygen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the proxygen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("PROXYGEN_LOG_LEVEL", "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("proxygen")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "proxygen" or name.startswith("proxygen."):
        return logging.getLogger(name)
    return logging.getLogger(f"proxygen.{name}")


class ProxyGenLogger:
    """
    Domain-specific logging for the proxy generation pipeline.

    The helpers below only report progress; failures are always raised
    to the caller and never routed through the logger instead.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, original: str, class_name: str, plugin_count: int) -> None:
        """
        Log beginning of a proxy generation.

        Args:
            original: Qualified name of the wrapped type
            class_name: Generated proxy class name
            plugin_count: Number of generator plugins in the pipeline
        """
        self.logger.info(f"Generating proxy {class_name} for {original} ({plugin_count} generators)")

    def log_plugin_applied(self, plugin: str, class_name: str, method_count: int) -> None:
        """
        Log a generator plugin run.

        Args:
            plugin: Plugin class name
            class_name: Generated proxy class name
            method_count: Number of methods in the model after the plugin ran
        """
        self.logger.debug(f"Applied {plugin} to {class_name} ({method_count} methods)")

    def log_registry_hit(self, class_name: str) -> None:
        """Log a materialization skipped because the type is already registered."""
        self.logger.debug(f"Registry hit for {class_name}, skipping materialization")

    def log_registry_miss(self, class_name: str) -> None:
        """Log a materialization that has to define a new type."""
        self.logger.debug(f"Registry miss for {class_name}, materializing")

    def log_persisted(self, class_name: str, filename: str, size: int) -> None:
        """
        Log a proxy written to storage.

        Args:
            class_name: Generated proxy class name
            filename: Target file path
            size: Number of characters written
        """
        self.logger.info(f"Wrote {class_name} to {filename} ({size} chars)")


setup_logging()
