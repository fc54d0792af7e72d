"""
Utils package for proxygen.

This module provides the exception hierarchy, logging, configuration
and naming helpers shared by the rest of the package.
"""

from .exceptions import (
    ProxyGenError,
    ConfigurationError,
    InvalidVisibilityError,
    ParameterIndexError,
    NamingError,
    UnsupportedValueError,
    MemberNotFoundError,
    UnknownParameterError,
    MissingArgumentError,
    PersistenceError,
    LazyInitializationError,
    RegistryError,
    MaterializationError,
)

from .config import (
    ProxyGenConfig,
    NamingConfig,
    GenerationConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .naming import (
    SEPARATOR,
    NamingStrategy,
    DefaultNamingStrategy,
    get_user_class,
    is_proxy_class_name,
    split_class_name,
)

from .logging import get_logger, setup_logging

__all__ = [
    # Exceptions
    "ProxyGenError",
    "ConfigurationError",
    "InvalidVisibilityError",
    "ParameterIndexError",
    "NamingError",
    "UnsupportedValueError",
    "MemberNotFoundError",
    "UnknownParameterError",
    "MissingArgumentError",
    "PersistenceError",
    "LazyInitializationError",
    "RegistryError",
    "MaterializationError",

    # Configuration
    "ProxyGenConfig",
    "NamingConfig",
    "GenerationConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Naming
    "SEPARATOR",
    "NamingStrategy",
    "DefaultNamingStrategy",
    "get_user_class",
    "is_proxy_class_name",
    "split_class_name",

    # Logging
    "get_logger",
    "setup_logging",
]
