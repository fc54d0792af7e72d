"""
Custom exception definitions.

This module defines the exception hierarchy for proxygen-specific
errors. Every error is raised synchronously to the immediate caller;
nothing in the package catches, wraps or retries them on the way up.
"""

from typing import Optional


class ProxyGenError(Exception):
    """
    Base exception for all proxygen-related errors.

    This is the root exception class for all proxygen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize proxygen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration errors
# =============================================================================

class ConfigurationError(ProxyGenError, ValueError):
    """Raised when a generator, model or strategy is configured inconsistently."""


class InvalidVisibilityError(ConfigurationError):
    """Raised when a member is given a visibility outside public/protected/private."""

    def __init__(self, visibility):
        super().__init__(f'The visibility "{visibility}" does not exist.', {"visibility": visibility})
        self.visibility = visibility


class ParameterIndexError(ConfigurationError, IndexError):
    """Raised when a parameter position is out of range on replace/remove."""

    def __init__(self, message: str, position: int, size: int):
        super().__init__(message, {"position": position, "size": size})
        self.position = position
        self.size = size


class NamingError(ConfigurationError):
    """Raised when a generated class name does not embed the separator token."""

    def __init__(self, message: str, class_name: str = ""):
        details = {"class_name": class_name} if class_name else {}
        super().__init__(message, details)
        self.class_name = class_name


class UnsupportedValueError(ConfigurationError):
    """Raised when a default or constant value has no literal source form."""

    def __init__(self, value):
        super().__init__(
            f"Cannot render a value of type '{type(value).__name__}' as a source literal",
            {"value": repr(value)},
        )
        self.value = value


# =============================================================================
# Lookup errors
# =============================================================================

class MemberNotFoundError(ProxyGenError, LookupError):
    """Raised when a constant, property or method is looked up by a name the model lacks."""

    def __init__(self, kind: str, name: str):
        super().__init__(f'The {kind} "{name}" does not exist.')
        self.kind = kind
        self.name = name


class UnknownParameterError(ProxyGenError, LookupError):
    """Raised when a named argument is requested for a parameter the method does not declare."""

    def __init__(self, name: str):
        super().__init__(f'The parameter "{name}" does not exist.')
        self.name = name


class MissingArgumentError(ProxyGenError):
    """Raised when a named argument was neither supplied nor has a default."""

    def __init__(self, name: str):
        super().__init__(f'There was no value given for parameter "{name}".')
        self.name = name


# =============================================================================
# Runtime errors
# =============================================================================

class PersistenceError(ProxyGenError):
    """
    Raised when rendered source cannot be written to its target.

    The rendered text is complete in memory before any byte is written,
    so this error never leaves a truncated file behind.
    """

    def __init__(self, message: str, path: str = ""):
        details = {"path": path} if path else {}
        super().__init__(message, details)
        self.path = path


class LazyInitializationError(ProxyGenError, RuntimeError):
    """Raised by a lazy proxy when a guarded method runs before an initializer was installed."""


class RegistryError(ProxyGenError):
    """Raised when the runtime type registry is asked for an unknown or duplicate name."""

    def __init__(self, message: str, class_name: str):
        super().__init__(message, {"class_name": class_name})
        self.class_name = class_name


class MaterializationError(ProxyGenError):
    """
    Raised when generated source fails to compile into a live type.

    This exception carries the rendered source so the faulty output can be
    inspected without regenerating it.
    """

    def __init__(self, message: str, class_name: str = "", source_code: str = ""):
        details = {}
        if class_name:
            details["class_name"] = class_name
        if source_code:
            details["source_length"] = len(source_code)

        super().__init__(message, details)
        self.class_name = class_name
        self.source_code = source_code
