"""
Naming Utilities for proxygen.

This module computes collision-safe class names for generated proxies.
A generated name is always the concatenation of a nonempty prefix, the
separator token and the original class's qualified name, so the original
can be recovered from any proxy, however many proxy layers deep.

    +----------------------------+------------------------------------------+
    | Original Name              | Generated Name                           |
    +============================+==========================================+
    | shop.models.Order          | EnhancedProxy_3f1c...e0.__CG__.shop.models.Order |
    | billing.Invoice            | acme.proxies.__CG__.billing.Invoice      |
    +----------------------------+------------------------------------------+
"""

from __future__ import annotations

import hashlib
import re
from typing import Optional, Protocol, Tuple

from .exceptions import NamingError

SEPARATOR = "__CG__"
SEPARATOR_LENGTH = len(SEPARATOR)

# The separator always occupies a whole dotted segment.
_SEPARATOR_SEGMENT = f".{SEPARATOR}."

_IDENTIFIER_PATTERN = re.compile(r"[^0-9A-Za-z_]")


class NamingStrategy(Protocol):
    """Protocol for proxy naming strategies."""

    def get_class_name(self, original) -> str:
        """
        Return the class name for the proxy of ``original``.

        The name MUST be a nonempty prefix, the ``__CG__`` separator segment
        and the original qualified name, joined by dots.
        """
        ...


class DefaultNamingStrategy:
    """The default naming strategy: ``<prefix>_<sha1(original)>.__CG__.<original>``."""

    def __init__(self, prefix: Optional[str] = None):
        if prefix is None:
            from .config import get_config
            prefix = get_config().naming.prefix
        if not prefix:
            raise NamingError("The proxy class name prefix cannot be empty")
        self.prefix = prefix

    def get_class_name(self, original) -> str:
        name = original.name
        digest = hashlib.sha1(name.encode("utf-8")).hexdigest()
        return f"{self.prefix}_{digest}{_SEPARATOR_SEGMENT}{get_user_class(name)}"


# =============================================================================
# Name decomposition
# =============================================================================

def get_user_class(class_name: str) -> str:
    """Strip every proxy layer from ``class_name`` and return the original class name."""
    pos = class_name.rfind(_SEPARATOR_SEGMENT)
    if pos == -1:
        return class_name
    return class_name[pos + SEPARATOR_LENGTH + 2:]


def is_proxy_class_name(class_name: str) -> bool:
    """Check whether ``class_name`` carries the proxy separator segment."""
    return _SEPARATOR_SEGMENT in class_name


def split_class_name(class_name: str) -> Tuple[str, str]:
    """
    Decompose a generated class name into ``(prefix, original)``.

    Args:
        class_name: Generated proxy class name

    Returns:
        Tuple of the nonempty prefix and the original qualified class name

    Raises:
        NamingError: If the name does not embed the separator token
    """
    pos = class_name.rfind(_SEPARATOR_SEGMENT)
    if pos <= 0:
        raise NamingError(
            f'The class name must contain a prefix followed by ".{SEPARATOR}."', class_name
        )
    return class_name[:pos], class_name[pos + SEPARATOR_LENGTH + 2:]


def split_qualified_name(name: str) -> Tuple[Optional[str], str]:
    """Split ``pkg.mod.Name`` into ``("pkg.mod", "Name")``; dotless names have no namespace."""
    if "." not in name:
        return None, name
    namespace, short_name = name.rsplit(".", 1)
    return namespace, short_name


def qualified_alias(name: str) -> str:
    """Derive a module-level import alias that cannot clash with a short class name."""
    return "_" + _IDENTIFIER_PATTERN.sub("_", name)
