"""
Base class for proxy generator plugins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..codegen.class_model import ClassModel
from ..codegen.reflection import TypeDescriptor


class ProxyGenerator(ABC):
    """
    A step in the proxy generation pipeline.

    Generators run in the order they were given to the Enhancer and all
    edit the same ClassModel. A generator may add members or replace
    them; when it wraps a method body an earlier generator already set,
    it must prefix that body, never overwrite it. A generator that
    replaces method bodies wholesale therefore has to run before any
    generator that prefixes them. The Enhancer raises ConfigurationError
    when a generator replaces a body an earlier one wrote.
    """

    @abstractmethod
    def generate(self, original: TypeDescriptor, model: ClassModel) -> None:
        """
        Apply this generator to ``model``.

        Args:
            original: Description of the proxied class
            model: The proxy class under construction, mutated in place
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
