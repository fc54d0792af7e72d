"""
Runtime type registry.

Generated source becomes a live class here: the text is compiled into a
fresh module registered in ``sys.modules`` under the module part of the
generated name, and the class is kept so later requests for the same
name reuse it.

"Define if absent" is check-then-act across two calls (``has`` then
``define``). Concurrent first-time materialization of the same name
from several threads can race; the loser gets a RegistryError. Callers
that need this to be safe must serialize first materialization.
"""

from __future__ import annotations

import linecache
import sys
import types
from typing import Dict, Optional, Protocol

from ..utils.exceptions import MaterializationError, RegistryError
from ..utils.logging import get_logger
from ..utils.naming import split_qualified_name

logger = get_logger(__name__)


class TypeRegistry(Protocol):
    """Protocol for turning generated source into live classes."""

    def has(self, class_name: str) -> bool:
        ...

    def define(self, class_name: str, source_code: str) -> type:
        ...

    def get(self, class_name: str) -> type:
        ...


class ModuleTypeRegistry:
    """Materializes generated classes as in-memory modules."""

    def __init__(self):
        self._types: Dict[str, type] = {}

    def has(self, class_name: str) -> bool:
        return class_name in self._types

    def get(self, class_name: str) -> type:
        if class_name not in self._types:
            raise RegistryError(f'The class "{class_name}" is not defined.', class_name)
        return self._types[class_name]

    def define(self, class_name: str, source_code: str) -> type:
        """
        Compile ``source_code`` and register the class it defines.

        Args:
            class_name: Fully qualified generated class name
            source_code: Module source defining the class

        Returns:
            The materialized class

        Raises:
            RegistryError: If ``class_name`` is already defined
            MaterializationError: If the source does not compile or does
                not define the expected class
        """
        if self.has(class_name):
            raise RegistryError(f'The class "{class_name}" is already defined.', class_name)

        module_name, short_name = split_qualified_name(class_name)
        module_name = module_name or class_name
        filename = f"<proxygen:{class_name}>"

        try:
            code = compile(source_code, filename, "exec")
        except SyntaxError as e:
            raise MaterializationError(
                f"Generated source for {class_name} does not compile: {e}", class_name, source_code
            ) from e

        # Lets tracebacks and inspect.getsource() show generated lines.
        linecache.cache[filename] = (len(source_code), None, source_code.splitlines(True), filename)

        module = types.ModuleType(module_name)
        module.__file__ = filename
        sys.modules[module_name] = module
        try:
            exec(code, module.__dict__)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise

        cls = module.__dict__.get(short_name)
        if not isinstance(cls, type):
            sys.modules.pop(module_name, None)
            raise MaterializationError(
                f"Generated source does not define the class {short_name}", class_name, source_code
            )

        self._types[class_name] = cls
        logger.debug(f"Materialized {class_name} in module {module_name}")
        return cls

    def clear(self) -> None:
        """Forget every class and drop the generated modules from ``sys.modules``."""
        for class_name in self._types:
            module_name = split_qualified_name(class_name)[0] or class_name
            sys.modules.pop(module_name, None)
        self._types.clear()

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, class_name: str) -> bool:
        return self.has(class_name)


_default_registry: Optional[ModuleTypeRegistry] = None


def get_default_registry() -> ModuleTypeRegistry:
    """Get the process-wide registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ModuleTypeRegistry()
    return _default_registry
