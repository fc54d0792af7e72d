"""
Unit tests for the runtime type registry.

This module tests materialization of generated source into live classes
and the error handling around it.
"""

import inspect
import sys

import pytest

from proxygen.runtime.registry import ModuleTypeRegistry, get_default_registry
from proxygen.utils.exceptions import MaterializationError, RegistryError

SOURCE = (
    "from __future__ import annotations\n"
    "\n"
    "\n"
    "class Widget:\n"
    "    def size(self) -> int:\n"
    "        return 3\n"
)

NAME = "Gen_abc.__CG__.tests.Widget"


class TestModuleTypeRegistry:
    """Test cases for ModuleTypeRegistry."""

    def test_define(self, registry):
        cls = registry.define(NAME, SOURCE)

        assert cls.__name__ == "Widget"
        assert cls.__module__ == "Gen_abc.__CG__.tests"
        assert cls().size() == 3
        assert registry.has(NAME)
        assert registry.get(NAME) is cls
        assert sys.modules["Gen_abc.__CG__.tests"].Widget is cls

    def test_source_is_inspectable(self, registry):
        cls = registry.define(NAME, SOURCE)
        assert "return 3" in inspect.getsource(cls.size)

    def test_redefinition_refused(self, registry):
        registry.define(NAME, SOURCE)
        with pytest.raises(RegistryError) as exc_info:
            registry.define(NAME, SOURCE)
        assert exc_info.value.class_name == NAME

    def test_unknown_name(self, registry):
        assert not registry.has(NAME)
        with pytest.raises(RegistryError):
            registry.get(NAME)

    def test_syntax_error(self, registry):
        broken = "class Widget(:\n    pass\n"
        with pytest.raises(MaterializationError) as exc_info:
            registry.define(NAME, broken)

        assert exc_info.value.source_code == broken
        assert isinstance(exc_info.value.__cause__, SyntaxError)
        assert not registry.has(NAME)

    def test_missing_class(self, registry):
        with pytest.raises(MaterializationError):
            registry.define(NAME, "VALUE = 1\n")
        assert "Gen_abc.__CG__.tests" not in sys.modules

    def test_execution_errors_propagate(self, registry):
        with pytest.raises(ZeroDivisionError):
            registry.define(NAME, "1 / 0\n")
        assert "Gen_abc.__CG__.tests" not in sys.modules
        assert not registry.has(NAME)

    def test_clear(self):
        registry = ModuleTypeRegistry()
        registry.define(NAME, SOURCE)
        assert len(registry) == 1
        assert NAME in registry

        registry.clear()

        assert len(registry) == 0
        assert "Gen_abc.__CG__.tests" not in sys.modules


def test_default_registry_is_shared():
    assert get_default_registry() is get_default_registry()
