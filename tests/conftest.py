"""
Pytest configuration and shared fixtures for proxygen tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import tempfile
import shutil

from proxygen.codegen import ClassModel, MethodModel, ParameterModel, PropertyModel, describe_type
from proxygen.runtime import ModuleTypeRegistry
from proxygen.utils.config import set_config

import sample_types


@pytest.fixture(scope="session")
def temp_test_dir():
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="proxygen_test_")
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Run every test against default configuration."""
    monkeypatch.delenv("PROXYGEN_CONFIG", raising=False)
    monkeypatch.delenv("PROXYGEN_PROXY_PREFIX", raising=False)
    set_config(None)
    yield
    set_config(None)


# Registry fixtures
@pytest.fixture
def registry():
    """Create an isolated registry that drops its modules afterwards."""
    registry = ModuleTypeRegistry()
    yield registry
    registry.clear()


# Introspection fixtures
@pytest.fixture
def order_type():
    return describe_type(sample_types.Order)


@pytest.fixture
def interaction_log():
    return []


# Model fixtures
@pytest.fixture
def greeter_model():
    """A small, fully populated class model."""
    model = ClassModel("demo.Greeter")
    model.doc = "Says hello."
    model.set_constant("GREETING", "hello")
    model.set_property(PropertyModel("name", default="world"))

    greet = MethodModel(
        "greet",
        parameters=[ParameterModel("punctuation", type="str", default="!")],
        body='return f"{self.GREETING} {self.name}{punctuation}"',
    )
    greet.set_return_type("str")
    model.set_method(greet)
    return model


@pytest.fixture
def materialize():
    """Execute generated source in a scratch namespace."""
    def _materialize(source: str, name: str = "generated"):
        namespace = {"__name__": name}
        exec(compile(source, f"<{name}>", "exec"), namespace)
        return namespace
    return _materialize


# Test collection hooks
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test path."""
    for item in items:
        if "unit" in str(item.path):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.path):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
