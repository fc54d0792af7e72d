"""
Unit tests for interceptor selection.
"""

from proxygen.runtime.interceptors import (
    InterceptorLoader,
    MethodInterceptor,
    RegexInterceptionLoader,
)
from proxygen.runtime.invocation import CallDescriptor

from sample_types import RecordingInterceptor


def _call(class_name="shop.models.Order", method_name="cancel"):
    return CallDescriptor(class_name, method_name, object(), [])


class TestRegexInterceptionLoader:
    """Test cases for RegexInterceptionLoader."""

    def setup_method(self):
        self.audit = RecordingInterceptor("audit", [])
        self.timing = RecordingInterceptor("timing", [])
        self.security = RecordingInterceptor("security", [])

    def test_matches_in_declaration_order(self):
        loader = RegexInterceptionLoader({
            "::cancel$": self.audit,
            "Order": self.timing,
            "Invoice": self.security,
        })
        assert loader.load_interceptors(_call()) == [self.audit, self.timing]

    def test_search_is_unanchored(self):
        loader = RegexInterceptionLoader({"models": self.audit})
        assert loader.load_interceptors(_call()) == [self.audit]

    def test_no_match(self):
        loader = RegexInterceptionLoader({"::total$": self.audit})
        assert loader.load_interceptors(_call()) == []

    def test_empty_loader(self):
        assert RegexInterceptionLoader().load_interceptors(_call()) == []

    def test_initialize_interceptor_hook(self):
        class FactoryLoader(RegexInterceptionLoader):
            def initialize_interceptor(self, interceptor):
                return interceptor()

        loader = FactoryLoader({"Order": lambda: self.timing})
        assert loader.load_interceptors(_call()) == [self.timing]


def test_protocols_are_runtime_checkable():
    assert isinstance(RecordingInterceptor("x", []), MethodInterceptor)
    assert isinstance(RegexInterceptionLoader(), InterceptorLoader)
    assert not isinstance(object(), MethodInterceptor)
