"""
Unit tests for the method invocation chain.

This module tests proceed() ordering, short-circuiting, argument
lookup and error propagation.
"""

import pytest

from proxygen.runtime.invocation import CallDescriptor, MethodInvocation
from proxygen.utils.exceptions import MissingArgumentError, UnknownParameterError

import sample_types
from sample_types import RecordingInterceptor


class Calculator:
    def __init__(self):
        self.calls = 0

    def add(self, a, b=10, *rest, scale=1, **options):
        self.calls += 1
        return (a + b + sum(rest)) * scale

    def fail(self):
        raise KeyError("boom")


class TestProceed:
    """Test cases for MethodInvocation.proceed."""

    def test_no_interceptors_calls_original(self):
        calculator = Calculator()
        invocation = MethodInvocation(Calculator.add, calculator, [1, 2], [])
        assert invocation.proceed() == 3
        assert calculator.calls == 1

    def test_onion_order(self, interaction_log):
        calculator = Calculator()

        def original(instance, value):
            interaction_log.append("original")
            return value

        chain = [RecordingInterceptor("A", interaction_log), RecordingInterceptor("B", interaction_log)]
        result = MethodInvocation(original, calculator, [5], chain).proceed()

        assert result == 5
        assert interaction_log == ["A-pre", "B-pre", "original", "B-post", "A-post"]

    def test_veto_short_circuits(self, interaction_log):
        calculator = Calculator()
        chain = [
            RecordingInterceptor("A", interaction_log, proceed=False, result="vetoed"),
            RecordingInterceptor("B", interaction_log),
        ]

        result = MethodInvocation(Calculator.add, calculator, [1], chain).proceed()

        assert result == "vetoed"
        assert interaction_log == ["A-pre"]
        assert calculator.calls == 0

    def test_repeated_proceed_moves_forward(self):
        calculator = Calculator()
        seen = []

        class Twice:
            def intercept(self, invocation):
                return invocation.proceed(), invocation.proceed()

        class Marker:
            def intercept(self, invocation):
                seen.append("marker")
                return invocation.proceed()

        result = MethodInvocation(Calculator.add, calculator, [1, 1], [Twice(), Marker()]).proceed()

        assert result == (2, 2)
        assert seen == ["marker"]
        assert calculator.calls == 2

    def test_interceptor_may_rewrite_arguments(self):
        class Doubler:
            def intercept(self, invocation):
                invocation.arguments[0] *= 2
                return invocation.proceed()

        invocation = MethodInvocation(Calculator.add, Calculator(), [5, 0], [Doubler()])
        assert invocation.proceed() == 10

    def test_keywords_are_forwarded(self):
        invocation = MethodInvocation(Calculator.add, Calculator(), [1, 2], [], {"scale": 3})
        assert invocation.proceed() == 9

    def test_exceptions_propagate_unchanged(self):
        invocation = MethodInvocation(Calculator.fail, Calculator(), [], [RecordingInterceptor("A", [])])
        with pytest.raises(KeyError, match="boom"):
            invocation.proceed()


class TestNamedArguments:
    """Test cases for MethodInvocation.get_named_argument."""

    def _invocation(self, arguments, keywords=None):
        return MethodInvocation(Calculator.add, Calculator(), arguments, [], keywords)

    def test_supplied_positional(self):
        assert self._invocation([1, 2]).get_named_argument("b") == 2

    def test_default(self):
        assert self._invocation([1]).get_named_argument("b") == 10

    def test_keyword_only(self):
        assert self._invocation([1], {"scale": 4}).get_named_argument("scale") == 4
        assert self._invocation([1]).get_named_argument("scale") == 1

    def test_var_positional(self):
        assert self._invocation([1, 2, 3, 4]).get_named_argument("rest") == (3, 4)
        assert self._invocation([1]).get_named_argument("rest") == ()

    def test_var_keyword(self):
        invocation = self._invocation([1], {"scale": 2, "mode": "fast"})
        assert invocation.get_named_argument("options") == {"mode": "fast"}

    def test_missing(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            self._invocation([]).get_named_argument("a")
        assert str(exc_info.value) == 'There was no value given for parameter "a".'

    def test_unknown(self):
        with pytest.raises(UnknownParameterError) as exc_info:
            self._invocation([1]).get_named_argument("self")
        assert str(exc_info.value) == 'The parameter "self" does not exist.'
        with pytest.raises(LookupError):
            self._invocation([1]).get_named_argument("missing")


class TestDescriptions:
    """Test cases for string forms."""

    def test_invocation_str(self):
        invocation = MethodInvocation(sample_types.Order.total, sample_types.Order(), [1], [])
        assert str(invocation) == "sample_types.Order::total"

    def test_call_descriptor_signature(self):
        call = CallDescriptor("sample_types.Order", "cancel", None, ["late"])
        assert call.signature == "sample_types.Order::cancel"
        assert call.keywords == {}
