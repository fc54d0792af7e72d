"""
Unit tests for deterministic model traversal.

This module tests the default orderings and the event stream the
navigator feeds to visitors.
"""

from unittest.mock import Mock

from proxygen.codegen import (
    ClassModel,
    ConstantModel,
    DefaultNavigator,
    MethodModel,
    PropertyModel,
    Visibility,
    default_constant_sort_func,
    default_method_sort_func,
    default_property_sort_func,
)
from proxygen.codegen.function import FunctionModel


class RecordingVisitor:
    """Collects the navigator's events as strings."""

    def __init__(self):
        self.events = []

    def __getattr__(self, name):
        def record(*args):
            label = name
            if name.startswith("visit_") and args:
                label += f":{args[0].name}"
            self.events.append(label)
        return record


def _visited(events, prefix):
    return [event.split(":", 1)[1] for event in events if event.startswith(prefix + ":")]


class TestDefaultOrdering:
    """Test cases for the named default comparators."""

    def test_constants_ascending_case_insensitive(self):
        model = ClassModel("Foo").set_constants({"b": 1, "A": 2, "c": 3})
        visitor = RecordingVisitor()
        DefaultNavigator().accept(visitor, model)
        assert _visited(visitor.events, "visit_class_constant") == ["A", "b", "c"]

    def test_properties_descending_within_visibility(self):
        model = ClassModel("Foo")
        for name in ("a", "b", "z"):
            model.set_property(PropertyModel(name))
        visitor = RecordingVisitor()
        DefaultNavigator().accept(visitor, model)
        assert _visited(visitor.events, "visit_property") == ["z", "b", "a"]

    def test_properties_by_visibility_first(self):
        model = ClassModel("Foo")
        model.set_property(PropertyModel("a", visibility=Visibility.PRIVATE))
        model.set_property(PropertyModel("b", visibility=Visibility.PROTECTED))
        model.set_property(PropertyModel("c"))
        visitor = RecordingVisitor()
        DefaultNavigator().accept(visitor, model)
        assert _visited(visitor.events, "visit_property") == ["c", "b", "a"]

    def test_methods_static_last(self):
        model = ClassModel("Foo")
        model.set_method(MethodModel("a", static=True))
        model.set_method(MethodModel("b"))
        model.set_method(MethodModel("c", visibility=Visibility.PRIVATE))
        visitor = RecordingVisitor()
        DefaultNavigator().accept(visitor, model)
        assert _visited(visitor.events, "visit_method") == ["b", "c", "a"]

    def test_comparators_directly(self):
        assert default_constant_sort_func(ConstantModel("a"), ConstantModel("B")) == -1
        assert default_property_sort_func(PropertyModel("a"), PropertyModel("B")) == 1
        assert default_property_sort_func(PropertyModel("x"), PropertyModel("X")) == 0
        assert default_method_sort_func(MethodModel("z", static=True), MethodModel("a")) == 1


class TestEventStream:
    """Test cases for the visitation protocol."""

    def test_full_stream(self):
        model = ClassModel("Foo").set_constant("A", 1)
        model.set_property(PropertyModel("p"))
        model.set_method(MethodModel("m"))
        visitor = RecordingVisitor()

        DefaultNavigator().accept(visitor, model)

        assert visitor.events == [
            "start_visiting_class",
            "start_visiting_class_constants",
            "visit_class_constant:A",
            "end_visiting_class_constants",
            "start_visiting_properties",
            "visit_property:p",
            "end_visiting_properties",
            "start_visiting_methods",
            "visit_method:m",
            "end_visiting_methods",
            "end_visiting_class",
        ]

    def test_empty_categories_are_skipped(self):
        visitor = RecordingVisitor()
        DefaultNavigator().accept(visitor, ClassModel("Foo"))
        assert visitor.events == ["start_visiting_class", "end_visiting_class"]

    def test_accept_function(self):
        visitor = Mock()
        function = FunctionModel("helper")
        DefaultNavigator().accept_function(visitor, function)
        visitor.visit_function.assert_called_once_with(function)

    def test_traversal_does_not_reorder_model(self):
        model = ClassModel("Foo")
        model.set_property(PropertyModel("a"))
        model.set_property(PropertyModel("b"))
        DefaultNavigator().accept(RecordingVisitor(), model)
        assert [p.name for p in model.get_properties()] == ["a", "b"]


class TestCustomOrdering:
    """Test cases for installed comparators."""

    def test_custom_and_restore(self):
        model = ClassModel("Foo")
        for name in ("a", "b", "c"):
            model.set_property(PropertyModel(name))
        navigator = DefaultNavigator()

        navigator.set_property_sort_func(lambda x, y: (x.name > y.name) - (x.name < y.name))
        visitor = RecordingVisitor()
        navigator.accept(visitor, model)
        assert _visited(visitor.events, "visit_property") == ["a", "b", "c"]

        navigator.set_property_sort_func(None)
        visitor = RecordingVisitor()
        navigator.accept(visitor, model)
        assert _visited(visitor.events, "visit_property") == ["c", "b", "a"]

    def test_custom_constant_comparator_receives_models(self):
        seen = []

        def compare(a, b):
            seen.append((type(a), type(b)))
            return 0

        navigator = DefaultNavigator()
        navigator.set_constant_sort_func(compare)
        navigator.accept(RecordingVisitor(), ClassModel("Foo").set_constants({"A": 1, "B": 2}))

        assert seen
        assert all(pair == (ConstantModel, ConstantModel) for pair in seen)

    def test_deterministic(self):
        model = ClassModel("Foo")
        for name in ("q", "B", "a", "Z"):
            model.set_method(MethodModel(name))
        first, second = RecordingVisitor(), RecordingVisitor()
        DefaultNavigator().accept(first, model)
        DefaultNavigator().accept(second, model)
        assert first.events == second.events
