"""
Generator strategies: turn a ClassModel into source text.

A strategy pairs a navigator (what is emitted, in which order) with a
visitor (how each element is spelled).
"""

from __future__ import annotations

from typing import Optional, Protocol

from .class_model import ClassModel
from .navigator import Comparator, DefaultNavigator
from .visitor import PythonSourceVisitor, Visitor


class GeneratorStrategy(Protocol):
    """Protocol for rendering a class model as source."""

    def generate(self, model: ClassModel) -> str:
        ...


class DefaultGeneratorStrategy:
    """
    Default strategy: DefaultNavigator driving a PythonSourceVisitor.

    The visitor is reset before every run, so one strategy can render any
    number of models and equal models always yield identical text.
    """

    def __init__(self, visitor: Optional[Visitor] = None):
        self.navigator = DefaultNavigator()
        self.visitor = visitor or PythonSourceVisitor()

    def set_constant_sort_func(self, func: Optional[Comparator] = None) -> None:
        self.navigator.set_constant_sort_func(func)

    def set_property_sort_func(self, func: Optional[Comparator] = None) -> None:
        self.navigator.set_property_sort_func(func)

    def set_method_sort_func(self, func: Optional[Comparator] = None) -> None:
        self.navigator.set_method_sort_func(func)

    def generate(self, model: ClassModel) -> str:
        self.visitor.reset()
        self.navigator.accept(self.visitor, model)
        return self.visitor.get_content()
