"""
Deterministic traversal of the structural model.

The navigator decides *what* is emitted and in which order; turning each
visited element into text is left to a visitor. Two traversals of an
unchanged model with the same comparators produce the same event stream,
which is what makes rendered output byte-for-byte reproducible.

Default orderings:

* constants: case-insensitive name, ascending;
* properties: visibility score descending (public=3, protected=2,
  private=1), then case-insensitive name *descending*;
* methods: non-static before static, then the property ordering.

The constant ordering and the member ordering break ties in opposite
directions. Both are kept as separately named defaults; unifying them
would reorder every previously generated proxy.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Optional

from .class_model import ClassModel
from .function import FunctionModel
from .members import ConstantModel, MemberBase
from .visitor import Visitor

Comparator = Callable[[object, object], int]


def _strcasecmp(a: str, b: str) -> int:
    a, b = a.lower(), b.lower()
    return (a > b) - (a < b)


def member_sorting_score(member: MemberBase) -> int:
    return member.visibility.score


def default_constant_sort_func(a: ConstantModel, b: ConstantModel) -> int:
    return _strcasecmp(a.name, b.name)


def default_property_sort_func(a: MemberBase, b: MemberBase) -> int:
    a_score = member_sorting_score(a)
    b_score = member_sorting_score(b)
    if a_score != b_score:
        return -1 if a_score > b_score else 1
    return _strcasecmp(b.name, a.name)


def default_method_sort_func(a: MemberBase, b: MemberBase) -> int:
    if a.static != b.static:
        return 1 if a.static else -1
    return default_property_sort_func(a, b)


class DefaultNavigator:
    """
    The default traversal algorithm.

    Unlike textbook visitor implementations, the traversal logic lives
    here rather than on the traversed objects, so one model can be walked
    with different orderings without touching it.
    """

    def __init__(self):
        self._constant_sort_func: Optional[Comparator] = None
        self._property_sort_func: Optional[Comparator] = None
        self._method_sort_func: Optional[Comparator] = None

    def set_constant_sort_func(self, func: Optional[Comparator] = None) -> None:
        """Install a custom constant comparator; None restores the default."""
        self._constant_sort_func = func

    def set_property_sort_func(self, func: Optional[Comparator] = None) -> None:
        """Install a custom property comparator; None restores the default."""
        self._property_sort_func = func

    def set_method_sort_func(self, func: Optional[Comparator] = None) -> None:
        """Install a custom method comparator; None restores the default."""
        self._method_sort_func = func

    def accept(self, visitor: Visitor, model: ClassModel) -> None:
        visitor.start_visiting_class(model)

        constants = list(model.get_constants(as_objects=True).values())
        if constants:
            constants.sort(key=cmp_to_key(self._constant_sort_func or default_constant_sort_func))

            visitor.start_visiting_class_constants()
            for constant in constants:
                visitor.visit_class_constant(constant)
            visitor.end_visiting_class_constants()

        properties = model.get_properties()
        if properties:
            properties.sort(key=cmp_to_key(self._property_sort_func or default_property_sort_func))

            visitor.start_visiting_properties()
            for prop in properties:
                visitor.visit_property(prop)
            visitor.end_visiting_properties()

        methods = model.get_methods()
        if methods:
            methods.sort(key=cmp_to_key(self._method_sort_func or default_method_sort_func))

            visitor.start_visiting_methods()
            for method in methods:
                visitor.visit_method(method)
            visitor.end_visiting_methods()

        visitor.end_visiting_class(model)

    def accept_function(self, visitor: Visitor, function: FunctionModel) -> None:
        visitor.visit_function(function)
