"""
Code generation: structural model, introspection and source rendering.
"""

from .class_model import ClassModel
from .function import FunctionModel
from .members import (
    NO_DEFAULT,
    ConstantModel,
    MethodModel,
    ParameterModel,
    PropertyModel,
    Visibility,
)
from .navigator import (
    DefaultNavigator,
    default_constant_sort_func,
    default_method_sort_func,
    default_property_sort_func,
    member_sorting_score,
)
from .reflection import TypeDescriptor, describe_type, overridable_methods
from .strategy import DefaultGeneratorStrategy, GeneratorStrategy
from .visitor import PythonSourceVisitor, Visitor
from .writer import Writer

__all__ = [
    "ClassModel",
    "FunctionModel",
    "NO_DEFAULT",
    "ConstantModel",
    "MethodModel",
    "ParameterModel",
    "PropertyModel",
    "Visibility",
    "DefaultNavigator",
    "default_constant_sort_func",
    "default_method_sort_func",
    "default_property_sort_func",
    "member_sorting_score",
    "TypeDescriptor",
    "describe_type",
    "overridable_methods",
    "DefaultGeneratorStrategy",
    "GeneratorStrategy",
    "PythonSourceVisitor",
    "Visitor",
    "Writer",
]
