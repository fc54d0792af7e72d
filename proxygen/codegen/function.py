"""
Structural model of a free function.

Unlike a method, a function is not bound to a class; it keeps its
namespace (the dotted module path) separate from its short name.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import List, Optional

from .members import ParameterModel, SignatureMixin
from .reflection import split_nullable


@dataclass
class FunctionModel(SignatureMixin):
    """A module-level function."""
    name: str
    namespace: Optional[str] = None
    parameters: List[ParameterModel] = field(default_factory=list)
    return_type: Optional[str] = None
    return_type_nullable: bool = False
    body: str = ""
    doc: Optional[str] = None
    returns_reference: bool = False

    @classmethod
    def from_function(cls, func) -> "FunctionModel":
        signature = inspect.signature(func)
        function = cls(
            func.__name__,
            namespace=func.__module__,
            parameters=[ParameterModel.from_parameter(p) for p in signature.parameters.values()],
            doc=inspect.cleandoc(func.__doc__) if func.__doc__ else None,
        )
        return_type, nullable = split_nullable(signature.return_annotation)
        if return_type is not None:
            function.set_return_type(return_type, nullable)
        return function

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    def set_qualified_name(self, name: str) -> "FunctionModel":
        if "." in name:
            self.namespace, self.name = name.rsplit(".", 1)
        else:
            self.namespace, self.name = None, name
        return self

    def set_body(self, body: str) -> "FunctionModel":
        self.body = body
        return self
