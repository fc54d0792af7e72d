"""
Structural model of class members.

Constants, properties, methods and parameters are plain mutable objects
that generator plugins edit in place. Visibility is restricted to
public/protected/private; defaults keep a presence flag separate from
their value, so "no default" is never confused with a default of None.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

from ..utils.exceptions import InvalidVisibilityError, ParameterIndexError
from .reflection import (
    MethodDescriptor,
    PropertyDescriptor,
    format_annotation,
    split_nullable,
)
from .values import is_builtin_type


class Visibility(Enum):
    """Member visibility."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def coerce(cls, value) -> "Visibility":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidVisibilityError(value) from None

    @property
    def score(self) -> int:
        """Sorting score: public=3, protected=2, private=1."""
        return _VISIBILITY_SCORES[self]


_VISIBILITY_SCORES = {
    Visibility.PUBLIC: 3,
    Visibility.PROTECTED: 2,
    Visibility.PRIVATE: 1,
}


class _NoDefault:
    """Marker for an absent default value."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT = _NoDefault()


# =============================================================================
# Constants and members
# =============================================================================

@dataclass
class ConstantModel:
    """A class-level constant."""
    name: str
    value: Any = None


@dataclass
class MemberBase:
    """State shared by properties and methods."""
    name: str
    visibility: Visibility = Visibility.PUBLIC
    static: bool = False
    doc: Optional[str] = None

    def __setattr__(self, key, value):
        if key == "visibility":
            value = Visibility.coerce(value)
        super().__setattr__(key, value)

    @property
    def rendered_name(self) -> str:
        """
        The identifier as it appears in source.

        Protected members carry one leading underscore and private ones two;
        a name that lacks the prefix its visibility demands gets it added.
        """
        name = self.name
        if name.startswith("__") and name.endswith("__"):
            return name
        if self.visibility is Visibility.PRIVATE:
            return "__" + name.lstrip("_")
        if self.visibility is Visibility.PROTECTED:
            return "_" + name.lstrip("_")
        return name


@dataclass
class PropertyModel(MemberBase):
    """A data attribute of the class."""
    default: Any = NO_DEFAULT

    @classmethod
    def from_descriptor(cls, ref: PropertyDescriptor) -> "PropertyModel":
        prop = cls(ref.name, visibility=ref.visibility, static=ref.is_static, doc=ref.doc)
        if ref.has_default:
            prop.set_default_value(ref.default)
        return prop

    @property
    def has_default_value(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def default_value(self) -> Any:
        return None if self.default is NO_DEFAULT else self.default

    def set_default_value(self, value: Any) -> "PropertyModel":
        self.default = value
        return self

    def unset_default_value(self) -> "PropertyModel":
        self.default = NO_DEFAULT
        return self


@dataclass
class ParameterModel:
    """A single parameter of a method or function."""
    name: str
    type: Optional[str] = None
    default: Any = NO_DEFAULT
    passed_by_reference: bool = False
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD
    # Source expression rendered in place of a default that has no literal form.
    default_expression: Optional[str] = None

    @classmethod
    def from_parameter(cls, ref: inspect.Parameter) -> "ParameterModel":
        param = cls(ref.name, type=format_annotation(ref.annotation), kind=ref.kind)
        if ref.default is not inspect.Parameter.empty:
            param.set_default_value(ref.default)
        return param

    @property
    def has_type(self) -> bool:
        return self.type is not None

    @property
    def type_builtin(self) -> bool:
        return self.type is not None and is_builtin_type(self.type)

    @property
    def has_default_value(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def default_value(self) -> Any:
        return None if self.default is NO_DEFAULT else self.default

    def set_type(self, type_name: Optional[str]) -> "ParameterModel":
        self.type = type_name
        return self

    def set_default_value(self, value: Any) -> "ParameterModel":
        self.default = value
        self.default_expression = None
        return self

    def set_default_expression(self, value: Any, expression: str) -> "ParameterModel":
        """Keep ``value`` as the default but render it as ``expression``."""
        self.default = value
        self.default_expression = expression
        return self

    def unset_default_value(self) -> "ParameterModel":
        self.default = NO_DEFAULT
        self.default_expression = None
        return self


# =============================================================================
# Callables
# =============================================================================

class SignatureMixin:
    """Ordered parameter list and return type shared by methods and free functions."""

    parameters: List[ParameterModel]
    return_type: Optional[str]
    return_type_nullable: bool

    def set_parameters(self, parameters: Iterable[ParameterModel]):
        self.parameters = list(parameters)
        return self

    def add_parameter(self, parameter: ParameterModel):
        self.parameters.append(parameter)
        return self

    def get_parameter(self, position: int) -> ParameterModel:
        if not 0 <= position < len(self.parameters):
            raise ParameterIndexError(
                f'There is no parameter at position "{position}".', position, len(self.parameters)
            )
        return self.parameters[position]

    def replace_parameter(self, position: int, parameter: ParameterModel):
        """Replace the parameter at ``position``; the position one past the end appends."""
        size = len(self.parameters)
        if not 0 <= position <= size:
            raise ParameterIndexError(
                f"The position must be in the range [0, {size}].", position, size
            )
        if position == size:
            self.parameters.append(parameter)
        else:
            self.parameters[position] = parameter
        return self

    def remove_parameter(self, position: int):
        """Remove the parameter at ``position``; later parameters shift down by one."""
        if not 0 <= position < len(self.parameters):
            raise ParameterIndexError(
                f'There is no parameter at position "{position}".', position, len(self.parameters)
            )
        del self.parameters[position]
        return self

    def set_return_type(self, type_name: Optional[str], nullable: bool = False):
        self.return_type = type_name
        self.return_type_nullable = nullable if type_name is not None else False
        return self

    @property
    def has_return_type(self) -> bool:
        return self.return_type is not None

    @property
    def return_type_builtin(self) -> bool:
        return self.return_type is not None and is_builtin_type(self.return_type)

    @property
    def returns_none(self) -> bool:
        """Whether the declared return type is void."""
        return self.return_type == "None" and not self.return_type_nullable


@dataclass
class MethodModel(SignatureMixin, MemberBase):
    """A method of the class."""
    final: bool = False
    abstract: bool = False
    parameters: List[ParameterModel] = field(default_factory=list)
    return_type: Optional[str] = None
    return_type_nullable: bool = False
    body: str = ""
    returns_reference: bool = False

    @classmethod
    def from_descriptor(cls, ref: MethodDescriptor) -> "MethodModel":
        method = cls(
            ref.name,
            visibility=ref.visibility,
            static=ref.is_static,
            doc=ref.doc,
            final=ref.is_final,
            abstract=ref.is_abstract,
            parameters=[ParameterModel.from_parameter(p) for p in ref.parameters],
        )
        return_type, nullable = split_nullable(ref.return_annotation)
        if return_type is not None:
            method.set_return_type(return_type, nullable)
        return method

    def set_body(self, body: str) -> "MethodModel":
        self.body = body
        return self
