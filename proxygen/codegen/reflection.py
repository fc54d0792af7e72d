"""
Read-only introspection of existing classes.

This module transcribes a live Python class into frozen descriptor
objects: its qualified name, flags, constants, properties and methods.
The descriptors seed the structural model and drive the proxy plugins;
nothing here ever mutates the inspected class.
"""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..utils.naming import split_qualified_name

PUBLIC = "public"
PROTECTED = "protected"
PRIVATE = "private"

# Classes from these modules only contribute machinery, never members.
_SKIPPED_MODULES = frozenset({"builtins", "abc", "typing", "typing_extensions"})

# Bookkeeping attributes that ABCMeta and Protocol plant on user classes.
_SKIPPED_ATTRIBUTES = frozenset({
    "_abc_impl", "_is_protocol", "_is_runtime_protocol", "__protocol_attrs__",
    "__non_callable_proto_members__", "__parameters__", "__orig_bases__",
})


def visibility_from_name(name: str) -> str:
    """Map Python's naming convention onto public/protected/private."""
    if name.startswith("__") and name.endswith("__"):
        return PUBLIC
    if name.startswith("__"):
        return PRIVATE
    if name.startswith("_"):
        return PROTECTED
    return PUBLIC


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def qualified_type_name(cls: type) -> str:
    """Return ``module.QualName`` for ``cls``; builtins keep their bare name."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


# =============================================================================
# Annotation handling
# =============================================================================

def format_annotation(annotation: Any) -> Optional[str]:
    """Render an annotation as source text, or None when there is none."""
    if annotation is inspect.Parameter.empty:
        return None
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    return inspect.formatannotation(annotation)


def split_nullable(annotation: Any) -> Tuple[Optional[str], bool]:
    """
    Split an annotation into its type name and a nullable flag.

    ``Optional[X]``, ``X | None`` and their string forms become
    ``("X", True)``; a bare ``None`` stays a (void) type of its own.
    """
    if annotation is inspect.Parameter.empty:
        return None, False

    if isinstance(annotation, str):
        text = annotation.strip()
        if text.startswith("Optional[") and text.endswith("]"):
            return text[len("Optional["):-1].strip(), True
        if text.startswith("typing.Optional[") and text.endswith("]"):
            return text[len("typing.Optional["):-1].strip(), True
        if text.endswith("| None") and text != "| None":
            return text[:-len("| None")].strip(), True
        if text.startswith("None |"):
            return text[len("None |"):].strip(), True
        return text, False

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        args = typing.get_args(annotation)
        remaining = [arg for arg in args if arg is not type(None)]
        if len(remaining) == 1 and len(remaining) < len(args):
            return format_annotation(remaining[0]), True

    return format_annotation(annotation), False


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


# =============================================================================
# Descriptors
# =============================================================================

@dataclass(frozen=True)
class PropertyDescriptor:
    """A data attribute declared on a class."""
    name: str
    visibility: str = PUBLIC
    is_static: bool = False
    has_default: bool = False
    default: Any = None
    doc: Optional[str] = None


@dataclass(frozen=True)
class MethodDescriptor:
    """A method declared on a class, with its signature minus the bound ``self``/``cls``."""
    name: str
    declaring_type: str
    visibility: str = PUBLIC
    is_static: bool = False
    is_final: bool = False
    is_abstract: bool = False
    parameters: Tuple[inspect.Parameter, ...] = ()
    return_annotation: Any = inspect.Signature.empty
    doc: Optional[str] = None
    binding: str = "instance"
    function: Any = field(default=None, compare=False, repr=False)

    @property
    def parameter_names(self) -> List[str]:
        return [param.name for param in self.parameters]


@dataclass(frozen=True)
class TypeDescriptor:
    """Everything the generator needs to know about an existing class."""
    name: str
    is_abstract: bool = False
    is_final: bool = False
    doc: Optional[str] = None
    constants: Dict[str, Any] = field(default_factory=dict)
    properties: Tuple[PropertyDescriptor, ...] = ()
    methods: Tuple[MethodDescriptor, ...] = ()
    type: Optional[type] = field(default=None, compare=False, repr=False)

    @property
    def namespace(self) -> Optional[str]:
        return split_qualified_name(self.name)[0]

    @property
    def short_name(self) -> str:
        return split_qualified_name(self.name)[1]

    def has_method(self, name: str) -> bool:
        return any(method.name == name for method in self.methods)

    def get_method(self, name: str) -> MethodDescriptor:
        for method in self.methods:
            if method.name == name:
                return method
        raise KeyError(name)


# =============================================================================
# Introspection
# =============================================================================

def describe_type(cls: type) -> TypeDescriptor:
    """
    Describe ``cls`` and everything it inherits.

    Members are collected along the MRO; the first class that defines a
    name wins, exactly as attribute lookup would resolve it.

    Args:
        cls: The class to describe

    Returns:
        A frozen TypeDescriptor

    Raises:
        TypeError: If ``cls`` is not a class
    """
    if not inspect.isclass(cls):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")

    constants: Dict[str, Any] = {}
    properties: Dict[str, PropertyDescriptor] = {}
    methods: Dict[str, MethodDescriptor] = {}

    for klass in inspect.getmro(cls):
        if klass is object or klass.__module__ in _SKIPPED_MODULES:
            continue

        declaring_type = qualified_type_name(klass)
        annotations = inspect.get_annotations(klass)

        for raw_name, value in vars(klass).items():
            if raw_name in _SKIPPED_ATTRIBUTES:
                continue
            name = _demangle(klass, raw_name)
            if name in methods or name in properties or name in constants:
                continue

            method = _describe_method(name, value, declaring_type)
            if method is not None:
                methods[name] = method
                continue

            if is_dunder(name) or inspect.isclass(value) or hasattr(value, "__get__"):
                continue

            if name.isupper():
                constants[name] = value
            else:
                properties[name] = PropertyDescriptor(
                    name=name,
                    visibility=visibility_from_name(name),
                    is_static=_is_class_var(annotations.get(raw_name, inspect.Parameter.empty)),
                    has_default=True,
                    default=value,
                )

        for raw_name, annotation in annotations.items():
            name = _demangle(klass, raw_name)
            if raw_name in vars(klass) or name in properties or name in methods or name in constants:
                continue
            properties[name] = PropertyDescriptor(
                name=name,
                visibility=visibility_from_name(name),
                is_static=_is_class_var(annotation),
            )

    doc = cls.__dict__.get("__doc__")
    return TypeDescriptor(
        name=qualified_type_name(cls),
        is_abstract=inspect.isabstract(cls),
        is_final=bool(getattr(cls, "__final__", False)),
        doc=inspect.cleandoc(doc) if doc else None,
        constants=constants,
        properties=tuple(properties.values()),
        methods=tuple(methods.values()),
        type=cls,
    )


def _demangle(klass: type, raw_name: str) -> str:
    mangled_prefix = f"_{klass.__name__.lstrip('_')}__"
    if raw_name.startswith(mangled_prefix) and not raw_name.endswith("__"):
        return "__" + raw_name[len(mangled_prefix):]
    return raw_name


def _describe_method(name: str, value: Any, declaring_type: str) -> Optional[MethodDescriptor]:
    if isinstance(value, staticmethod):
        func, binding, skip = value.__func__, "static", 0
    elif isinstance(value, classmethod):
        func, binding, skip = value.__func__, "class", 1
    elif inspect.isfunction(value):
        func, binding, skip = value, "instance", 1
    else:
        return None

    signature = inspect.signature(func)
    doc = func.__doc__
    return MethodDescriptor(
        name=name,
        declaring_type=declaring_type,
        visibility=visibility_from_name(name),
        is_static=binding != "instance",
        is_final=bool(getattr(func, "__final__", False)),
        is_abstract=bool(getattr(value, "__isabstractmethod__", False)),
        parameters=tuple(signature.parameters.values())[skip:],
        return_annotation=signature.return_annotation,
        doc=inspect.cleandoc(doc) if doc else None,
        binding=binding,
        function=func,
    )


def overridable_methods(original: TypeDescriptor, public_only: bool = False) -> List[MethodDescriptor]:
    """
    Return the methods a subclass can meaningfully override.

    Public (and, unless ``public_only``, protected) methods that are
    neither final nor static. Dunder methods are excluded: constructors
    and protocol hooks are never proxied.
    """
    allowed = {PUBLIC} if public_only else {PUBLIC, PROTECTED}
    return [
        method for method in original.methods
        if method.visibility in allowed
        and not method.is_final
        and not method.is_static
        and not is_dunder(method.name)
    ]
