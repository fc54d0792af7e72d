"""
Visitor Pattern Implementation for Source Rendering.

The navigator emits an ordered stream of visitation events; a visitor
turns each event into text. PythonSourceVisitor is the default renderer
and produces a self-contained Python module holding one class.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import List, Optional

from ..utils.exceptions import ConfigurationError
from .class_model import ClassModel
from .function import FunctionModel
from .members import ConstantModel, MethodModel, ParameterModel, PropertyModel
from .values import export_value
from .writer import Writer


class Visitor(ABC):
    """Event interface driven by DefaultNavigator."""

    @abstractmethod
    def reset(self) -> None:
        """Reset internal state so the same instance can be reused."""
        pass

    @abstractmethod
    def start_visiting_class(self, model: ClassModel) -> None:
        pass

    @abstractmethod
    def start_visiting_class_constants(self) -> None:
        pass

    @abstractmethod
    def visit_class_constant(self, constant: ConstantModel) -> None:
        pass

    @abstractmethod
    def end_visiting_class_constants(self) -> None:
        pass

    @abstractmethod
    def start_visiting_properties(self) -> None:
        pass

    @abstractmethod
    def visit_property(self, prop: PropertyModel) -> None:
        pass

    @abstractmethod
    def end_visiting_properties(self) -> None:
        pass

    @abstractmethod
    def start_visiting_methods(self) -> None:
        pass

    @abstractmethod
    def visit_method(self, method: MethodModel) -> None:
        pass

    @abstractmethod
    def end_visiting_methods(self) -> None:
        pass

    @abstractmethod
    def end_visiting_class(self, model: ClassModel) -> None:
        pass

    @abstractmethod
    def visit_function(self, function: FunctionModel) -> None:
        pass

    @abstractmethod
    def get_content(self) -> str:
        """Return everything rendered since the last reset."""
        pass


class PythonSourceVisitor(Visitor):
    """Renders the visitation stream as a Python module."""

    def __init__(self, writer: Optional[Writer] = None):
        self._writer = writer or Writer()
        self._model: Optional[ClassModel] = None
        self._body_started = False
        self._first_in_section = True

    def reset(self) -> None:
        self._writer.reset()
        self._model = None
        self._body_started = False
        self._first_in_section = True

    def get_content(self) -> str:
        return self._writer.content

    # -------------------------------------------------------------------------
    # Class
    # -------------------------------------------------------------------------

    def start_visiting_class(self, model: ClassModel) -> None:
        if not model.name:
            raise ConfigurationError("Cannot render a class without a name")

        self._model = model
        w = self._writer
        w.writeln("from __future__ import annotations")

        std_imports = self._standard_imports(model)
        if std_imports:
            w.writeln()
            for module in std_imports:
                w.writeln(f"import {module}")

        imports = model.imports
        if imports:
            w.writeln()
            for alias, qualified_name in imports.items():
                w.writeln(self._render_import(alias, qualified_name))

        if model.required_files:
            w.writeln()
            for path in model.required_files:
                w.writeln(f"runpy.run_path({path!r})")

        w.writeln().writeln()
        if model.final:
            w.writeln("@typing.final")

        bases = []
        if model.parent_name:
            bases.append(self._resolve(model.parent_name))
        bases.extend(self._resolve(name) for name in model.interface_names)
        if model.abstract:
            bases.append("metaclass=abc.ABCMeta")

        if bases:
            w.writeln(f"class {model.short_name}({', '.join(bases)}):")
        else:
            w.writeln(f"class {model.short_name}:")
        w.indent()

        if model.doc:
            self._write_docstring(model.doc)
            self._body_started = True

    def end_visiting_class(self, model: ClassModel) -> None:
        if not self._body_started:
            self._writer.writeln("pass")
        self._writer.outdent()

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def _start_section(self) -> None:
        if self._body_started:
            self._writer.writeln()
        self._body_started = True
        self._first_in_section = True

    def start_visiting_class_constants(self) -> None:
        self._start_section()

    def visit_class_constant(self, constant: ConstantModel) -> None:
        self._writer.writeln(f"{constant.name} = {export_value(constant.value)}")

    def end_visiting_class_constants(self) -> None:
        pass

    def start_visiting_properties(self) -> None:
        self._start_section()

    def visit_property(self, prop: PropertyModel) -> None:
        w = self._writer
        if prop.doc:
            for line in prop.doc.split("\n"):
                w.writeln(f"#: {line}".rstrip())

        name = prop.rendered_name
        if prop.static:
            declaration = f"{name}: typing.ClassVar"
        elif not prop.has_default_value:
            declaration = f"{name}: object"
        else:
            declaration = name

        if prop.has_default_value:
            w.writeln(f"{declaration} = {export_value(prop.default_value)}")
        else:
            w.writeln(declaration)

    def end_visiting_properties(self) -> None:
        pass

    def start_visiting_methods(self) -> None:
        self._start_section()

    def visit_method(self, method: MethodModel) -> None:
        w = self._writer
        if not self._first_in_section:
            w.writeln()
        self._first_in_section = False

        if method.final:
            w.writeln("@typing.final")
        if method.static:
            w.writeln("@staticmethod")
        if method.abstract:
            w.writeln("@abc.abstractmethod")

        self._write_def(
            method.rendered_name,
            method.parameters,
            include_self=not method.static,
            return_type=method.return_type,
            nullable=method.return_type_nullable,
            doc=method.doc,
            body=method.body,
        )

    def end_visiting_methods(self) -> None:
        pass

    # -------------------------------------------------------------------------
    # Free functions
    # -------------------------------------------------------------------------

    def visit_function(self, function: FunctionModel) -> None:
        if self._writer.content:
            self._writer.writeln().writeln()
        self._write_def(
            function.name,
            function.parameters,
            include_self=False,
            return_type=function.return_type,
            nullable=function.return_type_nullable,
            doc=function.doc,
            body=function.body,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _write_def(self, name, parameters, include_self, return_type, nullable, doc, body) -> None:
        w = self._writer
        signature = render_parameters(parameters, include_self=include_self)
        returns = f" -> {render_type(return_type, nullable)}" if return_type is not None else ""
        w.writeln(f"def {name}({signature}){returns}:")
        w.indent()

        if doc:
            self._write_docstring(doc)
        code = body.strip("\n")
        if code.strip():
            w.writeln(code)
        elif not doc:
            w.writeln("pass")

        w.outdent()

    def _write_docstring(self, doc: str) -> None:
        text = doc.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
        lines = text.split("\n")
        if len(lines) == 1:
            self._writer.writeln(f'"""{text}"""')
            return
        self._writer.writeln('"""' + lines[0])
        for line in lines[1:]:
            self._writer.writeln(line.rstrip())
        self._writer.writeln('"""')

    def _resolve(self, qualified_name: str) -> str:
        alias = self._model.alias_for(qualified_name)
        return alias if alias is not None else qualified_name

    @staticmethod
    def _render_import(alias: str, qualified_name: str) -> str:
        if "." not in qualified_name:
            if alias == qualified_name:
                return f"import {qualified_name}"
            return f"import {qualified_name} as {alias}"

        module, name = qualified_name.rsplit(".", 1)
        if alias == name:
            return f"from {module} import {name}"
        return f"from {module} import {name} as {alias}"

    @staticmethod
    def _standard_imports(model: ClassModel) -> List[str]:
        methods = model.get_methods()
        modules = []
        if model.abstract or any(m.abstract for m in methods):
            modules.append("abc")
        if model.required_files:
            modules.append("runpy")
        if model.final or any(m.final for m in methods) or any(p.static for p in model.get_properties()):
            modules.append("typing")
        return modules


def render_type(type_name: str, nullable: bool = False) -> str:
    """Render an annotation, appending ``| None`` for nullable types."""
    if nullable and type_name != "None":
        return f"{type_name} | None"
    return type_name


def render_parameters(parameters: List[ParameterModel], include_self: bool = True) -> str:
    """Render a parameter list, inserting the ``/`` and ``*`` markers Python requires."""
    parts = ["self"] if include_self else []
    star_emitted = False
    previous_kind = None

    for param in parameters:
        if previous_kind is inspect.Parameter.POSITIONAL_ONLY and param.kind is not inspect.Parameter.POSITIONAL_ONLY:
            parts.append("/")
        if param.kind is inspect.Parameter.KEYWORD_ONLY and not star_emitted:
            parts.append("*")
            star_emitted = True

        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            text = f"*{param.name}"
            star_emitted = True
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            text = f"**{param.name}"
        else:
            text = param.name

        if param.type is not None:
            text += f": {param.type}"
        if param.has_default_value:
            separator = " = " if param.type is not None else "="
            if param.default_expression is not None:
                text += separator + param.default_expression
            else:
                text += separator + export_value(param.default_value)

        parts.append(text)
        previous_kind = param.kind

    if previous_kind is inspect.Parameter.POSITIONAL_ONLY:
        parts.append("/")

    return ", ".join(parts)


def render_arguments(parameters: List[ParameterModel]) -> str:
    """Render the call-site argument list that forwards every parameter unchanged."""
    args = []
    for param in parameters:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            args.append(f"*{param.name}")
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            args.append(f"**{param.name}")
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            args.append(f"{param.name}={param.name}")
        else:
            args.append(param.name)
    return ", ".join(args)
