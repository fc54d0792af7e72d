"""
Structural model of a class.

A ClassModel is built fresh for each generation request, mutated in place
by generator plugins and discarded after rendering. Members are keyed by
name per category: inserting a member under an existing name replaces it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..utils.exceptions import ConfigurationError, MemberNotFoundError
from ..utils.naming import split_qualified_name
from .members import ConstantModel, MethodModel, PropertyModel
from .reflection import TypeDescriptor

_MISSING = object()


class ClassModel:
    """Represents a class to be rendered as source."""

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.parent_name: Optional[str] = None
        self.abstract = False
        self.final = False
        self.doc: Optional[str] = None
        self._interface_names: Dict[str, None] = {}
        self._imports: Dict[str, str] = {}
        self._constants: Dict[str, ConstantModel] = {}
        self._properties: Dict[str, PropertyModel] = {}
        self._methods: Dict[str, MethodModel] = {}
        self._required_files: List[str] = []

    @classmethod
    def from_descriptor(cls, ref: TypeDescriptor) -> "ClassModel":
        """Transcribe an introspected class into a model."""
        model = cls(ref.name)
        model.abstract = ref.is_abstract
        model.final = ref.is_final
        model.doc = ref.doc
        model.set_constants(ref.constants)
        for method in ref.methods:
            model.set_method(MethodModel.from_descriptor(method))
        for prop in ref.properties:
            model.set_property(PropertyModel.from_descriptor(prop))
        return model

    def __repr__(self) -> str:
        return (
            f"ClassModel(name={self.name!r}, constants={len(self._constants)}, "
            f"properties={len(self._properties)}, methods={len(self._methods)})"
        )

    # -------------------------------------------------------------------------
    # Naming
    # -------------------------------------------------------------------------

    @property
    def namespace(self) -> Optional[str]:
        return split_qualified_name(self.name)[0] if self.name else None

    @property
    def short_name(self) -> Optional[str]:
        return split_qualified_name(self.name)[1] if self.name else None

    # -------------------------------------------------------------------------
    # Bases, imports and required files
    # -------------------------------------------------------------------------

    @property
    def interface_names(self) -> List[str]:
        return list(self._interface_names)

    def set_interface_names(self, names: Iterable[str]) -> "ClassModel":
        self._interface_names = dict.fromkeys(names)
        return self

    def add_interface_name(self, name: str) -> "ClassModel":
        self._interface_names[name] = None
        return self

    @property
    def required_files(self) -> List[str]:
        return list(self._required_files)

    def set_required_files(self, files: Iterable[str]) -> "ClassModel":
        self._required_files = list(files)
        return self

    def add_required_file(self, file: str) -> "ClassModel":
        self._required_files.append(file)
        return self

    @property
    def imports(self) -> Dict[str, str]:
        """Mapping of alias to qualified name."""
        return dict(self._imports)

    def set_imports(self, imports: Mapping[str, str]) -> "ClassModel":
        self._imports = {}
        for alias, qualified_name in imports.items():
            self.add_import(qualified_name, alias)
        return self

    def add_import(self, qualified_name: str, alias: Optional[str] = None) -> str:
        """
        Import ``qualified_name`` into the generated module.

        Args:
            qualified_name: Dotted name of the imported object
            alias: Binding name; defaults to the last dotted segment

        Returns:
            The alias the object is bound to
        """
        if not qualified_name:
            raise ConfigurationError("Empty qualified name given for import")
        if alias is None:
            alias = split_qualified_name(qualified_name)[1]
        self._imports[alias] = qualified_name
        return alias

    def alias_for(self, qualified_name: str) -> Optional[str]:
        """Return the alias ``qualified_name`` is imported under, if any."""
        for alias, name in self._imports.items():
            if name == qualified_name:
                return alias
        return None

    def uses(self, type_name: str) -> bool:
        """Check whether the first segment of ``type_name`` is an imported alias."""
        if not type_name:
            raise ConfigurationError("Empty type name given to ClassModel.uses()")
        return type_name.split(".", 1)[0] in self._imports

    # -------------------------------------------------------------------------
    # Constants
    # -------------------------------------------------------------------------

    def get_constants(self, as_objects: bool = False) -> Dict[str, Any]:
        if as_objects:
            return dict(self._constants)
        return {name: constant.value for name, constant in self._constants.items()}

    def set_constants(self, constants: Mapping[str, Any]) -> "ClassModel":
        normalized = {}
        for name, value in constants.items():
            if not isinstance(value, ConstantModel):
                value = ConstantModel(name, value)
            normalized[name] = value
        self._constants = normalized
        return self

    def set_constant(self, name_or_constant: Union[str, ConstantModel], value: Any = _MISSING) -> "ClassModel":
        if isinstance(name_or_constant, ConstantModel):
            if value is not _MISSING:
                raise ConfigurationError("If a ConstantModel is passed, value must be omitted.")
            constant = name_or_constant
        else:
            constant = ConstantModel(name_or_constant, None if value is _MISSING else value)
        self._constants[constant.name] = constant
        return self

    def has_constant(self, name: str) -> bool:
        return name in self._constants

    def get_constant(self, name: str) -> ConstantModel:
        if name not in self._constants:
            raise MemberNotFoundError("constant", name)
        return self._constants[name]

    def remove_constant(self, name: str) -> "ClassModel":
        if name not in self._constants:
            raise MemberNotFoundError("constant", name)
        del self._constants[name]
        return self

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    def get_properties(self) -> List[PropertyModel]:
        return list(self._properties.values())

    def set_properties(self, properties: Iterable[PropertyModel]) -> "ClassModel":
        self._properties = {prop.name: prop for prop in properties}
        return self

    def set_property(self, prop: PropertyModel) -> "ClassModel":
        self._properties[prop.name] = prop
        return self

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str) -> PropertyModel:
        if name not in self._properties:
            raise MemberNotFoundError("property", name)
        return self._properties[name]

    def remove_property(self, name: str) -> "ClassModel":
        if name not in self._properties:
            raise MemberNotFoundError("property", name)
        del self._properties[name]
        return self

    # -------------------------------------------------------------------------
    # Methods
    # -------------------------------------------------------------------------

    def get_methods(self) -> List[MethodModel]:
        return list(self._methods.values())

    def set_methods(self, methods: Iterable[MethodModel]) -> "ClassModel":
        self._methods = {method.name: method for method in methods}
        return self

    def set_method(self, method: MethodModel) -> "ClassModel":
        self._methods[method.name] = method
        return self

    def has_method(self, name: str) -> bool:
        return name in self._methods

    def get_method(self, name: str) -> MethodModel:
        if name not in self._methods:
            raise MemberNotFoundError("method", name)
        return self._methods[name]

    def remove_method(self, name: str) -> "ClassModel":
        if name not in self._methods:
            raise MemberNotFoundError("method", name)
        del self._methods[name]
        return self
