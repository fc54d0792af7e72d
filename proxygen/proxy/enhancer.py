"""
Proxy class generation.

The Enhancer builds a subclass of an existing class, lets a pipeline of
generator plugins reshape it, and renders the result as Python source
which can be materialized in-process or written to disk.

Example:
    enhancer = Enhancer(Order, generators=[InterceptionGenerator()])
    proxy = enhancer.create_instance(order_id=7)
    proxy.cg_interception_set_loader(RegexInterceptionLoader({"::cancel$": audit}))
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..codegen.class_model import ClassModel
from ..codegen.members import MethodModel
from ..codegen.reflection import TypeDescriptor, describe_type, is_dunder
from ..codegen.strategy import DefaultGeneratorStrategy, GeneratorStrategy
from ..codegen.utils import call_method, reference_defaults
from ..runtime.registry import TypeRegistry, get_default_registry
from ..utils.exceptions import ConfigurationError, NamingError, PersistenceError
from ..utils.logging import ProxyGenLogger
from ..utils.naming import SEPARATOR, DefaultNamingStrategy, NamingStrategy, is_proxy_class_name, qualified_alias
from .base import ProxyGenerator

ClassLike = Union[type, TypeDescriptor]

CLASS_DOC = (
    "Enhanced proxy class.\n"
    "\n"
    "This code was generated automatically by proxygen, manual changes to it\n"
    "will be lost upon next generation."
)


def _describe(cls: ClassLike) -> TypeDescriptor:
    if isinstance(cls, TypeDescriptor):
        return cls
    return describe_type(cls)


class Enhancer:
    """
    Generates proxy subclasses.

    At least one interface or generator is required; an Enhancer without
    either would only produce an empty subclass.
    """

    def __init__(
        self,
        original: ClassLike,
        interfaces: Iterable[ClassLike] = (),
        generators: Iterable[ProxyGenerator] = (),
        naming_strategy: Optional[NamingStrategy] = None,
        generator_strategy: Optional[GeneratorStrategy] = None,
        registry: Optional[TypeRegistry] = None,
    ):
        interfaces = list(interfaces)
        generators = list(generators)
        if not interfaces and not generators:
            raise ConfigurationError("Either generators, or interfaces must be given.")

        self.original = _describe(original)
        self.interfaces: List[TypeDescriptor] = [_describe(interface) for interface in interfaces]
        self.generators: List[ProxyGenerator] = generators
        self._naming_strategy = naming_strategy
        self._generator_strategy = generator_strategy
        self._registry = registry
        self._logger = ProxyGenLogger(__name__)

    # -------------------------------------------------------------------------
    # Strategies
    # -------------------------------------------------------------------------

    def set_naming_strategy(self, naming_strategy: NamingStrategy) -> None:
        self._naming_strategy = naming_strategy

    def set_generator_strategy(self, generator_strategy: GeneratorStrategy) -> None:
        self._generator_strategy = generator_strategy

    def set_registry(self, registry: TypeRegistry) -> None:
        self._registry = registry

    @property
    def naming_strategy(self) -> NamingStrategy:
        if self._naming_strategy is None:
            self._naming_strategy = DefaultNamingStrategy()
        return self._naming_strategy

    @property
    def generator_strategy(self) -> GeneratorStrategy:
        if self._generator_strategy is None:
            self._generator_strategy = DefaultGeneratorStrategy()
        return self._generator_strategy

    @property
    def registry(self) -> TypeRegistry:
        if self._registry is None:
            self._registry = get_default_registry()
        return self._registry

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def get_class_name(self) -> str:
        """Return the generated class name for the proxied class."""
        return self.naming_strategy.get_class_name(self.original)

    def build_class(self) -> ClassModel:
        """
        Build the model of the proxy class.

        The model subclasses the original, implements the interfaces and
        has then been passed through every generator in order.

        Raises:
            NamingError: If the naming strategy returns a name without the separator
        """
        class_name = self.get_class_name()
        if not is_proxy_class_name(class_name):
            raise NamingError(
                f'The proxy class name must contain ".{SEPARATOR}." followed by the original class name, '
                f'but got "{class_name}".',
                class_name,
            )

        self._logger.log_generation_start(self.original.name, class_name, len(self.generators))

        model = ClassModel(class_name)
        model.doc = CLASS_DOC
        model.parent_name = self.original.name
        model.add_import(self.original.name, qualified_alias(self.original.name))

        for interface in self.interfaces:
            model.add_interface_name(interface.name)
            model.add_import(interface.name, qualified_alias(interface.name))

        for interface in self.interfaces:
            for method in interface.methods:
                if is_dunder(method.name):
                    continue
                model.set_method(self._interface_method(method.name, interface, model))

        # Method name -> generator that last gave it a body. Interface stubs
        # are not listed, generators may replace them freely.
        owners: Dict[str, str] = {}
        for generator in self.generators:
            before = {method.name: method.body for method in model.get_methods()}
            generator.generate(self.original, model)
            self._check_composition(generator, model, before, owners)
            self._logger.log_plugin_applied(type(generator).__name__, class_name, len(model.get_methods()))

        return model

    def _check_composition(
        self,
        generator: ProxyGenerator,
        model: ClassModel,
        before: Dict[str, str],
        owners: Dict[str, str],
    ) -> None:
        """
        Check that ``generator`` kept every body an earlier generator wrote.

        A generator may only prefix such a body. Replacing it would silently
        drop the earlier generator's behavior, as a lazy guard discarded by a
        later interception rewrite.

        Raises:
            ConfigurationError: If an earlier generator's body was replaced
        """
        name = type(generator).__name__
        for method in model.get_methods():
            previous = before.get(method.name)
            if method.name in owners and previous is not None and not method.body.endswith(previous):
                raise ConfigurationError(
                    f'{name} replaced the body {owners[method.name]} generated for "{method.name}"; '
                    'generators that replace method bodies must run before generators that wrap them.'
                )
            if method.body != previous:
                owners[method.name] = name

    def _interface_method(self, name: str, interface: TypeDescriptor, model: ClassModel) -> MethodModel:
        declared = interface.get_method(name)
        method = MethodModel.from_descriptor(declared)
        method.abstract = False
        declaring_alias = model.add_import(declared.declaring_type, qualified_alias(declared.declaring_type))
        reference_defaults(method.parameters, f"{declaring_alias}.{method.rendered_name}")

        if not self.original.has_method(name):
            return method
        implemented = self.original.get_method(name)
        if implemented.is_abstract:
            return method

        if method.static:
            receiver = model.alias_for(self.original.name)
        else:
            receiver = "super()"
        forward = call_method(method.rendered_name, method.parameters, receiver)
        return method.set_body(forward if method.returns_none else "return " + forward)

    def generate_class(self) -> str:
        """Render the proxy class as Python module source."""
        return self.generator_strategy.generate(self.build_class())

    # -------------------------------------------------------------------------
    # Materialization and persistence
    # -------------------------------------------------------------------------

    def create_class(self) -> type:
        """Return the live proxy class, generating and defining it on first use."""
        class_name = self.get_class_name()
        registry = self.registry

        if registry.has(class_name):
            self._logger.log_registry_hit(class_name)
            return registry.get(class_name)

        self._logger.log_registry_miss(class_name)
        return registry.define(class_name, self.generate_class())

    def create_instance(self, *args, **kwargs):
        """Instantiate the proxy class, passing the arguments to its constructor."""
        return self.create_class()(*args, **kwargs)

    def write_class(self, filename: Union[str, os.PathLike]) -> Path:
        """
        Render the proxy class and write it to ``filename``.

        Missing parent directories are created. The source is rendered
        before anything touches the filesystem.

        Args:
            filename: Target file path

        Returns:
            The path written to

        Raises:
            PersistenceError: If the directory cannot be created or is not writable
        """
        source = self.generate_class()
        path = Path(filename)
        directory = path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f'Could not create directory "{directory}".', str(directory)) from e

        if not os.access(directory, os.W_OK):
            raise PersistenceError(f'The directory "{directory}" is not writable.', str(directory))

        try:
            path.write_text(source, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f'Could not write "{path}".', str(path)) from e

        self._logger.log_persisted(self.get_class_name(), str(path), len(source))
        return path

    def __repr__(self) -> str:
        generators = ", ".join(type(g).__name__ for g in self.generators)
        return f"Enhancer({self.original.name}, generators=[{generators}])"
