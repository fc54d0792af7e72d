"""
Lazy-initialization proxies.

LazyInitializerGenerator guards every public overridable method so the
first call on a fresh instance runs an installed LazyInitializer before
the method itself. Calling a guarded method before an initializer was
installed raises LazyInitializationError.

The initialized flag is checked in each guard and set by the trampoline
in a separate statement; concurrent first calls on one instance may run
the initializer more than once unless it is idempotent.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from ..codegen.class_model import ClassModel
from ..codegen.members import MethodModel, ParameterModel, PropertyModel, Visibility
from ..codegen.reflection import TypeDescriptor, overridable_methods
from ..codegen.templates import JinjaTemplateRenderer, get_template_renderer
from ..codegen.utils import call_method, reference_defaults
from ..utils.logging import get_logger
from ..utils.naming import qualified_alias
from .base import ProxyGenerator

logger = get_logger(__name__)

LAZY_INITIALIZER_ALIAS = "_cg_LazyInitializer"
LAZY_INITIALIZATION_ERROR_ALIAS = "_cg_LazyInitializationError"


@runtime_checkable
class LazyInitializer(Protocol):
    """Completes the construction of a lazy proxy on first use."""

    def initialize(self, instance: Any) -> None:
        ...


class LazyInitializerGenerator(ProxyGenerator):
    """Adds the lazy-initialization state machine to a proxy class."""

    def __init__(self, prefix: Optional[str] = None, renderer: Optional[JinjaTemplateRenderer] = None):
        if prefix is None:
            from ..utils.config import get_config
            prefix = get_config().generation.lazy_prefix
        self.prefix = prefix
        self._renderer = renderer

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def generate(self, original: TypeDescriptor, model: ClassModel) -> None:
        # Protected methods are not entry points and stay unguarded.
        methods = overridable_methods(original, public_only=True)
        if not methods:
            logger.debug(f"No public overridable methods on {original.name}")
            return

        renderer = self._renderer or get_template_renderer()

        model.add_import("proxygen.proxy.lazy.LazyInitializer", LAZY_INITIALIZER_ALIAS)
        model.add_import("proxygen.utils.exceptions.LazyInitializationError", LAZY_INITIALIZATION_ERROR_ALIAS)

        initializer = PropertyModel(f"{self.prefix}lazy_initializer", visibility=Visibility.PRIVATE)
        initializer.set_default_value(None)
        model.set_property(initializer)

        initialized = PropertyModel(f"{self.prefix}initialized", visibility=Visibility.PRIVATE)
        initialized.set_default_value(False)
        model.set_property(initialized)

        setter = MethodModel(
            f"{self.prefix}set_lazy_initializer",
            parameters=[ParameterModel("initializer", type=LAZY_INITIALIZER_ALIAS)],
        )
        setter.set_return_type("None")
        setter.set_body(f"self.{initializer.rendered_name} = initializer")
        model.set_method(setter)

        initialize = MethodModel(f"{self.prefix}initialize", visibility=Visibility.PRIVATE)
        initialize.set_return_type("None")
        initialize.set_body(renderer.render_file("lazy_initialize.py.j2", {
            "initializer": initializer.rendered_name,
            "initialized": initialized.rendered_name,
            "error": LAZY_INITIALIZATION_ERROR_ALIAS,
            "message": f"{setter.rendered_name}() must be called prior to any other public method on this object.",
        }))
        model.set_method(initialize)

        guard = renderer.render_file("lazy_guard.py.j2", {
            "initialized": initialized.rendered_name,
            "initialize": initialize.rendered_name,
        })

        for method in methods:
            if model.has_method(method.name):
                gen_method = model.get_method(method.name)
                gen_method.set_body(guard + "\n" + gen_method.body)
                continue

            gen_method = MethodModel.from_descriptor(method)
            gen_method.doc = None
            gen_method.abstract = False
            declaring_alias = model.add_import(method.declaring_type, qualified_alias(method.declaring_type))
            reference_defaults(gen_method.parameters, f"{declaring_alias}.{gen_method.rendered_name}")

            forward = call_method(gen_method.rendered_name, gen_method.parameters)
            if not gen_method.returns_none:
                forward = "return " + forward
            gen_method.set_body(guard + "\n\n" + forward)
            model.set_method(gen_method)
