"""
Interception proxies.

InterceptionGenerator rewrites every overridable method so that calls
are routed through the interceptors an InterceptorLoader selects for
them:

    class Order(_shop_models_Order):
        def cancel(self, reason):
            if self.__cg_interception_loader is None:
                raise _cg_ConfigurationError(...)

            _cg_MethodInvocation(
                _shop_models_Order.cancel,
                self,
                [reason],
                self.__cg_interception_loader.load_interceptors(
                    _cg_CallDescriptor('shop.models.Order', 'cancel', self, [reason], {})),
            ).proceed()

The body binds no local names, so parameters of any name reach the
original method unchanged.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..codegen.class_model import ClassModel
from ..codegen.members import MethodModel, ParameterModel, PropertyModel, Visibility
from ..codegen.reflection import MethodDescriptor, TypeDescriptor, overridable_methods
from ..codegen.templates import JinjaTemplateRenderer, get_template_renderer
from ..codegen.utils import argument_expressions, reference_defaults
from ..utils.logging import get_logger
from ..utils.naming import get_user_class, qualified_alias
from .base import ProxyGenerator

logger = get_logger(__name__)

CALL_DESCRIPTOR_ALIAS = "_cg_CallDescriptor"
METHOD_INVOCATION_ALIAS = "_cg_MethodInvocation"
INTERCEPTOR_LOADER_ALIAS = "_cg_InterceptorLoader"
CONFIGURATION_ERROR_ALIAS = "_cg_ConfigurationError"

MethodFilter = Callable[[MethodDescriptor], bool]


class InterceptionGenerator(ProxyGenerator):
    """
    Routes overridable methods through an interceptor chain.

    Adds one private loader property and one public setter per class,
    however many methods are rewritten. Nothing is added when no method
    survives the filter.
    """

    def __init__(
        self,
        prefix: Optional[str] = None,
        required_file: Optional[str] = None,
        filter: Optional[MethodFilter] = None,
        renderer: Optional[JinjaTemplateRenderer] = None,
    ):
        if prefix is None:
            from ..utils.config import get_config
            prefix = get_config().generation.interception_prefix
        self.prefix = prefix
        self.required_file = required_file
        self.filter = filter
        self._renderer = renderer

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def set_required_file(self, file: str) -> None:
        self.required_file = file

    def set_filter(self, filter: MethodFilter) -> None:
        self.filter = filter

    def generate(self, original: TypeDescriptor, model: ClassModel) -> None:
        methods = overridable_methods(original)
        if self.filter is not None:
            methods = [method for method in methods if self.filter(method)]

        if not methods:
            logger.debug(f"No interceptable methods on {original.name}")
            return

        if self.required_file:
            model.add_required_file(self.required_file)

        model.add_import("proxygen.runtime.invocation.CallDescriptor", CALL_DESCRIPTOR_ALIAS)
        model.add_import("proxygen.runtime.invocation.MethodInvocation", METHOD_INVOCATION_ALIAS)
        model.add_import("proxygen.runtime.interceptors.InterceptorLoader", INTERCEPTOR_LOADER_ALIAS)
        model.add_import("proxygen.utils.exceptions.ConfigurationError", CONFIGURATION_ERROR_ALIAS)

        loader = PropertyModel(f"{self.prefix}loader", visibility=Visibility.PRIVATE)
        loader.set_default_value(None)
        model.set_property(loader)

        setter = MethodModel(
            f"{self.prefix}set_loader",
            parameters=[ParameterModel("loader", type=INTERCEPTOR_LOADER_ALIAS)],
        )
        setter.set_return_type("None")
        setter.set_body(f"self.{loader.rendered_name} = loader")
        model.set_method(setter)

        renderer = self._renderer or get_template_renderer()
        message = f"{setter.rendered_name}() must be called prior to any intercepted method on this object."
        for method in methods:
            model.set_method(self._intercepted_method(method, model, loader, message, renderer))

    def _intercepted_method(
        self,
        method: MethodDescriptor,
        model: ClassModel,
        loader: PropertyModel,
        message: str,
        renderer: JinjaTemplateRenderer,
    ) -> MethodModel:
        declaring_alias = model.add_import(method.declaring_type, qualified_alias(method.declaring_type))

        gen_method = MethodModel.from_descriptor(method)
        gen_method.doc = None
        gen_method.abstract = False
        target = f"{declaring_alias}.{gen_method.rendered_name}"
        reference_defaults(gen_method.parameters, target)

        arguments, keywords, has_keywords = argument_expressions(gen_method.parameters)
        body = renderer.render_file("interception_body.py.j2", {
            "loader": loader.rendered_name,
            "error": CONFIGURATION_ERROR_ALIAS,
            "message": message,
            "call_descriptor": CALL_DESCRIPTOR_ALIAS,
            "invocation": METHOD_INVOCATION_ALIAS,
            "class_name": get_user_class(method.declaring_type),
            "method_name": method.name,
            "arguments": arguments,
            "keywords": keywords,
            "has_keywords": has_keywords,
            "target": target,
            "returns_value": not gen_method.returns_none,
        })
        return gen_method.set_body(body)
