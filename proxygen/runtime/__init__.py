"""
Runtime support for generated proxies: materialization and interception.
"""

from .interceptors import InterceptorLoader, MethodInterceptor, RegexInterceptionLoader
from .invocation import CallDescriptor, MethodInvocation
from .registry import ModuleTypeRegistry, TypeRegistry, get_default_registry

__all__ = [
    "InterceptorLoader",
    "MethodInterceptor",
    "RegexInterceptionLoader",
    "CallDescriptor",
    "MethodInvocation",
    "ModuleTypeRegistry",
    "TypeRegistry",
    "get_default_registry",
]
