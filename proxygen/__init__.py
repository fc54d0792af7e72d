"""
proxygen: Proxy Class Generation for Python

proxygen builds subclasses of existing classes at runtime. Generated
proxies can route method calls through a chain of interceptors or defer
an object's initialization until its first public method call. The
proxy source is plain Python, so it can also be written to disk and
inspected.

Usage:
    from proxygen import Enhancer, InterceptionGenerator, RegexInterceptionLoader

    enhancer = Enhancer(Order, generators=[InterceptionGenerator()])
    order = enhancer.create_instance()
    order.cg_interception_set_loader(RegexInterceptionLoader({"::cancel$": audit}))
"""

__version__ = "0.1.0"
__author__ = "proxygen Team"
__email__ = "proxygen@example.com"

# Public API exports
from .codegen import ClassModel, DefaultGeneratorStrategy, describe_type
from .proxy import (
    Enhancer,
    InterceptionGenerator,
    LazyInitializer,
    LazyInitializerGenerator,
    ProxyGenerator,
)
from .runtime import (
    CallDescriptor,
    MethodInterceptor,
    MethodInvocation,
    ModuleTypeRegistry,
    RegexInterceptionLoader,
    get_default_registry,
)
from .utils.config import ProxyGenConfig, get_config
from .utils.naming import DefaultNamingStrategy

__all__ = [
    "ClassModel",
    "DefaultGeneratorStrategy",
    "describe_type",
    "Enhancer",
    "InterceptionGenerator",
    "LazyInitializer",
    "LazyInitializerGenerator",
    "ProxyGenerator",
    "CallDescriptor",
    "MethodInterceptor",
    "MethodInvocation",
    "ModuleTypeRegistry",
    "RegexInterceptionLoader",
    "get_default_registry",
    "ProxyGenConfig",
    "get_config",
    "DefaultNamingStrategy",
]
