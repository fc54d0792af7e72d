"""
Proxy generation: the Enhancer and its generator plugins.
"""

from .base import ProxyGenerator
from .enhancer import Enhancer
from .interception import InterceptionGenerator
from .lazy import LazyInitializer, LazyInitializerGenerator

__all__ = [
    "ProxyGenerator",
    "Enhancer",
    "InterceptionGenerator",
    "LazyInitializer",
    "LazyInitializerGenerator",
]
