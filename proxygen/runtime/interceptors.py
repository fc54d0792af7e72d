"""
Interceptor protocols and loaders.

Generated proxies ask an InterceptorLoader for the interceptors that
apply to each call; RegexInterceptionLoader selects them by matching
patterns against ``Class::method``.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Protocol, runtime_checkable

from ..utils.logging import get_logger
from .invocation import CallDescriptor, MethodInvocation

logger = get_logger(__name__)


@runtime_checkable
class MethodInterceptor(Protocol):
    """Around-advice for a method call."""

    def intercept(self, invocation: MethodInvocation) -> Any:
        """
        Handle the call.

        Call ``invocation.proceed()`` to continue the chain; not calling it
        skips every later interceptor and the original method.
        """
        ...


@runtime_checkable
class InterceptorLoader(Protocol):
    """Supplies the interceptors for a call, in execution order."""

    def load_interceptors(self, call: CallDescriptor) -> List[MethodInterceptor]:
        ...


class RegexInterceptionLoader:
    """
    Selects interceptors by regular expression.

    Each pattern is searched (not anchored) in the call signature
    ``pkg.mod.Class::method``. Matching interceptors are returned in the
    mapping's insertion order.
    """

    def __init__(self, interceptors: Mapping[str, Any] = None):
        self._interceptors = dict(interceptors or {})
        self._compiled = {pattern: re.compile(pattern) for pattern in self._interceptors}

    def load_interceptors(self, call: CallDescriptor) -> List[MethodInterceptor]:
        signature = call.signature

        matching = []
        for pattern, interceptor in self._interceptors.items():
            if self._compiled[pattern].search(signature):
                matching.append(self.initialize_interceptor(interceptor))

        logger.debug(f"{len(matching)} interceptor(s) matched {signature}")
        return matching

    def initialize_interceptor(self, interceptor: Any) -> MethodInterceptor:
        """Hook for subclasses that store factories or service ids instead of interceptors."""
        return interceptor
