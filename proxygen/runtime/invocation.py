"""
Method invocation chain.

A MethodInvocation represents one in-flight call of an intercepted
method. Interceptors receive it, may inspect or replace its arguments,
and decide whether (and how often) to continue the chain by calling
proceed(). Once the chain is exhausted the original method runs.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..utils.exceptions import MissingArgumentError, UnknownParameterError


@dataclass
class CallDescriptor:
    """
    Describes an intercepted call to an interceptor loader.

    ``class_name`` is the qualified name of the class that declares the
    method, never the name of a generated proxy.
    """
    class_name: str
    method_name: str
    instance: Any
    arguments: List[Any] = field(default_factory=list)
    keywords: Dict[str, Any] = field(default_factory=dict)

    @property
    def signature(self) -> str:
        """``Class::method``, the string interceptor patterns are matched against."""
        return f"{self.class_name}::{self.method_name}"


class MethodInvocation:
    """
    One call travelling through an interceptor chain.

    Attributes:
        method: The original, unbound function; it takes the instance first
        instance: The object the call was made on
        arguments: Positional argument values, in declaration order
        keywords: Keyword argument values
    """

    def __init__(
        self,
        method: Callable,
        instance: Any,
        arguments: Sequence[Any],
        interceptors: Sequence[Any],
        keywords: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.instance = instance
        self.arguments = list(arguments)
        self.keywords = dict(keywords or {})
        self._interceptors = list(interceptors)
        self._pointer = 0

    def proceed(self) -> Any:
        """
        Continue the chain.

        Calls the next interceptor, if any, advancing the pointer before
        control passes to it; otherwise calls the original method with the
        current arguments. Exceptions propagate untouched.
        """
        if self._pointer < len(self._interceptors):
            interceptor = self._interceptors[self._pointer]
            self._pointer += 1
            return interceptor.intercept(self)

        return self.method(self.instance, *self.arguments, **self.keywords)

    def get_named_argument(self, name: str) -> Any:
        """
        Return the value bound to the parameter called ``name``.

        A supplied value wins, then the declared default. ``*args`` yields
        the surplus positional values as a tuple and ``**kwargs`` the
        surplus keyword values as a dict.

        Raises:
            MissingArgumentError: If no value was supplied and there is no default
            UnknownParameterError: If the method declares no such parameter
        """
        parameters = list(inspect.signature(self.method).parameters.values())[1:]

        for index, param in enumerate(parameters):
            if param.name != name:
                continue

            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                return tuple(self.arguments[index:])

            if param.kind is inspect.Parameter.VAR_KEYWORD:
                declared = {p.name for p in parameters}
                return {k: v for k, v in self.keywords.items() if k not in declared}

            if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
                if index < len(self.arguments):
                    return self.arguments[index]

            if param.kind is not inspect.Parameter.POSITIONAL_ONLY and name in self.keywords:
                return self.keywords[name]

            if param.default is not inspect.Parameter.empty:
                return param.default

            raise MissingArgumentError(name)

        raise UnknownParameterError(name)

    def __str__(self) -> str:
        owner = self.method.__qualname__.rpartition(".")[0]
        return f"{self.method.__module__}.{owner}::{self.method.__name__}"

    def __repr__(self) -> str:
        return (
            f"MethodInvocation({self}, arguments={self.arguments!r}, "
            f"position={self._pointer}/{len(self._interceptors)})"
        )
