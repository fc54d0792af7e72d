"""
Helpers for writing method bodies that forward their arguments.
"""

from __future__ import annotations

import inspect
from typing import Iterable, Tuple

from .members import ParameterModel
from .values import is_literal_value
from .visitor import render_arguments


def call_method(name: str, parameters: Iterable[ParameterModel], receiver: str = "super()") -> str:
    """
    Render a call of ``receiver.name`` that passes every parameter through.

    >>> call_method("save", [ParameterModel("order")])
    'super().save(order)'
    """
    return f"{receiver}.{name}({render_arguments(list(parameters))})"


def argument_expressions(parameters: Iterable[ParameterModel]) -> Tuple[str, str, bool]:
    """
    Render the runtime argument containers for a parameter list.

    Returns:
        Tuple of a list expression with the positional values, a dict
        expression with the keyword values, and whether any keyword
        values exist at all
    """
    positional = []
    keywords = []
    for param in parameters:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            positional.append(f"*{param.name}")
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            keywords.append(f"**{param.name}")
        elif param.kind is inspect.Parameter.KEYWORD_ONLY:
            keywords.append(f"{param.name!r}: {param.name}")
        else:
            positional.append(param.name)

    return f"[{', '.join(positional)}]", "{" + ", ".join(keywords) + "}", bool(keywords)


def reference_defaults(parameters: Iterable[ParameterModel], function: str) -> None:
    """
    Render defaults that have no literal form as lookups on ``function``.

    ``function`` is a source expression for the original function, such as
    ``_shop_models_Order.cancel``. Positional defaults read its
    ``__defaults__`` and keyword-only defaults its ``__kwdefaults__``, so
    the generated signature shares the very same default objects.
    """
    position = 0
    for param in parameters:
        if not param.has_default_value:
            continue

        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            expression = f"{function}.__kwdefaults__[{param.name!r}]"
        else:
            expression = f"{function}.__defaults__[{position}]"
            position += 1

        if not is_literal_value(param.default):
            param.set_default_expression(param.default, expression)
