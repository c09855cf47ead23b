"""JMESPath host integration.

Every filter becomes a one-argument JMESPath function of the same name::

    search("snakecase(user.name)", {"user": {"name": "HelloWorld"}})
    # → "hello_world"

Argument types are checked by JMESPath itself against the ``string``
signature, so a non-string raises ``jmespath.exceptions.JMESPathTypeError``
naming the function.
"""

from __future__ import annotations

import types
from typing import Any, Callable, Dict, Mapping

import jmespath
from jmespath import functions as _jp_funcs

from .core import CaseFilter, resolve_registry
from .tracing import traced_registry


def _make_function(case_filter: CaseFilter) -> Callable[[Any, str], str]:
    @_jp_funcs.signature({"types": ["string"]})
    def _func(self, value: str) -> str:
        return case_filter(value)

    _func.__name__ = f"_func_{case_filter.name}"
    _func.__doc__ = case_filter.description
    return _func


def build_functions(
        registry: Mapping[str, CaseFilter] | None = None,
        *,
        trace: bool = False,
) -> _jp_funcs.Functions:
    """Return a ``Functions`` instance exposing *registry* to JMESPath.

    The class is built in one go because JMESPath collects ``_func_*``
    methods when the class is created.
    """
    filters = resolve_registry(registry)
    if trace:
        filters = traced_registry(filters)

    namespace = {f"_func_{name}": _make_function(f) for name, f in filters.items()}
    cls = types.new_class(
        "CaseFunctions",
        (_jp_funcs.Functions,),
        exec_body=lambda ns: ns.update(namespace),
    )
    return cls()


def build_options(
        registry: Mapping[str, CaseFilter] | None = None,
        *,
        trace: bool = False,
) -> jmespath.Options:
    """``jmespath.Options`` carrying ``build_functions(registry)``."""
    return jmespath.Options(custom_functions=build_functions(registry, trace=trace))


# default registry is frozen, so its options are built once per trace flag
_DEFAULT_OPTIONS: Dict[bool, jmespath.Options] = {}


def search(
        expression: str,
        data: Any,
        registry: Mapping[str, CaseFilter] | None = None,
        *,
        trace: bool = False,
) -> Any:
    """``jmespath.search`` with the case functions available.

    *registry* and *trace* have the same meaning as in ``build_options``.
    """
    if registry is not None:
        options = build_options(registry, trace=trace)
    else:
        options = _DEFAULT_OPTIONS.get(trace)
        if options is None:
            options = _DEFAULT_OPTIONS[trace] = build_options(trace=trace)
    return jmespath.search(expression, data, options=options)
