"""Jinja2 host integration.

Exports
-------
install_filters
    Write every filter of a registry into ``Environment.filters``.

CaseFilterExtension
    ``jinja2.ext.Extension`` that installs the built-in filters when the
    environment is constructed::

        Environment(extensions=["case_filters.jinja.CaseFilterExtension"])

build_environment
    Fresh ``Environment`` with the filters already installed.

render
    One-shot ``source + context → str`` helper using the built-in filters.

Example::

    env = build_environment()
    env.from_string("{{ text | uppercamelcase }}").render(text="Some text")
    # → "SomeText"
"""

from __future__ import annotations

from typing import Any, Mapping

import jinja2
from jinja2.ext import Extension

from .core import CaseFilter, resolve_registry
from .tracing import traced_registry


def install_filters(
        environment: jinja2.Environment,
        registry: Mapping[str, CaseFilter] | None = None,
        *,
        override: bool = False,
        trace: bool = False,
) -> jinja2.Environment:
    """Register *registry*'s filters on *environment* and return it.

    Args:
        environment: Target Jinja2 environment (modified in place).
        registry:    Filters to install.  ``None`` → the eight built-ins.
        override:    Replace filters that already exist under the same name.
                     When ``False`` a clash raises ``ValueError`` and nothing
                     is installed.
        trace:       Install ``tracing.traced`` copies instead.
    """
    filters = resolve_registry(registry)
    if trace:
        filters = traced_registry(filters)

    if not override:
        clashes = [name for name in filters if name in environment.filters]
        if clashes:
            raise ValueError(f"Filter '{clashes[0]}' is already registered on this environment")

    environment.filters.update(filters)
    return environment


class CaseFilterExtension(Extension):
    """Install the built-in case filters on the owning environment."""

    def __init__(self, environment: jinja2.Environment) -> None:
        super().__init__(environment)
        install_filters(environment, override=True)


def build_environment(
        *,
        registry: Mapping[str, CaseFilter] | None = None,
        trace: bool = False,
        **env_options: Any,
) -> jinja2.Environment:
    """Create a ``jinja2.Environment`` with case filters installed.

    *env_options* are passed straight to ``jinja2.Environment``
    (``undefined=``, ``autoescape=``, ``loader=``, …).
    """
    environment = jinja2.Environment(**env_options)
    return install_filters(environment, registry, trace=trace)


def render(source: str, /, **context: Any) -> str:
    """Render template *source* with the built-in filters.

    ::

        render("{{ name | snakecase }}", name="HelloWorld")   # "hello_world"
    """
    return build_environment().from_string(source).render(**context)
