"""Core abstractions: the filter value object, its registry, and errors.

This module owns every *interface* in the package.  Nothing here depends on
a template engine — the host integrations live in ``jinja`` and ``jmes`` and
only ever read a ``FilterRegistry``.

Call flow (host engine → filter)::

    {{ value | snakecase }}
      │
      ▼
    host looks up "snakecase"            ← registry populated at setup time
      │
      ▼
    CaseFilter.__call__(value)
        ├─ not a str  → FilterArgumentError("snakecase: expected a string, …")
        └─ str        → transform(str(value))  → new str
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping

Transform = Callable[[str], str]


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


class CaseFilterError(Exception):
    """Base class for every error raised by this package."""


class FilterArgumentError(CaseFilterError, TypeError):
    """A filter received something that is not a string.

    Attributes:
        filter_name: Registration name of the filter that was invoked.
        value_type:  ``type(value).__name__`` of the rejected input.
    """

    def __init__(self, filter_name: str, value: Any) -> None:
        self.filter_name = filter_name
        self.value_type = type(value).__name__
        super().__init__(f"{filter_name}: expected a string, got {self.value_type}")


class FrozenRegistryError(CaseFilterError, RuntimeError):
    """``register`` was called on a registry that has been frozen."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot register filter '{name}': registry is frozen")


class UnknownFilterError(CaseFilterError, KeyError):
    """``FilterRegistry.require`` was asked for a name that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown filter '{self.name}'"


# ─────────────────────────────────────────────────────────────────────────────
# CaseFilter
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CaseFilter:
    """Named single-argument text filter.

    Attributes:
        name:        Identifier used in templates (``{{ x | name }}``).
        transform:   Pure ``str -> str`` function doing the actual work.
        description: One-line summary, used for introspection only.

    ::

        f = CaseFilter("snakecase", snake_case)
        f("Hello World")   # "hello_world"
        f(42)              # FilterArgumentError
    """

    name: str
    transform: Transform
    description: str = ""

    def __call__(self, value: Any) -> str:
        if not isinstance(value, str):
            raise FilterArgumentError(self.name, value)
        # Markup and other str subclasses are unwrapped so the result is plain text
        return self.transform(str(value))

    def with_transform(self, transform: Transform) -> CaseFilter:
        """Return a copy of this filter delegating to *transform*."""
        return CaseFilter(name=self.name, transform=transform, description=self.description)


# ─────────────────────────────────────────────────────────────────────────────
# FilterRegistry
# ─────────────────────────────────────────────────────────────────────────────


class FilterRegistry(Mapping[str, CaseFilter]):
    """Ordered ``name → CaseFilter`` mapping, filled once at setup time.

    Only ``register`` / ``filter`` add entries; the ``Mapping`` interface is
    read-only.  Duplicate names are rejected unless ``override=True``, in
    which case the new filter replaces the old one in place.  After
    ``freeze()`` every ``register`` raises ``FrozenRegistryError``; ``copy()``
    and ``merged()`` always return unfrozen registries.

    ::

        registry = FilterRegistry([CaseFilter("snakecase", snake_case)])

        @registry.filter("dotcase", description="Convert the string to dot.case.")
        def dot_case(text: str) -> str:
            return ".".join(split_words(text)).lower()
    """

    def __init__(self, filters: Iterable[CaseFilter] = (), *, frozen: bool = False) -> None:
        self._filters: Dict[str, CaseFilter] = {}
        self._frozen = False
        for f in filters:
            self.register(f)
        self._frozen = frozen

    # -- registration -------------------------------------------------------

    def register(self, case_filter: CaseFilter, *, override: bool = False) -> CaseFilter:
        """Add *case_filter*.  Raises ``ValueError`` on a duplicate name."""
        if self._frozen:
            raise FrozenRegistryError(case_filter.name)
        if case_filter.name in self._filters and not override:
            raise ValueError(f"Filter '{case_filter.name}' is already registered")
        self._filters[case_filter.name] = case_filter
        return case_filter

    def filter(
            self,
            name: str,
            *,
            description: str = "",
            override: bool = False,
    ) -> Callable[[Transform], Transform]:
        """Decorator that registers a ``str -> str`` function under *name*."""

        def decorator(func: Transform) -> Transform:
            self.register(CaseFilter(name, func, description), override=override)
            return func

        return decorator

    def freeze(self) -> FilterRegistry:
        """Reject all further registration.  Returns the registry itself."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- lookup -------------------------------------------------------------

    def __getitem__(self, name: str) -> CaseFilter:
        return self._filters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def require(self, name: str) -> CaseFilter:
        """Return the filter registered as *name* or raise ``UnknownFilterError``."""
        try:
            return self._filters[name]
        except KeyError:
            raise UnknownFilterError(name) from None

    # -- introspection ------------------------------------------------------

    def names(self) -> List[str]:
        """Registration names in insertion order."""
        return list(self._filters)

    def describe(self) -> Dict[str, str]:
        """``{name: description}`` for every registered filter."""
        return {name: f.description for name, f in self._filters.items()}

    # -- combination --------------------------------------------------------

    def copy(self) -> FilterRegistry:
        return FilterRegistry(self._filters.values())

    def merged(self, other: Mapping[str, CaseFilter] | Iterable[CaseFilter], *, override: bool = False) -> FilterRegistry:
        """Return a new registry holding this one's filters followed by *other*'s."""
        result = self.copy()
        extra = other.values() if isinstance(other, Mapping) else other
        for f in extra:
            result.register(f, override=override)
        return result

    def __repr__(self) -> str:
        return f"FilterRegistry({self.names()!r})"


def resolve_registry(registry: Mapping[str, CaseFilter] | None) -> Mapping[str, CaseFilter]:
    """Return *registry*, or the built-in one when ``None``."""
    if registry is not None:
        return registry
    from .builtins import DEFAULT_REGISTRY

    return DEFAULT_REGISTRY
