"""Opt-in call tracing for filters.

Filters are side-effect free by default.  ``traced`` wraps one so every
successful call is logged at DEBUG on this module's logger; failures are not
logged and propagate untouched.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .core import CaseFilter, FilterRegistry

logger = logging.getLogger(__name__)


def traced(case_filter: CaseFilter) -> CaseFilter:
    """Return a copy of *case_filter* that logs ``name(input) -> output``."""
    name = case_filter.name
    transform = case_filter.transform

    def _traced(text: str) -> str:
        result = transform(text)
        logger.debug("%s(%r) -> %r", name, text, result)
        return result

    return case_filter.with_transform(_traced)


def traced_registry(registry: Mapping[str, CaseFilter]) -> FilterRegistry:
    """Return a new registry with every filter of *registry* wrapped by ``traced``."""
    return FilterRegistry(traced(f) for f in registry.values())
