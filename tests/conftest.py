"""pytest configuration and shared fixtures."""

import pytest

from case_filters import build_environment


@pytest.fixture
def env():
    """Jinja2 environment with the built-in case filters."""
    return build_environment()


@pytest.fixture
def non_string_values():
    """Values a filter must reject."""
    return [
        42,
        3.5,
        True,
        None,
        ["a", "b"],
        {"key": "value"},
        b"bytes",
    ]
