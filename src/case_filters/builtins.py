"""Built-in case filters.

Exports
-------
KEBAB_CASE, LOWER_CAMEL_CASE, SHOUTY_KEBAB_CASE, SHOUTY_SNAKE_CASE,
SNAKE_CASE, TITLE_CASE, TRAIN_CASE, UPPER_CAMEL_CASE
    One ``CaseFilter`` per style.

BUILTIN_FILTERS
    Tuple of the eight filters above, sorted by name.

DEFAULT_REGISTRY
    Frozen ``FilterRegistry`` holding ``BUILTIN_FILTERS``; registering on it
    raises ``FrozenRegistryError``.  Call ``default_registry()`` for a
    registry you can extend.

====================  ===================
Filter                Name in templates
====================  ===================
``KEBAB_CASE``        ``kebabcase``
``LOWER_CAMEL_CASE``  ``lowercamelcase``
``SHOUTY_KEBAB_CASE`` ``shoutykebabcase``
``SHOUTY_SNAKE_CASE`` ``shoutysnakecase``
``SNAKE_CASE``        ``snakecase``
``TITLE_CASE``        ``titlecase``
``TRAIN_CASE``        ``traincase``
``UPPER_CAMEL_CASE``  ``uppercamelcase``
====================  ===================
"""

from __future__ import annotations

from . import words
from .core import CaseFilter, FilterRegistry

KEBAB_CASE = CaseFilter(
    "kebabcase", words.kebab_case, "Convert the string to kebab-case.",
)
LOWER_CAMEL_CASE = CaseFilter(
    "lowercamelcase", words.lower_camel_case, "Convert the string to lowerCamelCase.",
)
SHOUTY_KEBAB_CASE = CaseFilter(
    "shoutykebabcase", words.shouty_kebab_case, "Convert the string to SHOUTY-KEBAB-CASE.",
)
SHOUTY_SNAKE_CASE = CaseFilter(
    "shoutysnakecase", words.shouty_snake_case, "Convert the string to SHOUTY_SNAKE_CASE.",
)
SNAKE_CASE = CaseFilter(
    "snakecase", words.snake_case, "Convert the string to snake-case.",
)
TITLE_CASE = CaseFilter(
    "titlecase", words.title_case, "Convert the string to title case.",
)
TRAIN_CASE = CaseFilter(
    "traincase", words.train_case, "Convert the string to Train-Case.",
)
UPPER_CAMEL_CASE = CaseFilter(
    "uppercamelcase", words.upper_camel_case, "Convert the string to UpperCamelCase.",
)

BUILTIN_FILTERS = (
    KEBAB_CASE,
    LOWER_CAMEL_CASE,
    SHOUTY_KEBAB_CASE,
    SHOUTY_SNAKE_CASE,
    SNAKE_CASE,
    TITLE_CASE,
    TRAIN_CASE,
    UPPER_CAMEL_CASE,
)

DEFAULT_REGISTRY = FilterRegistry(BUILTIN_FILTERS, frozen=True)


def default_registry() -> FilterRegistry:
    """Return a fresh registry pre-filled with the built-in filters."""
    return FilterRegistry(BUILTIN_FILTERS)
