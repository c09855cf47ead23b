"""Case conversion filters (snake_case, kebab-case, UpperCamelCase, …) for
Jinja2 and JMESPath.

====================  ==================
Filter                Name in templates
====================  ==================
``KEBAB_CASE``        ``kebabcase``
``LOWER_CAMEL_CASE``  ``lowercamelcase``
``SHOUTY_KEBAB_CASE`` ``shoutykebabcase``
``SHOUTY_SNAKE_CASE`` ``shoutysnakecase``
``SNAKE_CASE``        ``snakecase``
``TITLE_CASE``        ``titlecase``
``TRAIN_CASE``        ``traincase``
``UPPER_CAMEL_CASE``  ``uppercamelcase``
====================  ==================

Example::

    from case_filters import build_environment

    template = build_environment().from_string(
        "{{text | uppercamelcase}} {{text | snakecase}} {{text | traincase}}"
    )
    template.render(text="Some text to convert")
    # → "SomeTextToConvert some_text_to_convert Some-Text-To-Convert"
"""

from .builtins import (
    BUILTIN_FILTERS,
    DEFAULT_REGISTRY,
    KEBAB_CASE,
    LOWER_CAMEL_CASE,
    SHOUTY_KEBAB_CASE,
    SHOUTY_SNAKE_CASE,
    SNAKE_CASE,
    TITLE_CASE,
    TRAIN_CASE,
    UPPER_CAMEL_CASE,
    default_registry,
)
from .core import (
    CaseFilter,
    CaseFilterError,
    FilterArgumentError,
    FilterRegistry,
    FrozenRegistryError,
    UnknownFilterError,
)
from .jinja import CaseFilterExtension, build_environment, install_filters, render
from .jmes import build_functions, build_options, search
from .tracing import traced, traced_registry
from .words import (
    kebab_case,
    lower_camel_case,
    shouty_kebab_case,
    shouty_snake_case,
    snake_case,
    split_words,
    title_case,
    train_case,
    upper_camel_case,
)

__all__ = [
    # core
    "CaseFilter",
    "FilterRegistry",
    "CaseFilterError",
    "FilterArgumentError",
    "FrozenRegistryError",
    "UnknownFilterError",
    # builtins
    "BUILTIN_FILTERS",
    "DEFAULT_REGISTRY",
    "default_registry",
    "KEBAB_CASE",
    "LOWER_CAMEL_CASE",
    "SHOUTY_KEBAB_CASE",
    "SHOUTY_SNAKE_CASE",
    "SNAKE_CASE",
    "TITLE_CASE",
    "TRAIN_CASE",
    "UPPER_CAMEL_CASE",
    # jinja
    "CaseFilterExtension",
    "build_environment",
    "install_filters",
    "render",
    # jmespath
    "build_functions",
    "build_options",
    "search",
    # tracing
    "traced",
    "traced_registry",
    # words
    "split_words",
    "kebab_case",
    "lower_camel_case",
    "shouty_kebab_case",
    "shouty_snake_case",
    "snake_case",
    "title_case",
    "train_case",
    "upper_camel_case",
]
