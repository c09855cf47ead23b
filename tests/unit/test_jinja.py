"""Tests for the Jinja2 integration."""

import logging

import jinja2
import pytest
from markupsafe import Markup

from case_filters import (
    DEFAULT_REGISTRY,
    CaseFilter,
    CaseFilterExtension,
    FilterArgumentError,
    FilterRegistry,
    build_environment,
    install_filters,
    render,
)


class TestInstallFilters:
    """Test install_filters."""

    def test_installs_every_builtin(self):
        """All eight filters end up in env.filters."""
        env = install_filters(jinja2.Environment())

        for name in DEFAULT_REGISTRY:
            assert env.filters[name] is DEFAULT_REGISTRY[name]

    def test_keeps_jinja_filters(self, env):
        """Jinja's own filters are left alone."""
        assert "upper" in env.filters
        assert env.from_string("{{ 'Some text' | snakecase | upper }}").render() == "SOME_TEXT"

    def test_second_install_raises(self, env):
        """Installing over existing names raises unless override=True."""
        with pytest.raises(ValueError, match="already registered"):
            install_filters(env)

        install_filters(env, override=True)

    def test_clash_with_jinja_builtin(self):
        """A custom filter named like a Jinja filter is refused by default."""
        registry = FilterRegistry([CaseFilter("title", str.upper)])
        env = jinja2.Environment()

        with pytest.raises(ValueError, match="Filter 'title'"):
            install_filters(env, registry)

        assert env.from_string("{{ 'ab cd' | title }}").render() == "Ab Cd"

        install_filters(env, registry, override=True)
        assert env.from_string("{{ 'ab cd' | title }}").render() == "AB CD"

    def test_custom_registry(self):
        """Only the given registry's filters are installed."""
        registry = FilterRegistry([CaseFilter("dotcase", lambda s: s.replace(" ", "."))])
        env = build_environment(registry=registry)

        assert "dotcase" in env.filters
        assert "snakecase" not in env.filters
        assert env.from_string("{{ 'a b' | dotcase }}").render() == "a.b"

    def test_trace(self, caplog):
        """trace=True installs logging copies."""
        env = build_environment(trace=True)

        with caplog.at_level(logging.DEBUG, logger="case_filters.tracing"):
            assert env.from_string("{{ x | kebabcase }}").render(x="Hello World") == "hello-world"

        assert "kebabcase('Hello World') -> 'hello-world'" in caplog.text


class TestCaseFilterExtension:
    """Test CaseFilterExtension."""

    def test_extension_by_class(self):
        """Passing the class installs the filters."""
        env = jinja2.Environment(extensions=[CaseFilterExtension])

        assert env.from_string("{{ 'hello world' | traincase }}").render() == "Hello-World"

    def test_extension_by_import_path(self):
        """Passing the dotted path installs the filters."""
        env = jinja2.Environment(extensions=["case_filters.jinja.CaseFilterExtension"])

        assert set(DEFAULT_REGISTRY) <= set(env.filters)


class TestRendering:
    """Test filters inside rendered templates."""

    def test_reference_template(self, env):
        """Three filters applied to the same variable."""
        template = env.from_string(
            "{{text | uppercamelcase}} {{text | snakecase}} {{text | traincase}}"
        )

        output = template.render(text="Some text to convert")

        assert output == "SomeTextToConvert some_text_to_convert Some-Text-To-Convert"

    @pytest.mark.parametrize("name, expected", [
        ("kebabcase", "hello-world21"),
        ("lowercamelcase", "helloWorld21"),
        ("shoutykebabcase", "HELLO-WORLD21"),
        ("shoutysnakecase", "HELLO_WORLD21"),
        ("snakecase", "hello_world21"),
        ("titlecase", "Hello World21"),
        ("traincase", "Hello-World21"),
        ("uppercamelcase", "HelloWorld21"),
    ])
    def test_every_filter_in_template(self, env, name, expected):
        """Each registration name is usable with pipe syntax."""
        assert env.from_string(f"{{{{ v | {name} }}}}").render(v="HelloWorld21") == expected

    def test_empty_string(self, env):
        """Empty input renders as empty output."""
        assert env.from_string("[{{ v | snakecase }}]").render(v="") == "[]"

    @pytest.mark.parametrize("value", [21, 2.5, None, ["a"], {"a": 1}])
    def test_non_string_raises(self, env, value):
        """Non-string variables fail the render with the filter's name."""
        template = env.from_string("{{ v | snakecase }}")

        with pytest.raises(FilterArgumentError, match="^snakecase: expected a string"):
            template.render(v=value)

    def test_undefined_raises(self, env):
        """An undefined variable is not text."""
        template = env.from_string("{{ missing | titlecase }}")

        with pytest.raises(FilterArgumentError) as exc:
            template.render()

        assert exc.value.filter_name == "titlecase"
        assert exc.value.value_type == "Undefined"

    def test_number_literal_raises(self, env):
        """Number literals are not stringified."""
        with pytest.raises(FilterArgumentError):
            env.from_string("{{ 42 | kebabcase }}").render()

    def test_extra_argument_raises(self, env):
        """Filters take no arguments besides the piped value."""
        with pytest.raises(TypeError):
            env.from_string("{{ v | snakecase('x') }}").render(v="a")

    def test_markup_input(self):
        """Markup is accepted and converted like plain text."""
        env = build_environment(autoescape=True)

        output = env.from_string("{{ v | snakecase }}").render(v=Markup("HelloWorld"))

        assert output == "hello_world"

    def test_render_helper(self):
        """render() uses the built-in filters."""
        assert render("{{ name | shoutysnakecase }}", name="helloWorld") == "HELLO_WORLD"
