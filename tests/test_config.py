"""Tests for ParserConfig construction and option coercion."""

import dataclasses

import pytest

from request_parser import ParserConfig, RequestParser
from request_parser.constants import DEFAULT_EXCLUDE_SANITIZE_TYPES


def identity(value):
    return value


async def anyone(headers):
    return "someone"


class TestDefaults:
    """Tests for default configuration."""

    def test_defaults(self):
        config = ParserConfig()
        assert config.sanitize_function is None
        assert config.always_parse == ()
        assert config.auth_function is None
        assert config.exclude_sanitize_types == frozenset({"boolean", "number"})
        assert config.disable_regex is False

    def test_no_options(self):
        assert ParserConfig.from_options(None) == ParserConfig()
        assert ParserConfig.from_options({}) == ParserConfig()

    def test_frozen(self):
        config = ParserConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.disable_regex = True  # type: ignore[misc]

    def test_disable_regex_from_environment(self, monkeypatch):
        monkeypatch.setenv("REQUEST_PARSER_DISABLE_REGEX", "true")
        assert ParserConfig().disable_regex is True
        assert ParserConfig.from_options({"disableRegex": False}).disable_regex is False


class TestOptionNames:
    """Tests for camelCase and snake_case option names."""

    def test_camel_case(self):
        config = ParserConfig.from_options(
            {
                "sanitizeFunction": identity,
                "alwaysParse": ["Hlang"],
                "authFunction": anyone,
                "excludeSanitizeTypes": ["boolean"],
                "disableRegex": True,
            }
        )
        assert config.sanitize_function is identity
        assert config.always_parse == ("Hlang",)
        assert config.auth_function is anyone
        assert config.exclude_sanitize_types == frozenset({"boolean"})
        assert config.disable_regex is True

    def test_snake_case(self):
        config = ParserConfig.from_options({"sanitize_function": identity, "always_parse": ("Bid",)})
        assert config.sanitize_function is identity
        assert config.always_parse == ("Bid",)

    def test_keyword_overrides_win(self):
        config = ParserConfig.from_options({"disableRegex": True}, disable_regex=False)
        assert config.disable_regex is False

    def test_unknown_options_ignored(self):
        assert ParserConfig.from_options({"verbose": True}) == ParserConfig()

    def test_parser_accepts_mapping_and_keywords(self):
        parser = RequestParser({"alwaysParse": ["Hlang"]}, sanitize_function=identity)
        assert parser.config.always_parse == ("Hlang",)
        assert parser.config.can_sanitize is True
        assert parser.config.can_authorize is False


class TestCoercion:
    """Tests for lenient handling of bad option values."""

    def test_non_callable_functions_unset(self):
        config = ParserConfig.from_options({"sanitizeFunction": "strip", "authFunction": 3})
        assert config.sanitize_function is None
        assert config.auth_function is None

    def test_non_list_always_parse(self):
        assert ParserConfig.from_options({"alwaysParse": "Hlang"}).always_parse == ()

    def test_non_list_exclude_types(self):
        config = ParserConfig.from_options({"excludeSanitizeTypes": "boolean"})
        assert config.exclude_sanitize_types == DEFAULT_EXCLUDE_SANITIZE_TYPES

    def test_empty_exclude_types(self):
        assert ParserConfig.from_options({"excludeSanitizeTypes": []}).exclude_sanitize_types == frozenset()

    def test_python_type_aliases(self):
        config = ParserConfig.from_options({"excludeSanitizeTypes": ["bool", "int", "str", "dict"]})
        assert config.exclude_sanitize_types == frozenset({"boolean", "number", "string", "object"})

    def test_disable_regex_truthiness(self):
        assert ParserConfig.from_options({"disableRegex": 1}).disable_regex is True
        assert ParserConfig.from_options({"disableRegex": ""}).disable_regex is False

    def test_direct_construction_normalizes(self):
        config = ParserConfig(always_parse=["Bid"], exclude_sanitize_types={"float"})
        assert config.always_parse == ("Bid",)
        assert config.exclude_sanitize_types == frozenset({"number"})
