"""Tests for parameter fragments and the @param recognizer."""

import pytest

from docblock_mcp.exceptions import InvalidTagError
from docblock_mcp.param_parser import parse_param, parse_parameter
from docblock_mcp.type_resolver import MIXED, Context, Keyword, Nullable, Object_


class TestParseParameter:
    def test_typed(self, resolver, descriptions):
        param = parse_parameter("int $x", resolver, descriptions)
        assert param.variable_name == "x"
        assert param.type == Keyword("int")
        assert param.is_reference is False
        assert param.is_variadic is False

    def test_untyped_defaults_to_mixed(self, resolver, descriptions):
        param = parse_parameter("$value", resolver, descriptions)
        assert param.type == MIXED

    def test_reference(self, resolver, descriptions):
        param = parse_parameter("array &$items", resolver, descriptions)
        assert param.is_reference is True
        assert param.variable_name == "items"

    def test_variadic(self, resolver, descriptions):
        param = parse_parameter("string ...$parts", resolver, descriptions)
        assert param.is_variadic is True
        assert param.type == Keyword("string")

    def test_reference_and_variadic(self, resolver, descriptions):
        param = parse_parameter("int &...$numbers", resolver, descriptions)
        assert param.is_reference is True
        assert param.is_variadic is True

    def test_leading_rest_marker_is_stripped(self, resolver, descriptions):
        param = parse_parameter("... $rest", resolver, descriptions)
        assert param.variable_name == "rest"
        assert param.is_variadic is True
        assert param.type == MIXED

    def test_nullable_class_type_with_context(self, resolver, descriptions):
        param = parse_parameter("?Logger $logger", resolver, descriptions, Context("Acme"))
        assert param.type == Nullable(Object_("\\Acme\\Logger"))

    def test_missing_variable(self, resolver, descriptions):
        assert parse_parameter("int", resolver, descriptions) is None

    def test_empty_fragment(self, resolver, descriptions):
        assert parse_parameter("", resolver, descriptions) is None


class TestParseParam:
    def test_description(self, resolver, descriptions):
        param = parse_param("string $name The user name.", resolver, descriptions)
        assert param.variable_name == "name"
        assert param.description.render() == "The user name."

    def test_render(self, resolver, descriptions):
        param = parse_param("int &...$ids  Identifiers", resolver, descriptions)
        assert str(param) == "int &...$ids Identifiers"

    def test_render_without_type(self, resolver, descriptions):
        assert str(parse_param("$x", resolver, descriptions)) == "mixed $x"

    def test_not_a_parameter(self, resolver, descriptions):
        assert parse_param("int just words", resolver, descriptions) is None

    def test_empty_body_raises(self, resolver, descriptions):
        with pytest.raises(InvalidTagError):
            parse_param("", resolver, descriptions)

    def test_missing_collaborator_raises(self, resolver):
        with pytest.raises(InvalidTagError):
            parse_param("int $x", resolver, None)
