"""Tests for tag-line dispatch."""

import pytest

from docblock_mcp.description import Description
from docblock_mcp.exceptions import InvalidTagError
from docblock_mcp.models import AuthorTag, GenericTag, MethodTag, Parameter
from docblock_mcp.tag_factory import TagFactory, render_tag
from docblock_mcp.type_resolver import Context, Object_


@pytest.fixture
def factory(resolver, descriptions):
    return TagFactory(resolver, descriptions)


class TestTagFactory:
    def test_method(self, factory):
        tag = factory.create("@method static int getValue() Gets the value.")
        assert isinstance(tag, MethodTag)
        assert tag.is_static is True
        assert render_tag(tag) == "@method static int getValue() Gets the value."

    def test_param(self, factory):
        tag = factory.create("@param string $name The name.")
        assert isinstance(tag, Parameter)
        assert render_tag(tag) == "@param string $name The name."

    def test_author(self, factory):
        tag = factory.create("@author Jane Doe <jane@example.com>")
        assert isinstance(tag, AuthorTag)
        assert render_tag(tag) == "@author Jane Doe<jane@example.com>"

    def test_at_sign_is_optional(self, factory):
        assert isinstance(factory.create("method getValue()"), MethodTag)

    def test_unknown_tag_is_generic(self, factory):
        tag = factory.create("@see Foo::bar() For details.")
        assert tag == GenericTag("see", Description("Foo::bar() For details."))
        assert render_tag(tag) == "@see Foo::bar() For details."

    def test_unrecognized_body_falls_back(self, factory):
        tag = factory.create("@method (broken")
        assert isinstance(tag, GenericTag)
        assert tag.name == "method"
        assert str(tag) == "(broken"

    def test_tag_without_body(self, factory):
        tag = factory.create("@method")
        assert isinstance(tag, GenericTag)
        assert render_tag(tag) == "@method"

    def test_context_is_used(self, factory):
        tag = factory.create("@method User find()", Context("App"))
        assert tag.return_type == Object_("\\App\\User")

    def test_invalid_author_email_propagates(self, factory):
        with pytest.raises(InvalidTagError):
            factory.create("@author Jane <jane-at-example>")

    def test_invalid_tag_line_raises(self, factory):
        with pytest.raises(InvalidTagError):
            factory.create("@")

    def test_register_custom_recognizer(self, factory):
        factory.register("since", lambda body, context: GenericTag("since", Description(f"v{body}")))
        assert factory.recognizes("since")
        assert str(factory.create("@since 1.2")) == "v1.2"

    def test_default_collaborators(self):
        tag = TagFactory().create("@method void run()")
        assert tag.method_name == "run"
