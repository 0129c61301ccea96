"""FastMCP server exposing the docblock tag recognizers as tools."""

from __future__ import annotations

import json
import logging

from mcp.server.fastmcp import FastMCP

from .author_parser import parse_author
from .config import Settings, load_settings
from .description import DescriptionFactory
from .exceptions import InvalidTagError
from .method_parser import parse_method
from .models import AuthorTag, GenericTag, MethodTag, Parameter, Tag
from .param_parser import parse_param
from .tag_factory import TagFactory, render_tag
from .type_resolver import TypeResolver

mcp = FastMCP("docblock")

logger = logging.getLogger(__name__)

_settings: Settings | None = None
_type_resolver = TypeResolver()
_description_factory = DescriptionFactory()
_tag_factory = TagFactory(_type_resolver, _description_factory)


def _get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def _parameter_payload(parameter: Parameter) -> dict:
    return {
        "variable_name": parameter.variable_name,
        "type": str(parameter.type),
        "is_reference": parameter.is_reference,
        "is_variadic": parameter.is_variadic,
        "description": parameter.description.render() if parameter.description else "",
    }


def _tag_payload(tag: Tag | None) -> dict:
    """Convert a recognized tag (or None) to a JSON-ready dict."""
    if tag is None:
        return {"recognized": False}

    payload: dict = {"recognized": True, "name": tag.name}
    if isinstance(tag, MethodTag):
        payload.update({
            "method_name": tag.method_name,
            "is_static": tag.is_static,
            "return_type": str(tag.return_type),
            "parameters": [_parameter_payload(p) for p in tag.parameters],
            "arguments": [
                {"name": a["name"], "type": str(a["type"])} for a in tag.arguments
            ],
        })
    elif isinstance(tag, AuthorTag):
        payload.update({
            "author_name": tag.author_name,
            "author_email": tag.author_email,
        })
    elif isinstance(tag, Parameter):
        payload.update(_parameter_payload(tag))
    elif isinstance(tag, GenericTag):
        payload["recognized"] = False

    payload["description"] = tag.description.render() if tag.description else ""
    payload["rendered"] = str(tag)
    return payload


# ---------------------------------------------------------------------------
# Tool 1: docblock_parse_method
# ---------------------------------------------------------------------------
@mcp.tool()
def docblock_parse_method(body: str, namespace: str | None = None) -> str:
    """
    Parse the body of an @method tag into its typed parts.

    Args:
        body: Tag body, e.g. "static int getValue(int $x) Gets a value."
        namespace: Namespace used to qualify class names (defaults to config)

    Returns:
        str: JSON with method name, static flag, return type, parameters,
        description and the reconstructed tag text
    """
    context = _get_settings().context(namespace)
    try:
        tag = parse_method(body, _type_resolver, _description_factory, context)
    except InvalidTagError as exc:
        return json.dumps({"error": str(exc)})
    return json.dumps(_tag_payload(tag))


# ---------------------------------------------------------------------------
# Tool 2: docblock_parse_author
# ---------------------------------------------------------------------------
@mcp.tool()
def docblock_parse_author(body: str) -> str:
    """
    Parse the body of an @author tag.

    Args:
        body: Tag body, e.g. "Jane Doe <jane@example.com>"

    Returns:
        str: JSON with author name and e-mail
    """
    try:
        tag = parse_author(body)
    except InvalidTagError as exc:
        return json.dumps({"error": str(exc)})
    return json.dumps(_tag_payload(tag))


# ---------------------------------------------------------------------------
# Tool 3: docblock_parse_param
# ---------------------------------------------------------------------------
@mcp.tool()
def docblock_parse_param(body: str, namespace: str | None = None) -> str:
    """
    Parse the body of an @param tag.

    Args:
        body: Tag body, e.g. "string &$name The name."
        namespace: Namespace used to qualify class names (defaults to config)

    Returns:
        str: JSON with variable name, type, reference/variadic flags and description
    """
    context = _get_settings().context(namespace)
    try:
        tag = parse_param(body, _type_resolver, _description_factory, context)
    except InvalidTagError as exc:
        return json.dumps({"error": str(exc)})
    return json.dumps(_tag_payload(tag))


# ---------------------------------------------------------------------------
# Tool 4: docblock_parse_tag
# ---------------------------------------------------------------------------
@mcp.tool()
def docblock_parse_tag(tag_line: str, namespace: str | None = None) -> str:
    """
    Parse a full tag line, dispatching on the tag name.

    Tags without a recognizer, or whose body does not match, come back
    with "recognized": false and the body as description.

    Args:
        tag_line: A line such as "@method void setName(string $name)"
        namespace: Namespace used to qualify class names (defaults to config)

    Returns:
        str: JSON with the typed tag fields and the reconstructed tag line
    """
    context = _get_settings().context(namespace)
    try:
        tag = _tag_factory.create(tag_line, context)
    except InvalidTagError as exc:
        return json.dumps({"error": str(exc)})
    payload = _tag_payload(tag)
    payload["tag_line"] = render_tag(tag)
    return json.dumps(payload)


def main():
    settings = _get_settings()
    # stdout carries the stdio transport
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting docblock MCP server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
