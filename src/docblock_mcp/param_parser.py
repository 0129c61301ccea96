"""Parse parameter fragments (``Type &...$name``) and ``@param`` tag bodies."""

from __future__ import annotations

import logging
import re

from .description import DescriptionFactory
from .exceptions import InvalidTagError
from .models import Parameter
from .type_resolver import MIXED, Context, TypeResolver


logger = logging.getLogger(__name__)

_VARIABLE_PREFIXES = ("$", "&$", "...$", "&...$")
_WHITESPACE_RE = re.compile(r"\s+")
_VARIABLE_RE = re.compile(
    r"(?P<reference>&)?(?P<variadic>\.\.\.)?\$(?P<name>\w+)(?P<rest>.*)",
    re.DOTALL,
)


def require_collaborators(
    body: str,
    type_resolver: TypeResolver | None,
    description_factory: DescriptionFactory | None,
    tag: str,
) -> None:
    """Raise InvalidTagError unless body is non-empty and both collaborators are set."""
    if not isinstance(body, str) or not body:
        raise InvalidTagError(f"The {tag} tag body must be a non-empty string", tag=tag)
    if type_resolver is None:
        raise InvalidTagError(f"The {tag} tag requires a type resolver", tag=tag)
    if description_factory is None:
        raise InvalidTagError(f"The {tag} tag requires a description factory", tag=tag)


def parse_parameter(
    fragment: str,
    type_resolver: TypeResolver,
    description_factory: DescriptionFactory,
    context: Context | None = None,
) -> Parameter | None:
    """Parse ``[Type] [&][...]$name [description]`` into a Parameter.

    Returns None when no ``$name`` token can be found.
    """
    fragment = fragment.strip()
    is_variadic = False
    if fragment.startswith("..."):
        fragment = fragment[3:].lstrip()
        is_variadic = True
    if not fragment:
        return None

    param_type = MIXED
    head, *tail = _WHITESPACE_RE.split(fragment, maxsplit=1)
    if not head.startswith(_VARIABLE_PREFIXES):
        param_type = type_resolver.resolve(head, context)
        fragment = tail[0] if tail else ""

    match = _VARIABLE_RE.match(fragment)
    if match is None:
        logger.debug("No variable name in parameter fragment %r", fragment)
        return None

    description = description_factory.create(match.group("rest"), context)
    return Parameter(
        variable_name=match.group("name"),
        type=param_type,
        is_reference=match.group("reference") is not None,
        is_variadic=is_variadic or match.group("variadic") is not None,
        description=description,
    )


def parse_param(
    body: str,
    type_resolver: TypeResolver | None = None,
    description_factory: DescriptionFactory | None = None,
    context: Context | None = None,
) -> Parameter | None:
    """Recognize the body of a ``@param`` tag."""
    require_collaborators(body, type_resolver, description_factory, Parameter.name)
    return parse_parameter(body, type_resolver, description_factory, context)
