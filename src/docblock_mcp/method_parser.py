"""Recognize ``@method`` tag bodies such as ``static int getValue(int $x) Gets a value.``"""

from __future__ import annotations

import logging
import re

from .description import DescriptionFactory
from .models import MethodTag
from .param_parser import parse_parameter, require_collaborators
from .type_resolver import Context, TypeResolver
from .utils import split_arguments


logger = logging.getLogger(__name__)

_METHOD_RE = re.compile(
    r"""
    # "static" only counts as the keyword when whitespace follows it
    (?:
        (?P<static>static)
        \s+
    )?
    # Return type: a $this-style type, or word/pipe/backslash runs with [] suffixes
    (?:
        (?P<return_type>
            [\w|\\]*\$this[\w|\\]*
            |
            (?:[\w|\\](?:[\w|\\]|\[\])*)?
        )
        \s+
    )?
    (?P<method_name>\w+)
    (?:
        \((?P<arguments>[^)]*)\)
    )?
    \s*
    (?P<description>.*)
    """,
    re.VERBOSE | re.DOTALL,
)


def parse_method(
    body: str,
    type_resolver: TypeResolver | None = None,
    description_factory: DescriptionFactory | None = None,
    context: Context | None = None,
) -> MethodTag | None:
    """Recognize a method tag body.

    Returns None if the body does not match the method grammar or if any
    argument lacks a ``$name``. Raises InvalidTagError for an empty body or
    a missing collaborator.
    """
    require_collaborators(body, type_resolver, description_factory, MethodTag.name)

    match = _METHOD_RE.fullmatch(body)
    if match is None:
        logger.debug("Body does not match the method grammar: %r", body)
        return None

    is_static = match.group("static") == "static"
    raw_return_type = match.group("return_type") or "void"
    return_type = type_resolver.resolve(raw_return_type, context)
    description = description_factory.create(match.group("description"), context)

    parameters = []
    for fragment in split_arguments(match.group("arguments") or ""):
        parameter = parse_parameter(fragment, type_resolver, description_factory, context)
        if parameter is None:
            logger.debug(
                "Argument %r of method %s is not a parameter",
                fragment,
                match.group("method_name"),
            )
            return None
        parameters.append(parameter)

    return MethodTag(
        method_name=match.group("method_name"),
        return_type=return_type,
        is_static=is_static,
        description=description,
        parameters=tuple(parameters),
    )
