"""Dispatch ``@name body`` tag lines to the recognizer for that tag name."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from .author_parser import parse_author
from .description import DescriptionFactory
from .exceptions import InvalidTagError
from .method_parser import parse_method
from .models import GenericTag, Tag
from .param_parser import parse_param
from .type_resolver import Context, TypeResolver


logger = logging.getLogger(__name__)

Recognizer = Callable[[str, "Context | None"], "Tag | None"]

_TAG_LINE_RE = re.compile(r"@?(?P<name>[\w\\:-]+)(?:\s+(?P<body>.*))?", re.DOTALL)


class TagFactory:
    """Create typed tags from tag lines, falling back to GenericTag."""

    def __init__(
        self,
        type_resolver: TypeResolver | None = None,
        description_factory: DescriptionFactory | None = None,
    ):
        self.type_resolver = type_resolver or TypeResolver()
        self.description_factory = description_factory or DescriptionFactory()
        self._recognizers: dict[str, Recognizer] = {
            "method": lambda body, context: parse_method(
                body, self.type_resolver, self.description_factory, context
            ),
            "param": lambda body, context: parse_param(
                body, self.type_resolver, self.description_factory, context
            ),
            "author": lambda body, context: parse_author(body),
        }

    def register(self, tag_name: str, recognizer: Recognizer) -> None:
        """Use recognizer for tags called tag_name, replacing any existing one."""
        self._recognizers[tag_name] = recognizer

    def recognizes(self, tag_name: str) -> bool:
        return tag_name in self._recognizers

    def create(self, tag_line: str, context: Context | None = None) -> Tag:
        match = _TAG_LINE_RE.fullmatch(tag_line.strip())
        if match is None:
            raise InvalidTagError(f"Not a valid tag line: {tag_line!r}")

        tag_name = match.group("name")
        body = (match.group("body") or "").strip()

        recognizer = self._recognizers.get(tag_name)
        tag = recognizer(body, context) if recognizer and body else None
        if tag is None:
            logger.debug("Falling back to a generic tag for @%s", tag_name)
            return GenericTag(tag_name, self.description_factory.create(body, context))
        return tag


def render_tag(tag: Tag) -> str:
    """Render a tag back to its ``@name body`` line."""
    body = str(tag)
    return f"@{tag.name} {body}" if body else f"@{tag.name}"
