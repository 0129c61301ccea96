"""Recognize ``@author`` tag bodies: ``Name <email>``."""

from __future__ import annotations

import logging
import re

from .models import AuthorTag


logger = logging.getLogger(__name__)

_AUTHOR_RE = re.compile(r"(?P<name>[^<]*)(?:<(?P<email>[^>]*)>)?")


def parse_author(content: str) -> AuthorTag | None:
    """Split an author tag into name and e-mail.

    Returns None if the content has text after the ``<...>`` block or more
    than one such block. Raises InvalidTagError when the e-mail is present
    but not a valid address.
    """
    # a single trailing newline is tolerated, as with a '$' anchor
    if content.endswith("\n"):
        content = content[:-1]
    match = _AUTHOR_RE.fullmatch(content)
    if match is None:
        logger.debug("Body does not match the author grammar: %r", content)
        return None

    author_name = match.group("name").strip()
    author_email = (match.group("email") or "").strip()
    return AuthorTag(author_name, author_email)
