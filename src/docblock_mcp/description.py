"""Free-text tag descriptions."""

from __future__ import annotations

from dataclasses import dataclass

from .type_resolver import Context
from .utils import dedent_block


@dataclass(frozen=True)
class Description:
    body: str

    def render(self) -> str:
        return self.body

    def __str__(self) -> str:
        return self.render()

    def __bool__(self) -> bool:
        return self.body != ""


class DescriptionFactory:
    """Create a Description from the raw text trailing a tag."""

    def create(self, text: str, context: Context | None = None) -> Description:
        # context is accepted for inline-tag expansion, which is not done here
        return Description(dedent_block(text))
