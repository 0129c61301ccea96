"""Immutable value objects for recognized docblock tags."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import ClassVar, Union

from .description import Description
from .exceptions import InvalidTagError
from .type_resolver import MIXED, VOID, Type
from .utils import is_valid_email


@dataclass(frozen=True)
class Parameter:
    """A method argument, and also the ``@param`` tag."""

    name: ClassVar[str] = "param"

    variable_name: str
    type: Type = MIXED
    is_reference: bool = False
    is_variadic: bool = False
    description: Description | None = None

    def __post_init__(self):
        if self.type is None:
            object.__setattr__(self, "type", MIXED)

    def signature(self) -> str:
        """Render as a method argument: ``type [&][...]$name``."""
        return (
            f"{self.type} "
            f"{'&' if self.is_reference else ''}"
            f"{'...' if self.is_variadic else ''}"
            f"${self.variable_name}"
        )

    def __str__(self) -> str:
        text = self.signature()
        if self.description:
            text += f" {self.description.render()}"
        return text


@dataclass(frozen=True)
class MethodTag:
    name: ClassVar[str] = "method"

    method_name: str
    return_type: Type = VOID
    is_static: bool = False
    description: Description | None = None
    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self):
        if not isinstance(self.method_name, str) or not self.method_name:
            raise InvalidTagError("The method tag requires a non-empty method name", tag=self.name)
        if self.return_type is None:
            object.__setattr__(self, "return_type", VOID)
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @classmethod
    def from_arguments(
        cls,
        method_name: str,
        arguments: Iterable[str | Mapping[str, object]] = (),
        return_type: Type | None = None,
        static: bool = False,
        description: Description | None = None,
    ) -> MethodTag:
        """Build a method tag from the legacy ``{name, type}`` argument list.

        Items may be a bare variable name or a mapping with ``name`` and an
        optional ``type``; a missing type becomes ``mixed``.
        """
        parameters = []
        for argument in arguments:
            if isinstance(argument, str):
                argument = {"name": argument}
            keys = sorted(argument)
            if keys not in (["name"], ["name", "type"]):
                raise InvalidTagError(
                    f'Arguments can only have the "name" and "type" fields, found: {keys}',
                    tag=cls.name,
                )
            parameters.append(Parameter(argument["name"], argument.get("type") or MIXED))
        return cls(
            method_name,
            return_type=return_type or VOID,
            is_static=static,
            description=description,
            parameters=tuple(parameters),
        )

    @property
    def arguments(self) -> list[dict[str, object]]:
        """Deprecated ``{name, type}`` view of ``parameters``."""
        return [{"name": p.variable_name, "type": p.type} for p in self.parameters]

    def __str__(self) -> str:
        head = " ".join(
            part
            for part in ("static" if self.is_static else "", str(self.return_type), self.method_name)
            if part
        )
        arguments = ", ".join(p.signature() for p in self.parameters)
        text = f"{head}({arguments})"
        if self.description:
            text += f" {self.description.render()}"
        return text


@dataclass(frozen=True)
class AuthorTag:
    name: ClassVar[str] = "author"

    author_name: str
    author_email: str = ""

    def __post_init__(self):
        errors = validate_author(self.author_name, self.author_email).errors
        if errors:
            raise InvalidTagError(errors[0], tag=self.name)

    @property
    def description(self) -> Description | None:
        return None

    def __str__(self) -> str:
        return f"{self.author_name}<{self.author_email}>"


@dataclass(frozen=True)
class GenericTag:
    """Any tag without a dedicated recognizer, kept as free text."""

    name: str
    description: Description | None = None

    def __str__(self) -> str:
        return self.description.render() if self.description else ""


Tag = Union[MethodTag, AuthorTag, Parameter, GenericTag]


@dataclass
class ValidationResult:
    """Problems found while checking tag input."""

    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_author(author_name: object, author_email: object) -> ValidationResult:
    """Check author tag fields without raising."""
    result = ValidationResult()
    if not isinstance(author_name, str):
        result.errors.append("The author tag does not have a valid name")
    if not isinstance(author_email, str) or (author_email and not is_valid_email(author_email)):
        result.errors.append("The author tag does not have a valid e-mail address")
    return result
