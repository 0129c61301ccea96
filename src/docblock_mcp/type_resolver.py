"""Type value objects and a small resolver for raw docblock type strings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidTagError


_KEYWORDS = {
    "array",
    "bool",
    "callable",
    "false",
    "float",
    "int",
    "iterable",
    "mixed",
    "never",
    "null",
    "object",
    "parent",
    "resource",
    "self",
    "static",
    "string",
    "true",
    "void",
}

_KEYWORD_ALIASES = {
    "integer": "int",
    "boolean": "bool",
    "double": "float",
}


@dataclass(frozen=True)
class Context:
    """Namespace and import aliases in effect where a docblock appears."""

    namespace: str = ""
    aliases: dict[str, str] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.namespace, tuple(sorted(self.aliases.items()))))


class Type:
    """Base for resolved types. Subclasses render their canonical form via str()."""


@dataclass(frozen=True)
class Keyword(Type):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class This(Type):
    def __str__(self) -> str:
        return "$this"


@dataclass(frozen=True)
class Object_(Type):
    """A class reference with its fully qualified name."""

    fqsen: str

    def __str__(self) -> str:
        return self.fqsen


@dataclass(frozen=True)
class Array_(Type):
    value_type: Type

    def __str__(self) -> str:
        if isinstance(self.value_type, Compound):
            return f"({self.value_type})[]"
        return f"{self.value_type}[]"


@dataclass(frozen=True)
class Nullable(Type):
    actual_type: Type

    def __str__(self) -> str:
        return f"?{self.actual_type}"


@dataclass(frozen=True)
class Compound(Type):
    types: tuple[Type, ...]

    def __str__(self) -> str:
        return "|".join(str(t) for t in self.types)


MIXED = Keyword("mixed")
VOID = Keyword("void")


def _split_top_level(raw: str, separator: str) -> list[str]:
    """Split raw on separator, ignoring separators nested in (), <> or {}."""
    parts: list[str] = []
    depth = 0
    current = ""
    for char in raw:
        if char in "(<{":
            depth += 1
        elif char in ")>}":
            depth -= 1
        if char == separator and depth == 0:
            parts.append(current)
            current = ""
            continue
        current += char
    parts.append(current)
    return parts


class TypeResolver:
    """Resolve raw type tokens such as ``?int``, ``Foo[]`` or ``int|string``."""

    def resolve(self, raw: str, context: Context | None = None) -> Type:
        raw = raw.strip()
        if not raw:
            raise InvalidTagError("Attempted to resolve an empty type")
        context = context or Context()

        parts = _split_top_level(raw, "|")
        if len(parts) > 1:
            return Compound(tuple(self.resolve(part, context) for part in parts))

        if raw.startswith("?"):
            return Nullable(self.resolve(raw[1:], context))

        if raw.endswith("[]"):
            inner = raw[:-2]
            if inner.startswith("(") and inner.endswith(")"):
                inner = inner[1:-1]
            return Array_(self.resolve(inner, context))

        if raw.startswith("(") and raw.endswith(")"):
            return self.resolve(raw[1:-1], context)

        if raw == "$this":
            return This()

        lowered = raw.lower()
        if lowered in _KEYWORD_ALIASES:
            return Keyword(_KEYWORD_ALIASES[lowered])
        if lowered in _KEYWORDS:
            return Keyword(lowered)

        return Object_(self._qualify(raw, context))

    @staticmethod
    def _qualify(name: str, context: Context) -> str:
        """Expand a class name against the context's imports and namespace."""
        if name.startswith("\\"):
            return name
        head, sep, rest = name.partition("\\")
        for alias, target in context.aliases.items():
            if alias.lower() == head.lower():
                target = "\\" + target.strip("\\")
                return f"{target}\\{rest}" if sep else target
        namespace = context.namespace.strip("\\")
        if namespace:
            return f"\\{namespace}\\{name}"
        return f"\\{name}"
