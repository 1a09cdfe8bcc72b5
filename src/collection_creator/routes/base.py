"""Route table data models.

Every source of routes (decorated handlers, descriptor files, imported
host tables) is converted into these models before a collection is
assembled from them.
"""

from typing import Any, Callable, NewType

from pydantic import BaseModel, ConfigDict, field_validator

Char = NewType("Char", str)
"""A single character. Resolves to the null character as a placeholder."""


class Body:
    """Marks a handler parameter as the request body."""

    def __repr__(self) -> str:
        return "Body()"


class Query:
    """Marks a handler parameter as a query/request parameter.

    ``alias`` is the name the parameter is bound to in the query string;
    ``default`` is the literal used when the request omits it.
    """

    def __init__(self, alias: str | None = None, default: Any = None):
        self.alias = alias
        self.default = default

    def __repr__(self) -> str:
        return f"Query(alias={self.alias!r}, default={self.default!r})"


class FieldDescriptor(BaseModel):
    """A declared field of a request-body type."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    type: Any = None  # Python annotation or type name such as "int"


class ParameterDescriptor(BaseModel):
    """A declared handler input bound from the body or the query string."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: str  # body / query
    name: str
    type: Any = None
    alias: str | None = None
    default: Any = None
    fields: list[FieldDescriptor] | None = None  # body only; None means "inspect the type"

    @field_validator("kind")
    @classmethod
    def _check_kind(cls, value: str) -> str:
        value = value.lower()
        if value not in ("body", "query"):
            raise ValueError(f"unknown parameter kind: {value!r}")
        return value


class RouteDescriptor(BaseModel):
    """One registered route: URL patterns x HTTP methods -> handler."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    patterns: list[str]
    methods: list[str]
    handler: Callable[..., Any] | None = None
    parameters: list[ParameterDescriptor] | None = None  # None means "introspect the handler"
    name: str = ""

    @field_validator("methods")
    @classmethod
    def _upper_methods(cls, value: list[str]) -> list[str]:
        return [m.upper() for m in value]

    @property
    def label(self) -> str:
        """Human-readable identity used in logs and reports."""
        if self.name:
            return self.name
        if self.handler is not None:
            return getattr(self.handler, "__qualname__", repr(self.handler))
        return ",".join(self.patterns) or "<no pattern>"
