"""Placeholder extraction for a route's body and query parameters."""

import inspect
from typing import Any

from collection_creator.generator.defaults import resolve_default
from collection_creator.routes.base import FieldDescriptor, ParameterDescriptor, RouteDescriptor
from collection_creator.routes.introspect import describe_fields, describe_handler


class ParameterExtractor:
    """Fills body and query placeholder mappings for one route."""

    def extract(self, route: RouteDescriptor, body_defaults: dict[str, Any], query_defaults: dict[str, Any]) -> None:
        """Populate ``body_defaults`` and ``query_defaults`` in place.

        Introspection errors propagate; the caller decides whether the
        route is skipped.
        """
        for param in self.parameters_for(route):
            if param.kind == "body":
                self._extract_body(param, body_defaults)
            elif param.kind == "query":
                self._extract_query(param, query_defaults)

    def parameters_for(self, route: RouteDescriptor) -> list[ParameterDescriptor]:
        if route.parameters is not None:
            return route.parameters
        if route.handler is None:
            return []
        return describe_handler(route.handler)

    def _extract_body(self, param: ParameterDescriptor, body_defaults: dict[str, Any]) -> None:
        fields: list[FieldDescriptor] = param.fields if param.fields is not None else describe_fields(param.type)
        for field in fields:
            body_defaults[field.name] = resolve_default(field.type)

    def _extract_query(self, param: ParameterDescriptor, query_defaults: dict[str, Any]) -> None:
        name = param.alias if param.alias and param.alias.strip() else param.name

        if _has_literal(param.default):
            value = param.default
        else:
            value = resolve_default(param.type)

        if value is None or not str(value).strip():
            value = "{" + name + "}"

        query_defaults[name] = value


def _has_literal(default: Any) -> bool:
    if default is None or default is inspect.Parameter.empty:
        return False
    return bool(str(default).strip())
