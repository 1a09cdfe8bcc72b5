"""Load route tables from descriptor files or importable host modules."""

import importlib
from pathlib import Path

import yaml
from pydantic import ValidationError

from collection_creator.errors import RouteTableError

from .base import RouteDescriptor
from .table import RouteTable

DESCRIPTOR_SUFFIXES = (".yaml", ".yml", ".json")


def load_route_table(file_path: Path) -> RouteTable:
    """Load a YAML or JSON route descriptor file into a RouteTable.

    Each route lists its ``paths``, ``methods`` and ``parameters``;
    body parameters carry their ``fields`` explicitly.
    """
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise RouteTableError(f"{file_path}: {e}") from e

    if not isinstance(doc, dict) or not isinstance(doc.get("routes"), list):
        raise RouteTableError(f"{file_path}: expected a top-level 'routes' list")

    return RouteTable(_parse_route(file_path, index, entry) for index, entry in enumerate(doc["routes"]))


def import_route_table(spec: str) -> RouteTable:
    """Import ``module:attribute`` and return it as a RouteTable."""
    module_name, _, attr_path = spec.partition(":")
    if not module_name or not attr_path:
        raise RouteTableError(f"import spec must look like 'module:attribute', got {spec!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise RouteTableError(f"cannot import {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise RouteTableError(f"{module_name!r} has no attribute {attr_path!r}") from e

    if isinstance(obj, RouteTable):
        return obj
    try:
        routes = list(obj)
    except TypeError as e:
        raise RouteTableError(f"{spec!r} is not a route table") from e
    if not all(isinstance(r, RouteDescriptor) for r in routes):
        raise RouteTableError(f"{spec!r} does not contain RouteDescriptor entries")
    return RouteTable(routes)


def is_descriptor_file(source: str) -> bool:
    return source.lower().endswith(DESCRIPTOR_SUFFIXES)


def _parse_route(file_path: Path, index: int, entry: dict) -> RouteDescriptor:
    if not isinstance(entry, dict):
        raise RouteTableError(f"{file_path}: route #{index} is not a mapping")

    paths = entry.get("paths", entry.get("path")) or []
    methods = entry.get("methods", entry.get("method")) or []
    try:
        route = RouteDescriptor(
            patterns=[paths] if isinstance(paths, str) else paths,
            methods=[methods] if isinstance(methods, str) else methods,
            parameters=entry.get("parameters") or [],
            name=entry.get("name", ""),
        )
    except ValidationError as e:
        raise RouteTableError(f"{file_path}: route #{index}: {e}") from e

    for param in route.parameters:
        if param.kind == "body" and param.fields is None:
            raise RouteTableError(f"{file_path}: route #{index}: body parameter {param.name!r} has no fields")
    return route
