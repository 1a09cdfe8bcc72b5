"""Handler and body-type introspection.

Turns a handler's signature into ParameterDescriptor models and a body
type's declared fields into FieldDescriptor models.
"""

import dataclasses
import inspect
import types
from typing import Annotated, Any, Callable, ClassVar, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from .base import Body, FieldDescriptor, ParameterDescriptor, Query


def describe_handler(handler: Callable[..., Any]) -> list[ParameterDescriptor]:
    """Describe the body and query parameters declared by a handler.

    Parameters are tagged either through ``Annotated`` metadata
    (``user: Annotated[User, Body()]``) or through their default value
    (``page: int = Query(default="1")``). Untagged parameters are left out.
    """
    target = inspect.unwrap(handler)
    signature = inspect.signature(target)
    hints = get_type_hints(target, include_extras=True)

    descriptors = []
    for name, param in signature.parameters.items():
        annotation = hints.get(name, param.annotation)
        if annotation is inspect.Parameter.empty:
            annotation = None

        marker, annotation = _split_marker(annotation, param.default)
        if marker is None:
            continue

        if isinstance(marker, Body):
            descriptors.append(ParameterDescriptor(kind="body", name=name, type=annotation))
            continue

        default = marker.default
        if default is None and not _is_marker(param.default) and param.default is not inspect.Parameter.empty:
            default = param.default
        descriptors.append(
            ParameterDescriptor(
                kind="query",
                name=name,
                type=annotation,
                alias=marker.alias,
                default=default,
            )
        )
    return descriptors


def describe_fields(body_type: Any) -> list[FieldDescriptor]:
    """List the declared fields of a body type, inherited ones first.

    Supports pydantic models, dataclasses and annotated classes
    (including TypedDict). Anything else has no fields.
    """
    if get_origin(body_type) is Annotated:
        body_type = get_args(body_type)[0]
    body_type = _strip_optional(body_type)
    if not inspect.isclass(body_type):
        return []

    if issubclass(body_type, BaseModel):
        return [
            FieldDescriptor(name=info.alias or name, type=info.annotation)
            for name, info in body_type.model_fields.items()
        ]

    hints = get_type_hints(body_type, include_extras=True)
    if dataclasses.is_dataclass(body_type):
        return [
            FieldDescriptor(name=f.name, type=hints.get(f.name, f.type))
            for f in dataclasses.fields(body_type)
        ]

    return [
        FieldDescriptor(name=name, type=hint)
        for name, hint in hints.items()
        if get_origin(hint) is not ClassVar and hint is not ClassVar
    ]


def _strip_optional(tp: Any) -> Any:
    """Optional[X] and X | None describe the same fields as X."""
    if get_origin(tp) in (Union, types.UnionType):
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return tp


def _split_marker(annotation: Any, default: Any) -> tuple[Body | Query | None, Any]:
    """Return (marker, bare annotation) for one parameter."""
    if get_origin(annotation) is Annotated:
        base, *metadata = get_args(annotation)
        for meta in metadata:
            if meta is Body or meta is Query:
                return meta(), base
            if _is_marker(meta):
                return meta, base
        annotation = base

    if _is_marker(default):
        return default, annotation
    if default is Body or default is Query:
        return default(), annotation
    return None, annotation


def _is_marker(value: Any) -> bool:
    return isinstance(value, (Body, Query))
