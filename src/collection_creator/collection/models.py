"""Postman collection document models.

Instances are built once per generation run and never mutated.
Dump with ``by_alias=True`` so ``schema_`` is written as ``schema``.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Info(_Frozen):
    name: str
    schema_: str = Field(alias="schema")


class Header(_Frozen):
    key: str
    value: str
    type: str = "text"


class RawOptions(_Frozen):
    language: str = "json"


class BodyOptions(_Frozen):
    raw: RawOptions = RawOptions()


class RequestBody(_Frozen):
    mode: str = "raw"
    raw: str
    options: BodyOptions = BodyOptions()


class RequestTemplate(_Frozen):
    method: str  # GET / POST / PUT / DELETE / PATCH
    header: list[Header] = []
    body: RequestBody | None = None
    url: str


class Item(_Frozen):
    name: str  # {pattern}_{METHOD}
    request: RequestTemplate
    response: list = []


class Collection(_Frozen):
    info: Info
    item: list[Item] = []
