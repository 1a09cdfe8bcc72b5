import collections.abc
import typing
from dataclasses import dataclass
from typing import Annotated, NewType, Optional

import pytest

from collection_creator.generator.defaults import resolve_default
from collection_creator.routes.base import Char

UserId = NewType("UserId", int)


@dataclass
class Address:
    street: str


class TestPythonAnnotations:
    @pytest.mark.parametrize("tp, expected", [(int, 0), (float, 0.0), (bool, False)])
    def test_primitives_resolve_to_zero_values(self, tp, expected):
        value = resolve_default(tp)
        assert value == expected
        assert type(value) is type(expected)

    def test_char_resolves_to_null_character(self):
        assert resolve_default(Char) == "\u0000"

    @pytest.mark.parametrize("tp", [Optional[int], int | None, Optional[bool], Optional[Char], float | None])
    def test_nullable_types_are_absent(self, tp):
        assert resolve_default(tp) is None

    def test_string_like(self):
        assert resolve_default(str) == ""
        assert resolve_default(bytes) == ""

    @pytest.mark.parametrize("tp", [list, list[int], typing.List[str], tuple, set[int], collections.abc.Sequence[int]])
    def test_collections_resolve_to_empty_list(self, tp):
        assert resolve_default(tp) == []

    @pytest.mark.parametrize("tp", [dict, dict[str, int], typing.Mapping[str, str]])
    def test_mappings_resolve_to_empty_dict(self, tp):
        assert resolve_default(tp) == {}

    def test_annotated_and_newtype_unwrap(self):
        assert resolve_default(Annotated[int, "meta"]) == 0
        assert resolve_default(UserId) == 0

    @pytest.mark.parametrize("tp", [Address, object, typing.Any, None, typing.Literal["a"]])
    def test_unrecognized_types_are_absent(self, tp):
        assert resolve_default(tp) is None

    def test_containers_are_fresh(self):
        first = resolve_default(list)
        first.append(1)
        assert resolve_default(list) == []


class TestTypeNames:
    @pytest.mark.parametrize(
        "name, expected",
        [("int", 0), ("long", 0), ("short", 0), ("byte", 0), ("double", 0.0), ("float", 0.0), ("boolean", False)],
    )
    def test_primitive_names(self, name, expected):
        assert resolve_default(name) == expected

    def test_char_name(self):
        assert resolve_default("char") == "\u0000"

    @pytest.mark.parametrize("name", ["Integer", "Long", "Double", "Boolean", "Character", "int?", "Optional[int]"])
    def test_nullable_names(self, name):
        assert resolve_default(name) is None

    @pytest.mark.parametrize("name", ["str", "String", "string"])
    def test_string_names(self, name):
        assert resolve_default(name) == ""

    def test_collection_and_map_names(self):
        assert resolve_default("list[str]") == []
        assert resolve_default("array") == []
        assert resolve_default("Map") == {}
        assert resolve_default("dict[str, int]") == {}

    def test_unknown_name(self):
        assert resolve_default("UserDto") is None
        assert resolve_default("") is None
