"""Minimal host application used by the CLI and loader tests."""

from typing import Annotated

from pydantic import BaseModel

from collection_creator.routes.base import Body, Query
from collection_creator.routes.table import RouteTable

routes = RouteTable()


class Pet(BaseModel):
    name: str
    age: int


@routes.route("/pets", methods=["GET"])
def list_pets(limit: Annotated[int, Query(default="10")], owner: str = Query()):
    return []


@routes.route("/pets", methods=["POST"])
def create_pet(pet: Annotated[Pet, Body()]):
    return pet


not_routes = 42
